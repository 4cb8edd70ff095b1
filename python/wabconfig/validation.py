"""
Validation of configuration documents.

This module provides:
- validate: check a document against the document model and collect every
  violation (it never stops at the first one and never raises)
- ValidationIssue / ErrorKind: a single finding with its path into the tree
- ValidationResult: errors, advisory warnings and the validated document

Every field is checked from its declared metadata (presence, kind, range,
length). Rules spanning several fields are applied per entity afterwards:
identifier uniqueness, hold references of combined limits, ``min <= max`` of
range pairs, row ordering of lookup tables and collection sizes.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .base import Range
from .document import ConfigDocument
from .exceptions import ValidationError
from .models.aircraft import Aircraft, ConfigurationGroup
from .models.cabin import Cabin, CabinSection
from .models.general import General
from .models.holds import CombinedLimit, Hold, HoldConfiguration
from .models.table import TABLE_SORT_KEYS, Table
from .models.variation import Variation
from .models.weight_policy import BagPolicy, PassengerPolicy
from .schema import FieldMetadata, get_field_metadata

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorKind",
    "ValidationIssue",
    "ValidationResult",
    "validate",
]


class ErrorKind(Enum):
    """Category of a validation finding."""

    MISSING_FIELD = "MissingField"
    OUT_OF_RANGE = "OutOfRange"
    DUPLICATE_ID = "DuplicateId"
    DANGLING_REFERENCE = "DanglingReference"
    INVALID_ENUM = "InvalidEnum"
    TYPE_MISMATCH = "TypeMismatch"
    NOT_SORTED = "NotSorted"
    DUPLICATE_VALUE = "DuplicateValue"
    MULTIPLE_DEFAULTS = "MultipleDefaults"  # Advisory only


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single validation finding.

    Parameters
    ----------
    path
        Location in the document using wire keys and ``[i]`` indices, e.g.
        ``variations[0].holdConfiguration.combinedLimits[1].holds[0]``.
        The empty string addresses the document itself.
    kind
        Category of the finding
    message
        Human-readable description
    """

    path: str
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        location = self.path or "<document>"
        return f"{location}: {self.message} [{self.kind.value}]"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of :func:`validate`.

    Attributes
    ----------
    document
        The validated value, as given
    errors
        Violations of the document model, in document order
    warnings
        Advisory findings that do not make the document invalid
    """

    document: Any
    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Whether the document has no errors."""
        return not self.errors

    def raise_for_errors(self) -> ConfigDocument:
        """
        Return the document, raising if it is invalid.

        Returns
        -------
        ConfigDocument
            The validated document

        Raises
        ------
        ValidationError
            If any error was found
        """
        if self.errors:
            raise ValidationError(self.errors)
        return self.document


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _key(cls: type, name: str) -> str:
    return get_field_metadata(cls)[name].key


def _as_number(value: Any) -> float | None:
    """Return ``value`` if it is a finite number, else None."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _as_identifier(value: Any) -> int | None:
    number = _as_number(value)
    if number is None or number != int(number):
        return None
    return int(number)


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


_KIND_NAMES = {float: "a number", int: "an integer", str: "a string", bool: "a boolean"}


class _DocumentValidator:
    """Collects issues while walking one document."""

    def __init__(self, require_complete: bool) -> None:
        self.require_complete = require_complete
        self.errors: list[ValidationIssue] = []
        self.warnings: list[ValidationIssue] = []
        self._rules: dict[type, Callable[[Any, str], None]] = {
            ConfigDocument: self._check_document,
            Variation: self._check_variation,
            General: self._check_general,
            Range: self._check_range,
            Aircraft: self._check_aircraft,
            ConfigurationGroup: self._check_configuration_group,
            PassengerPolicy: self._check_passenger_policy,
            BagPolicy: self._check_bag_policy,
            Cabin: self._check_cabin,
            CabinSection: self._check_cabin_section,
            HoldConfiguration: self._check_hold_configuration,
            Table: self._check_table,
        }

    def error(self, path: str, kind: ErrorKind, message: str) -> None:
        self.errors.append(ValidationIssue(path, kind, message))

    def warn(self, path: str, kind: ErrorKind, message: str) -> None:
        self.warnings.append(ValidationIssue(path, kind, message))

    # ------------------------------------------------------------------
    # Metadata driven checks
    # ------------------------------------------------------------------

    def check_entity(self, value: Any, cls: type, path: str) -> None:
        if not isinstance(value, cls):
            self.error(
                path,
                ErrorKind.TYPE_MISMATCH,
                f"expected {cls.__name__} object, got {_describe(value)}",
            )
            return

        for name, meta in get_field_metadata(cls).items():
            self.check_field(getattr(value, name), meta, _join(path, meta.key))

        for rule_cls, rule in self._rules.items():
            if isinstance(value, rule_cls):
                rule(value, path)

    def check_field(self, value: Any, meta: FieldMetadata, path: str) -> None:
        if value is None:
            if not meta.optional:
                self.error(path, ErrorKind.MISSING_FIELD, "field is required")
            return

        if not meta.many:
            self.check_value(value, meta, path)
            return

        if not isinstance(value, list | tuple):
            self.error(
                path,
                ErrorKind.TYPE_MISMATCH,
                f"expected a list, got {_describe(value)}",
            )
            return
        for i, item in enumerate(value):
            self.check_value(item, meta, f"{path}[{i}]")

    def check_value(self, value: Any, meta: FieldMetadata, path: str) -> None:
        if meta.is_entity:
            self.check_entity(value, meta.kind, path)
        elif meta.is_enum:
            if isinstance(value, meta.kind):
                return
            if isinstance(value, str):
                allowed = ", ".join(member.value for member in meta.kind)
                self.error(
                    path,
                    ErrorKind.INVALID_ENUM,
                    f"{value!r} is not one of: {allowed}",
                )
            else:
                self.error(
                    path,
                    ErrorKind.TYPE_MISMATCH,
                    f"expected {meta.kind.__name__} value, got {_describe(value)}",
                )
        elif meta.kind is float or meta.kind is int:
            self.check_number(value, meta, path)
        elif not isinstance(value, meta.kind):
            self.error(
                path,
                ErrorKind.TYPE_MISMATCH,
                f"expected {_KIND_NAMES[meta.kind]}, got {_describe(value)}",
            )
        elif meta.length is not None and len(value) != meta.length:
            self.error(
                path,
                ErrorKind.OUT_OF_RANGE,
                f"must be exactly {meta.length} characters long, got {len(value)}",
            )

    def check_number(self, value: Any, meta: FieldMetadata, path: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            self.error(
                path,
                ErrorKind.TYPE_MISMATCH,
                f"expected {_KIND_NAMES[meta.kind]}, got {_describe(value)}",
            )
            return
        if _as_number(value) is None:
            self.error(path, ErrorKind.TYPE_MISMATCH, f"{value} is not a finite number")
            return
        if meta.kind is int and _as_identifier(value) is None:
            self.error(path, ErrorKind.TYPE_MISMATCH, f"{value} is not an integer")
            return

        if meta.range is not None:
            min_val, max_val = meta.range
            if value < min_val or value > max_val:
                if max_val == math.inf:
                    message = f"value {value} must not be below {min_val}"
                else:
                    message = (
                        f"value {value} is outside valid range [{min_val}, {max_val}]"
                    )
                self.error(path, ErrorKind.OUT_OF_RANGE, message)
                return
        if meta.positive and value <= 0:
            self.error(
                path, ErrorKind.OUT_OF_RANGE, f"value {value} must be greater than 0"
            )

    # ------------------------------------------------------------------
    # Shared rules
    # ------------------------------------------------------------------

    def check_unique_ids(self, items: Any, path: str) -> None:
        if not isinstance(items, list | tuple):
            return
        seen: dict[int, int] = {}
        for i, item in enumerate(items):
            identifier = _as_identifier(getattr(item, "id", None))
            if identifier is None:
                continue
            if identifier in seen:
                self.error(
                    f"{path}[{i}].id",
                    ErrorKind.DUPLICATE_ID,
                    f"id {identifier} is already used by {path}[{seen[identifier]}]",
                )
            else:
                seen[identifier] = i

    def check_single_default(self, items: Any, path: str) -> None:
        if not isinstance(items, list | tuple):
            return
        defaults = [
            i for i, item in enumerate(items) if getattr(item, "default", None) is True
        ]
        if len(defaults) > 1:
            marked = ", ".join(f"[{i}]" for i in defaults)
            self.warn(
                path,
                ErrorKind.MULTIPLE_DEFAULTS,
                f"{len(defaults)} entries are marked default ({marked}); "
                "at most one is expected",
            )

    def check_min_length(self, items: Any, path: str, what: str) -> None:
        if isinstance(items, list | tuple) and not items:
            self.error(
                path,
                ErrorKind.MISSING_FIELD,
                f"at least one {what} must be defined (minimum length 1)",
            )

    def check_unique_values(self, items: Any, path: str) -> None:
        if not isinstance(items, list | tuple):
            return
        seen: set[Any] = set()
        for i, item in enumerate(items):
            if not isinstance(item, Enum):
                continue
            if item in seen:
                self.error(
                    f"{path}[{i}]",
                    ErrorKind.DUPLICATE_VALUE,
                    f"{item.value} is listed more than once",
                )
            seen.add(item)

    # ------------------------------------------------------------------
    # Entity rules
    # ------------------------------------------------------------------

    def _check_document(self, document: ConfigDocument, path: str) -> None:
        variations_path = _join(path, _key(ConfigDocument, "variations"))
        self.check_min_length(document.variations, variations_path, "variation")
        self.check_unique_ids(document.variations, variations_path)
        self.check_single_default(document.variations, variations_path)
        self.check_unique_values(
            document.highlighted_results,
            _join(path, _key(ConfigDocument, "highlighted_results")),
        )

        registration = document.registration
        is_text = isinstance(registration, str) and registration != ""
        if is_text and not registration.isalpha():
            self.warn(
                _join(path, _key(ConfigDocument, "registration")),
                ErrorKind.TYPE_MISMATCH,
                f"registration {registration!r} is expected to contain letters only",
            )

    def _check_variation(self, variation: Variation, path: str) -> None:
        envelopes_path = _join(path, _key(Variation, "envelope_types"))
        if self.require_complete:
            self.check_min_length(
                variation.envelope_types, envelopes_path, "envelope type"
            )
        self.check_unique_ids(variation.envelope_types, envelopes_path)
        self.check_single_default(variation.envelope_types, envelopes_path)

    def _check_general(self, general: General, path: str) -> None:
        self.check_unique_values(
            general.highlighted_results,
            _join(path, _key(General, "highlighted_results")),
        )

    def _check_range(self, value: Range, path: str) -> None:
        low, high = _as_number(value.min), _as_number(value.max)
        if low is not None and high is not None and low > high:
            self.error(
                path,
                ErrorKind.OUT_OF_RANGE,
                f"min ({low}) must not be greater than max ({high})",
            )

    def _check_aircraft(self, aircraft: Aircraft, path: str) -> None:
        if self.require_complete:
            self.check_min_length(
                aircraft.structural_mtows,
                _join(path, _key(Aircraft, "structural_mtows")),
                "structural MTOW",
            )

        # mzfw <= mlw <= mrmpw
        limits = [
            ("structural_mzfw", _as_number(aircraft.structural_mzfw)),
            ("structural_mlw", _as_number(aircraft.structural_mlw)),
            ("structural_mrmpw", _as_number(aircraft.structural_mrmpw)),
        ]
        for (lower_name, lower), (upper_name, upper) in zip(limits, limits[1:]):
            if lower is not None and upper is not None and lower > upper:
                lower_key = _key(Aircraft, lower_name)
                upper_key = _key(Aircraft, upper_name)
                self.warn(
                    _join(path, lower_key),
                    ErrorKind.OUT_OF_RANGE,
                    f"{lower_key} ({lower}) is expected not to exceed "
                    f"{upper_key} ({upper})",
                )

    def _check_configuration_group(self, group: ConfigurationGroup, path: str) -> None:
        configurations_path = _join(path, _key(ConfigurationGroup, "configurations"))
        self.check_unique_ids(group.configurations, configurations_path)
        self.check_single_default(group.configurations, configurations_path)

    def _check_passenger_policy(self, policy: PassengerPolicy, path: str) -> None:
        policies_path = _join(path, _key(PassengerPolicy, "pax_weight_policies"))
        self.check_unique_ids(policy.pax_weight_policies, policies_path)
        self.check_single_default(policy.pax_weight_policies, policies_path)

    def _check_bag_policy(self, policy: BagPolicy, path: str) -> None:
        policies_path = _join(path, _key(BagPolicy, "bag_weight_policies"))
        self.check_unique_ids(policy.bag_weight_policies, policies_path)
        self.check_single_default(policy.bag_weight_policies, policies_path)

    def _check_cabin(self, cabin: Cabin, path: str) -> None:
        self.check_unique_ids(cabin.sections, _join(path, _key(Cabin, "sections")))

    def _check_cabin_section(self, section: CabinSection, path: str) -> None:
        row_from, row_to = _as_number(section.row_from), _as_number(section.row_to)
        if row_from is not None and row_to is not None and row_from > row_to:
            self.error(
                _join(path, _key(CabinSection, "row_to")),
                ErrorKind.OUT_OF_RANGE,
                f"rowTo ({row_to}) must not be less than rowFrom ({row_from})",
            )

    def _check_hold_configuration(self, config: HoldConfiguration, path: str) -> None:
        holds_path = _join(path, _key(HoldConfiguration, "holds"))
        self.check_unique_ids(config.holds, holds_path)

        if not isinstance(config.combined_limits, list | tuple):
            return
        hold_ids: set[int] = set()
        if isinstance(config.holds, list | tuple):
            for hold in config.holds:
                if isinstance(hold, Hold):
                    identifier = _as_identifier(hold.id)
                    if identifier is not None:
                        hold_ids.add(identifier)

        limits_path = _join(path, _key(HoldConfiguration, "combined_limits"))
        refs_key = _key(CombinedLimit, "holds")
        for i, limit in enumerate(config.combined_limits):
            if not isinstance(limit, CombinedLimit):
                continue
            if not isinstance(limit.holds, list | tuple):
                continue
            for j, ref in enumerate(limit.holds):
                identifier = _as_identifier(ref)
                if identifier is not None and identifier not in hold_ids:
                    self.error(
                        f"{limits_path}[{i}].{refs_key}[{j}]",
                        ErrorKind.DANGLING_REFERENCE,
                        f"hold {identifier} does not exist in {holds_path}",
                    )

    def _check_table(self, table: Table, path: str) -> None:
        for name, sort_attr in TABLE_SORT_KEYS.items():
            rows = getattr(table, name)
            if not isinstance(rows, list | tuple):
                continue
            self._check_sorted(rows, sort_attr, _join(path, _key(Table, name)))

    def _check_sorted(self, rows: Sequence[Any], sort_attr: str, path: str) -> None:
        positions = []
        values = []
        for i, row in enumerate(rows):
            value = _as_number(getattr(row, sort_attr, None))
            if value is not None:
                positions.append(i)
                values.append(value)
        if len(values) < 2:  # noqa: PLR2004
            return

        keys = np.asarray(values, dtype=float)
        for step in np.flatnonzero(np.diff(keys) < 0):
            row = positions[step + 1]
            self.error(
                f"{path}[{row}].{sort_attr}",
                ErrorKind.NOT_SORTED,
                f"{sort_attr} {keys[step + 1]:g} is below the previous row's "
                f"{keys[step]:g}; rows must be sorted ascending by {sort_attr}",
            )


def validate(document: Any, *, require_complete: bool = True) -> ValidationResult:
    """
    Validate a configuration document.

    All rules are evaluated and every violation is collected. Malformed input
    (wrong types, missing sections, values that are not documents at all) is
    reported through the result; this function does not raise on document
    content.

    Parameters
    ----------
    document
        Candidate document, typically produced by ``deserialize``
    require_complete
        When False, variations without structural MTOWs or envelope types are
        accepted (useful while a variation is still being edited)

    Returns
    -------
    ValidationResult
        Errors, advisory warnings and the document

    Examples
    --------
    >>> from wabconfig import make_default_document, validate
    >>> result = validate(make_default_document("DABCD"))
    >>> result.is_valid
    True
    """
    validator = _DocumentValidator(require_complete=require_complete)
    validator.check_entity(document, ConfigDocument, "")

    logger.debug(
        f"Validated document: {len(validator.errors)} error(s), "
        f"{len(validator.warnings)} warning(s)"
    )
    return ValidationResult(
        document=document,
        errors=tuple(validator.errors),
        warnings=tuple(validator.warnings),
    )
