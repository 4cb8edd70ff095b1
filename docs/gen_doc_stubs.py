"""
Generate virtual doc files for the mkdocs site.

This script can also be run directly to actually write out those files,
as a preview.

All credit to the creators of:
https://oprypin.github.io/mkdocs-gen-files/
and the docs at:
https://mkdocstrings.github.io/crystal/quickstart/migrate.html
"""

from __future__ import annotations

import importlib
import json
import pkgutil
from collections.abc import Iterable
from pathlib import Path

import mkdocs_gen_files
from attrs import define

from wabconfig import ConfigDocument, export_schema_json, generate_field_docs
from wabconfig.schema import get_field_metadata

ROOT_DIR = Path("api")
nav = mkdocs_gen_files.Nav()


@define
class PackageInfo:
    """
    Package information used to help us auto-generate the docs
    """

    full_name: str
    stem: str
    summary: str


def write_subpackage_pages(package: object) -> tuple[PackageInfo, ...]:
    """
    Write pages for the sub-packages of a package
    """
    sub_packages = []
    for _, name, _ in pkgutil.walk_packages(package.__path__):
        # Skip "private" packages
        if name.startswith("_"):
            continue
        subpackage_full_name = package.__name__ + "." + name
        sub_package_info = write_module_page(subpackage_full_name)
        sub_packages.append(sub_package_info)

    return tuple(sub_packages)


def get_write_file(package_full_name: str) -> Path:
    """Get directory in which to write the doc file"""
    write_dir = ROOT_DIR
    for sub_dir in package_full_name.split(".")[:-1]:
        write_dir = write_dir / sub_dir

    return write_dir / package_full_name.split(".")[-1] / "index.md"


def create_sub_packages_table(sub_packages: Iterable[PackageInfo]) -> str:
    """Create the table summarising the sub-packages"""
    sub_packages = list(sub_packages)
    links = [f"[{sp.stem}][{sp.full_name}]" for sp in sub_packages]
    header = "Sub-package"
    link_width = max(len(v) for v in [header, *links])

    descriptions = [sp.summary for sp in sub_packages]
    description_header = "Description"
    description_width = max(len(v) for v in [description_header, *descriptions])

    rows = []
    columns = zip([header, *links], [description_header, *descriptions])
    for i, (link, desc) in enumerate(columns):
        rows.append(f"| {link.ljust(link_width)} | {desc.ljust(description_width)} |")
        if i == 0:
            rows.append(f"| {'-' * link_width} | {'-' * description_width} |")

    return "\n".join(rows)


def write_module_page(package_full_name: str) -> PackageInfo:
    """
    Write the docs pages for a module/package
    """
    package = importlib.import_module(package_full_name)

    if hasattr(package, "__path__"):
        sub_packages = write_subpackage_pages(package)
    else:
        sub_packages = None

    write_file = get_write_file(package_full_name)

    nav[package_full_name.split(".")] = write_file.relative_to(ROOT_DIR).as_posix()

    with mkdocs_gen_files.open(write_file, "w") as fh:
        fh.write(f"# {package_full_name}\n")

        if sub_packages:
            fh.write("\n")
            fh.write(f"{create_sub_packages_table(sub_packages)}\n")

        fh.write("\n")
        fh.write(f"::: {package_full_name}")

    if not package.__doc__:
        summary = "No documentation available"
    else:
        lines = package.__doc__.strip().splitlines()
        summary = lines[0]

    return PackageInfo(package_full_name, package_full_name.split(".")[-1], summary)


# =============================================================================
# Document Field Reference
# =============================================================================

FIELDS_DOCS_DIR = Path("fields")


def collect_entities(
    cls: type, found: dict[str, type] | None = None
) -> dict[str, type]:
    """Collect every entity reachable from ``cls``, in document order."""
    if found is None:
        found = {}
    found.setdefault(cls.__name__, cls)
    for meta in get_field_metadata(cls).values():
        if meta.is_entity and meta.kind.__name__ not in found:
            collect_entities(meta.kind, found)
    return found


def write_field_docs() -> None:
    """Write one field reference page per document entity."""
    entities = collect_entities(ConfigDocument)

    lines = [
        "# Document fields",
        "",
        "Every entity of the configuration document, listed by wire key.",
        "",
    ]
    for name, cls in entities.items():
        page_path = FIELDS_DOCS_DIR / f"{name.lower()}.md"
        with mkdocs_gen_files.open(page_path, "w") as fh:
            fh.write(generate_field_docs(cls))
        lines.append(f"- [{name}]({name.lower()}.md)")

    with mkdocs_gen_files.open(FIELDS_DOCS_DIR / "index.md", "w") as fh:
        fh.write("\n".join(lines))

    with mkdocs_gen_files.open(FIELDS_DOCS_DIR / "schema.json", "w") as fh:
        json.dump(export_schema_json(ConfigDocument), fh, indent=2)

    print(f"Generated field reference for {len(entities)} entities")


# Write module pages
write_module_page("wabconfig")

# Generate the field reference
write_field_docs()

# Render navigation
with mkdocs_gen_files.open(ROOT_DIR / "NAVIGATION.md", "w") as fh:
    fh.writelines(nav.build_literate_nav(indentation=2))
