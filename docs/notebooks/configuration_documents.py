# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.4
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Configuration Documents
#
# This notebook walks through the life of a weight-and-balance configuration
# document: creating one, editing it, validating it and exporting it.
#
# ## Overview
#
# A configuration document describes one aircraft registration. It holds one
# or more **variations**, each a complete operating profile:
#
# - **General**: units and allowed ranges for fuel and performance weights
# - **Aircraft**: structural limits and configuration groups
# - **Weight policy**: standard passenger and bag weights
# - **Cabin** and **holds**: seating sections, cargo holds and combined limits
# - **Envelopes** and **tables**: CG envelopes and lookup tables
#
# Parsing and validation are separate steps: a document that is well-formed
# but invalid can still be loaded, inspected and fixed.

# %%
import json

from wabconfig import (
    add_variation,
    deserialize,
    make_default_document,
    renumber,
    serialize,
    suggested_filename,
    update,
    validate,
)
from wabconfig.models import CombinedLimit, Hold, HoldConfiguration

# %% [markdown]
# ## Creating a document
#
# `make_default_document` returns a document with a single default variation.
# Its limits are zeroed and its collections are empty, but it is structurally
# valid.

# %%
document = make_default_document("DABCD")
result = validate(document)
print(f"Valid: {result.is_valid}")
print(f"Variations: {[v.id for v in document.variations]}")

# %% [markdown]
# ## Editing
#
# Edits return new documents. Here we add a second variation and configure
# cargo holds on the first one.

# %%
document = add_variation(document)

variation = document.variations[0]
variation.hold_configuration = HoldConfiguration(
    holds=[
        Hold(id=1, label="FWD", max=3400, index_shift_per_weight_unit=-0.011),
        Hold(id=2, label="AFT", max=4100, index_shift_per_weight_unit=0.0087),
    ],
    combined_limits=[CombinedLimit(max=6000, holds=[1, 2])],
)
document = update(document, bew=42000, bi=50.5, operational_use=True)

print(validate(document).is_valid)

# %% [markdown]
# ## Validation
#
# Validation never stops at the first problem. Every finding carries a path
# into the document, a kind and a message. Here a combined limit refers to a
# hold that does not exist and the registration is too short.

# %%
variation.hold_configuration.combined_limits.append(CombinedLimit(holds=[2, 3]))
broken = update(document, registration="DAB")

for issue in validate(broken).errors:
    print(issue)

# %% [markdown]
# ## Renumbering
#
# Identifiers are conventionally the 1-based positions of their entities.
# `renumber` restores that after items have been reordered or removed.

# %%
holds = list(reversed(variation.hold_configuration.holds))
print([hold.label for hold in renumber(holds)])
print([hold.id for hold in renumber(holds)])

# %% [markdown]
# ## Import and export
#
# Documents are exchanged as JSON with camelCase keys. Export works for any
# document, valid or not; import only checks the syntax.

# %%
text = serialize(broken)
print(suggested_filename(broken))
print(json.dumps(json.loads(text)["variations"][0]["holdConfiguration"], indent=2))

# %%
reloaded = deserialize(text)
print(reloaded == broken)
print(f"{len(validate(reloaded).errors)} error(s) after reloading")
