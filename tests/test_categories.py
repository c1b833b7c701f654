from __future__ import annotations

import pytest

from elementcards.categories import CATEGORIES, normalize
from elementcards.periodic_table import PERIODIC_TABLE


def test_plural_and_case_variants_collapse() -> None:
    assert normalize("Noble Gases") == normalize("noble gas") == "noble gas"
    assert normalize("Unknown") == "unknown"
    assert normalize("ALKALINE_EARTH_METALS") == "alkaline earth metal"
    assert normalize("  Transition   Metals ") == "transition metal"


def test_nonmetal_subfamilies_fold_into_nonmetal() -> None:
    assert normalize("diatomic nonmetal") == "nonmetal"
    assert normalize("Polyatomic Nonmetal") == "nonmetal"
    assert normalize("reactive-nonmetal") == "nonmetal"


def test_hyphenated_and_alternate_names() -> None:
    assert normalize("Post-transition metal") == "post-transition metal"
    assert normalize("post_transition_metals") == "post-transition metal"
    assert normalize("Lanthanoids") == "lanthanide"
    assert normalize("actinoid") == "actinide"


def test_speculative_categories_are_unknown() -> None:
    assert normalize("unknown, probably transition metal") == "unknown"
    assert normalize("unknown, predicted to be noble gas") == "unknown"


def test_unrecognised_input_passes_through_cleaned() -> None:
    assert normalize("Super-Heavy  Thing") == "super heavy thing"
    assert normalize("") == ""
    assert normalize(None) == ""


@pytest.mark.parametrize("raw", [
    "Noble Gases", "post-transition metal", "Post Transition Metals", "unknown",
    "diatomic nonmetal", "weird_Category--x", "  ", "unknown, probably metalloid",
])
def test_normalize_is_idempotent(raw) -> None:
    once = normalize(raw)
    assert normalize(once) == once


def test_embedded_table_uses_closed_vocabulary() -> None:
    assert {normalize(row[4]) for row in PERIODIC_TABLE} <= set(CATEGORIES)
