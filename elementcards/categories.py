"""
Chemical category normalisation.

Different data sources spell the element families differently
("Noble Gases", "noble_gas", "Post-transition metal", "lanthanoid").
normalize() folds all of them onto one closed vocabulary so the colour
table only needs one key per family.
"""

import re

NONMETAL = "nonmetal"
NOBLE_GAS = "noble gas"
ALKALI_METAL = "alkali metal"
ALKALINE_EARTH_METAL = "alkaline earth metal"
TRANSITION_METAL = "transition metal"
POST_TRANSITION_METAL = "post-transition metal"
LANTHANIDE = "lanthanide"
ACTINIDE = "actinide"
METALLOID = "metalloid"
UNKNOWN = "unknown"

CATEGORIES = (
    NONMETAL, NOBLE_GAS, ALKALI_METAL, ALKALINE_EARTH_METAL, TRANSITION_METAL,
    POST_TRANSITION_METAL, LANTHANIDE, ACTINIDE, METALLOID, UNKNOWN,
)

# cleaned spelling -> canonical family
SYNONYMS = {
    "nonmetal": NONMETAL,
    "nonmetals": NONMETAL,
    "non metal": NONMETAL,
    "non metals": NONMETAL,
    "diatomic nonmetal": NONMETAL,
    "diatomic nonmetals": NONMETAL,
    "polyatomic nonmetal": NONMETAL,
    "polyatomic nonmetals": NONMETAL,
    "reactive nonmetal": NONMETAL,
    "reactive nonmetals": NONMETAL,
    "noble gas": NOBLE_GAS,
    "noble gases": NOBLE_GAS,
    "alkali metal": ALKALI_METAL,
    "alkali metals": ALKALI_METAL,
    "alkaline earth metal": ALKALINE_EARTH_METAL,
    "alkaline earth metals": ALKALINE_EARTH_METAL,
    "transition metal": TRANSITION_METAL,
    "transition metals": TRANSITION_METAL,
    "post transition metal": POST_TRANSITION_METAL,
    "post transition metals": POST_TRANSITION_METAL,
    "lanthanide": LANTHANIDE,
    "lanthanides": LANTHANIDE,
    "lanthanoid": LANTHANIDE,
    "lanthanoids": LANTHANIDE,
    "actinide": ACTINIDE,
    "actinides": ACTINIDE,
    "actinoid": ACTINIDE,
    "actinoids": ACTINIDE,
    "metalloid": METALLOID,
    "metalloids": METALLOID,
    "unknown": UNKNOWN,
}

_SEPARATORS = re.compile(r"[-_]")
_SPECULATIVE = re.compile(r"^unknown\b.*\b(probably|predicted)\b")


def clean(raw):
    """Lowercase, turn '-' and '_' into spaces, collapse whitespace."""
    s = "" if raw is None else str(raw)
    s = _SEPARATORS.sub(" ", s.lower())
    return " ".join(s.split())


def normalize(raw):
    s = clean(raw)
    if s in SYNONYMS:
        return SYNONYMS[s]
    # "unknown, probably transition metal" and friends: family not established
    if _SPECULATIVE.match(s):
        return UNKNOWN
    return s
