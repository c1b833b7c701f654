"""
Category colour table and the border colour resolver.

The table is a JSON object mapping normalized category names to hex
strings ("#3498db", "3498db", "#39d"). Lookups fall back from the
category to the table's "unknown" entry and finally to a neutral grey,
so a card always gets an opaque border colour.
"""

import json
import logging
import string
from dataclasses import dataclass

from .categories import UNKNOWN, normalize
from .errors import ColorParseError, ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_COLOUR = (128, 128, 128, 255)

FROM_CATEGORY = "category"
FROM_UNKNOWN = "unknown"
FROM_DEFAULT = "default"


@dataclass(frozen=True)
class ColourOutcome:
    """Resolved colour plus where it came from and what went wrong, if anything."""
    colour: tuple
    source: str
    problem: str = ""

    @property
    def fallback(self):
        return self.source != FROM_CATEGORY


def parse_hex(text):
    h = str(text).strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6 or any(c not in string.hexdigits for c in h):
        raise ColorParseError(text)
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), 255)


def resolve_colour(category, table):
    if category in table:
        key, source = category, FROM_CATEGORY
    elif UNKNOWN in table:
        key, source = UNKNOWN, FROM_UNKNOWN
    else:
        return ColourOutcome(DEFAULT_COLOUR, FROM_DEFAULT,
                             f"no colour for {category!r} and no {UNKNOWN!r} entry")
    try:
        return ColourOutcome(parse_hex(table[key]), source)
    except ColorParseError as e:
        logger.warning("Colour for %r: %s, using grey", key, e)
        return ColourOutcome(DEFAULT_COLOUR, FROM_DEFAULT, str(e))


def resolve(category, table):
    """Border colour for a normalized category; never raises."""
    return resolve_colour(category, table).colour


def load_colour_table(path):
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigLoadError(f"Could not read colour table {path}: {e}") from e
    except ValueError as e:
        raise ConfigLoadError(f"Could not parse colour table {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Colour table {path} must be a JSON object")
    # keys may use any spelling the normalizer understands
    table = {normalize(k): str(v) for k, v in data.items()}
    if UNKNOWN not in table:
        logger.warning("Colour table %s has no %r entry; unmatched categories will be grey",
                       path, UNKNOWN)
    return table
