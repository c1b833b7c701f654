"""Periodic-table element card generator."""

from .batch import BatchReport, ElementOutcome, generate_cards
from .categories import normalize
from .colours import load_colour_table, parse_hex, resolve, resolve_colour
from .elements import (CsvElementSource, Element, EmbeddedElementSource,
                       JsonElementSource, RemoteElementSource)
from .errors import ColorParseError, ConfigLoadError, ElementCardsError, SourceFetchError
from .layout import DEFAULT_LAYOUT, Geometry, LayoutConfig, layout_tile
from .renderer import encode_png, render_card

__version__ = "0.1.0"
