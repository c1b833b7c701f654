"""
Element records and the places they come from.

Every source has a load() returning a list of Element, sorted by atomic
number, one record per number, at most 118 of them:

- EmbeddedElementSource: the table shipped in periodic_table.py
- RemoteElementSource:   Bowserinator's PeriodicTableJSON over HTTP
- JsonElementSource:     the same document saved to disk
- CsvElementSource:      a CSV with number,symbol,name,atomic_mass,category
"""

import json
import logging
import os
from dataclasses import dataclass

import pandas as pd
import requests

from . import periodic_table
from .errors import SourceFetchError

logger = logging.getLogger(__name__)

PERIODIC_TABLE_URL = "https://raw.githubusercontent.com/Bowserinator/Periodic-Table-JSON/master/PeriodicTableJSON.json"
FETCH_TIMEOUT = 20
MAX_ELEMENTS = 118
REQUIRED = ("number", "symbol", "name", "atomic_mass", "category")


@dataclass(frozen=True)
class Element:
    number: int
    symbol: str
    name: str
    mass: float
    category: str


# ---------- helpers ----------
def _text(val):
    return "" if pd.isna(val) else str(val).strip()


def tidy_elements(records, limit=MAX_ELEMENTS):
    """Turn raw records into Elements: sorted, one per number, capped at limit."""
    df = pd.DataFrame(list(records))
    if df.empty:
        raise SourceFetchError("Element data contains no elements")
    if "atomic_mass" not in df.columns and "mass" in df.columns:
        df = df.rename(columns={"mass": "atomic_mass"})
    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise SourceFetchError(f"Element data is missing columns: {', '.join(missing)}")

    # xpos/ypos and the rest of the document are not used
    df = df[list(REQUIRED)].copy()
    try:
        numbers = pd.to_numeric(df["number"], errors="raise")
        df["atomic_mass"] = pd.to_numeric(df["atomic_mass"], errors="raise").astype(float)
    except (TypeError, ValueError) as e:
        raise SourceFetchError(f"Element data has a bad number or mass: {e}") from e
    # whole numbers only (2.0 passes, 2.7 and NaN do not)
    if not (numbers % 1 == 0).all():
        raise SourceFetchError("Element data has a non-integral atomic number")
    df["number"] = numbers.astype(int)
    if (df["number"] < 1).any():
        raise SourceFetchError("Element data has a non-positive atomic number")
    if df["symbol"].map(_text).eq("").any() or df["name"].map(_text).eq("").any():
        raise SourceFetchError("Element data has a record without symbol or name")

    df = df.sort_values("number", kind="mergesort")
    dupes = int(df["number"].duplicated().sum())
    if dupes:
        logger.warning("Dropping %d duplicate element record(s)", dupes)
    df = df.drop_duplicates("number", keep="first").head(limit)

    return [
        Element(int(r.number), _text(r.symbol), _text(r.name), float(r.atomic_mass), _text(r.category))
        for r in df.itertuples(index=False)
    ]


def elements_from_document(payload):
    """Elements from a PeriodicTableJSON-shaped document ({"elements": [...]})."""
    if not isinstance(payload, dict) or not isinstance(payload.get("elements"), list):
        raise SourceFetchError("Element document has no 'elements' array")
    return tidy_elements(payload["elements"])


# ---------- sources ----------
class EmbeddedElementSource:
    def load(self):
        return tidy_elements(periodic_table.records())

    def __repr__(self):
        return "EmbeddedElementSource()"


class RemoteElementSource:
    def __init__(self, url=PERIODIC_TABLE_URL, timeout=FETCH_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def load(self):
        logger.info("Fetching element data from %s", self.url)
        try:
            r = requests.get(self.url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            raise SourceFetchError(f"Could not fetch elements from {self.url}: {e}") from e
        except ValueError as e:
            raise SourceFetchError(f"Could not parse elements from {self.url}: {e}") from e
        return elements_from_document(payload)

    def __repr__(self):
        return f"RemoteElementSource({self.url!r})"


class JsonElementSource:
    def __init__(self, path):
        self.path = path

    def load(self):
        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise SourceFetchError(f"Could not read {self.path}: {e}") from e
        except ValueError as e:
            raise SourceFetchError(f"Could not parse {self.path}: {e}") from e
        return elements_from_document(payload)

    def __repr__(self):
        return f"JsonElementSource({self.path!r})"


class CsvElementSource:
    def __init__(self, path):
        self.path = path

    def load(self):
        try:
            df = pd.read_csv(self.path)
        except (OSError, ValueError) as e:
            raise SourceFetchError(f"Could not read {self.path}: {e}") from e
        df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
        return tidy_elements(df.to_dict("records"))

    def __repr__(self):
        return f"CsvElementSource({self.path!r})"


def source_for(spec, url=PERIODIC_TABLE_URL, timeout=FETCH_TIMEOUT):
    """Pick a source from a CLI value: 'embedded', 'remote' or a file path."""
    if spec in (None, "", "embedded"):
        return EmbeddedElementSource()
    if spec == "remote":
        return RemoteElementSource(url, timeout=timeout)
    if os.path.splitext(spec)[1].lower() == ".csv":
        return CsvElementSource(spec)
    return JsonElementSource(spec)
