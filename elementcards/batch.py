"""
Batch driver: one PNG per element.

For each element: normalize category -> resolve colour -> render ->
encode -> write {outdir}/{NNN}_{Symbol}.png. A failure on one card is
logged and recorded; the rest of the batch still runs.
"""

import logging
import os
import re
from dataclasses import dataclass, field

from .categories import normalize
from .colours import resolve_colour
from .errors import ConfigLoadError
from .renderer import encode_png, render_card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementOutcome:
    element: object
    path: str
    error: str = ""
    colour_source: str = ""

    @property
    def ok(self):
        return not self.error


@dataclass
class BatchReport:
    outdir: str
    outcomes: list = field(default_factory=list)

    @property
    def written(self):
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self):
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self):
        return not self.failed

    def summary(self):
        return f"Wrote {len(self.written)}/{len(self.outcomes)} cards to {self.outdir}"


def card_filename(element):
    symbol = re.sub(r"[^a-zA-Z0-9]+", "_", element.symbol).strip("_") or "X"
    return f"{element.number:03d}_{symbol}.png"


def select_elements(elements, numbers=None):
    """Keep only the given atomic numbers (all of them when numbers is empty)."""
    if not numbers:
        return list(elements)
    wanted = set(numbers)
    chosen = [e for e in elements if e.number in wanted]
    absent = sorted(wanted - {e.number for e in chosen})
    if absent:
        logger.warning("No element data for atomic number(s): %s", ", ".join(map(str, absent)))
    return chosen


def discard(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)


def ensure_outdir(outdir):
    try:
        os.makedirs(outdir, mode=0o755, exist_ok=True)
    except OSError as e:
        raise ConfigLoadError(f"Could not create output directory {outdir}: {e}") from e


def write_card(element, colours, geometry, faces, outdir, config=None):
    category = normalize(element.category)
    colour = resolve_colour(category, colours)
    if colour.fallback:
        logger.debug("%s: no colour for %r, using %s colour%s", element.symbol, category,
                     colour.source, f" ({colour.problem})" if colour.problem else "")
    outpath = os.path.join(outdir, card_filename(element))
    # written beside the card and renamed, so a failed write leaves no partial PNG
    tmppath = outpath + ".tmp"
    try:
        img = render_card(element, category, colour.colour, geometry, faces, config)
        data = encode_png(img)
        with open(tmppath, "wb") as f:
            f.write(data)
        os.replace(tmppath, outpath)
    except (OSError, ValueError) as e:
        discard(tmppath)
        logger.warning("Skipping %s (%s): %s", element.symbol, outpath, e)
        return ElementOutcome(element, outpath, str(e) or type(e).__name__, colour.source)
    return ElementOutcome(element, outpath, colour_source=colour.source)


def generate_cards(elements, colours, geometry, faces, outdir, config=None):
    ensure_outdir(outdir)
    report = BatchReport(outdir)
    for element in elements:
        outcome = write_card(element, colours, geometry, faces, outdir, config)
        report.outcomes.append(outcome)
        if outcome.ok:
            print(f"Saved {outcome.path}")
    print(report.summary())
    return report
