"""
Tile geometry and text placement.

Everything on a card scales off the configured tile height:
- width follows a fixed aspect ratio
- border = H // 15, padding = H // 20
- each text role gets a font of H / divisor px (symbol largest)

Placements are (x, baseline) pairs; draw them with anchor "ls".
"""

from dataclasses import dataclass

NUMBER, SYMBOL, NAME, MASS = "number", "symbol", "name", "mass"
ROLES = (NUMBER, SYMBOL, NAME, MASS)


@dataclass(frozen=True)
class LayoutConfig:
    aspect_ratio: float = 2456 / 1882
    border_divisor: int = 15
    padding_divisor: int = 20
    # font size = height / divisor, per role
    number_divisor: float = 10
    symbol_divisor: float = 3
    name_divisor: float = 7
    mass_divisor: float = 10
    mass_precision: int = 4
    min_font_size: int = 6
    background: tuple = (255, 255, 255, 255)
    ink: tuple = (0, 0, 0, 255)

    def font_divisor(self, role):
        if role not in ROLES:
            raise KeyError(role)
        return getattr(self, f"{role}_divisor")

    def format_texts(self, element):
        return {
            NUMBER: str(element.number),
            SYMBOL: element.symbol,
            NAME: element.name,
            MASS: f"{element.mass:.{self.mass_precision}f}",
        }


DEFAULT_LAYOUT = LayoutConfig()


@dataclass(frozen=True)
class Geometry:
    width: int
    height: int
    border: int
    padding: int
    config: LayoutConfig = DEFAULT_LAYOUT

    @classmethod
    def from_height(cls, height, config=DEFAULT_LAYOUT):
        if isinstance(height, bool) or not isinstance(height, int) or height <= 0:
            raise ValueError(f"Tile height must be a positive integer, got {height!r}")
        width = max(1, round(height * config.aspect_ratio))
        # border + padding never reach past the middle of the tile
        half = min(width, height) // 2
        border = min(height // config.border_divisor, half)
        padding = min(height // config.padding_divisor, half - border)
        return cls(width, height, border, padding, config)

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def inset(self):
        return self.border + self.padding

    @property
    def interior_width(self):
        return max(0, self.width - 2 * self.inset)

    def font_size(self, role):
        return max(1, round(self.height / self.config.font_divisor(role)))

    def border_strips(self):
        """Top, bottom, left, right rectangles (inclusive corners) of the frame."""
        w, h, b = self.width, self.height, self.border
        if b <= 0:
            return []
        return [
            (0, 0, w - 1, b - 1),
            (0, h - b, w - 1, h - 1),
            (0, 0, b - 1, h - 1),
            (w - b, 0, w - 1, h - 1),
        ]


@dataclass(frozen=True)
class Placement:
    text: str
    x: int
    y: int


@dataclass(frozen=True)
class TileLayout:
    number: Placement
    symbol: Placement
    name: Placement
    mass: Placement

    def placements(self):
        return {NUMBER: self.number, SYMBOL: self.symbol, NAME: self.name, MASS: self.mass}


# ---------- font metrics ----------
def text_width(face, text):
    if not text:
        return 0
    return int(round(face.getlength(text)))


def line_height(face):
    ascent, descent = face.getmetrics()
    return ascent + descent


def fit_face(face, text, max_width, min_size=1):
    """Step the face down a pixel at a time until text fits max_width."""
    size = getattr(face, "size", None)
    if size is None:
        return face
    size = int(size)
    while text_width(face, text) > max_width and size > min_size:
        size -= 1
        face = face.font_variant(size=size)
    return face


# ---------- placement ----------
def layout_tile(geometry, faces, texts):
    """Place number, symbol, name and mass on a W x H tile.

    faces and texts are dicts keyed by role.
    """
    w, h = geometry.width, geometry.height
    inset = geometry.inset

    num_txt = texts.get(NUMBER, "")
    number = Placement(num_txt, inset, inset + line_height(faces[NUMBER]))

    mass_txt = texts.get(MASS, "")
    mass = Placement(mass_txt,
                     w - inset - text_width(faces[MASS], mass_txt),
                     inset + line_height(faces[MASS]))

    sym_txt = texts.get(SYMBOL, "")
    symbol = Placement(sym_txt, (w - text_width(faces[SYMBOL], sym_txt)) // 2, h // 2)

    name_txt = texts.get(NAME, "")
    name = Placement(name_txt,
                     (w - text_width(faces[NAME], name_txt)) // 2,
                     h // 2 + line_height(faces[NAME]) + geometry.padding)

    return TileLayout(number=number, symbol=symbol, name=name, mass=mass)
