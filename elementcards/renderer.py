"""
Element card renderer.

Card anatomy (W x H, white):
- picture frame of `border` px in the category colour
- atomic number top-left, atomic mass top-right
- symbol centred on the midline, name centred beneath it

Rendering is pure: it returns a Pillow image and touches no files.
"""

import io

from PIL import Image, ImageDraw
from PIL.PngImagePlugin import PngInfo

from .layout import ROLES, fit_face, layout_tile


# ---------- draw helpers ----------
def draw_frame(draw, geometry, colour):
    for rect in geometry.border_strips():
        draw.rectangle(rect, fill=colour)


def fit_faces(faces, texts, geometry, min_size):
    """Shrink any face whose text is wider than the tile interior."""
    return {
        role: fit_face(faces[role], texts.get(role, ""), geometry.interior_width, min_size)
        for role in ROLES
    }


# ---------- card builder ----------
def render_card(element, category, colour, geometry, faces, config=None):
    config = config or geometry.config
    img = Image.new("RGBA", geometry.size, config.background)
    draw = ImageDraw.Draw(img)
    draw_frame(draw, geometry, colour)

    texts = config.format_texts(element)
    faces = fit_faces(faces, texts, geometry, config.min_font_size)
    tile = layout_tile(geometry, faces, texts)
    for role, placement in tile.placements().items():
        if placement.text:
            draw.text((placement.x, placement.y), placement.text,
                      font=faces[role], fill=config.ink, anchor="ls")

    img.info.update({
        "Title": element.name,
        "Symbol": element.symbol,
        "Category": category,
    })
    return img


def encode_png(img):
    meta = PngInfo()
    for key, value in img.info.items():
        if isinstance(value, str):
            meta.add_text(key, value)
    buf = io.BytesIO()
    img.save(buf, format="PNG", pnginfo=meta)
    return buf.getvalue()
