from __future__ import annotations

import pytest
from PIL import ImageFont

from elementcards.elements import Element


@pytest.fixture(scope="session")
def font_path(tmp_path_factory):
    face = ImageFont.load_default(size=24)
    data = getattr(face, "font_bytes", None)
    if not isinstance(face, ImageFont.FreeTypeFont) or not data:
        pytest.skip("Pillow was built without FreeType support")
    path = tmp_path_factory.mktemp("fonts") / "font.otf"
    path.write_bytes(data)
    return str(path)


@pytest.fixture
def colour_table():
    return {"nonmetal": "#3498db", "noble gas": "#9b59b6", "unknown": "#e0e0e0"}


@pytest.fixture
def hydrogen():
    return Element(1, "H", "Hydrogen", 1.008, "diatomic nonmetal")


@pytest.fixture
def first_three():
    return [
        Element(1, "H", "Hydrogen", 1.008, "diatomic nonmetal"),
        Element(2, "He", "Helium", 4.0026, "noble gas"),
        Element(3, "Li", "Lithium", 6.94, "alkali metal"),
    ]
