"""Font loading: one outline font parsed once, one face per text role."""

import logging

from PIL import ImageFont

from .errors import ConfigLoadError
from .layout import ROLES, SYMBOL

logger = logging.getLogger(__name__)


def load_font(path, size):
    try:
        return ImageFont.truetype(path, size)
    except OSError as e:
        raise ConfigLoadError(f"Could not load font {path}: {e}") from e


def load_role_faces(path, geometry):
    """Return {role: FreeTypeFont} sized for the given tile geometry."""
    base = load_font(path, geometry.font_size(SYMBOL))
    faces = {}
    for role in ROLES:
        size = geometry.font_size(role)
        faces[role] = base if size == base.size else base.font_variant(size=size)
        logger.debug("Font %s for %s at %dpx", path, role, size)
    return faces
