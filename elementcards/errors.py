"""Exceptions raised while setting up or running a card batch."""


class ElementCardsError(Exception):
    """Base class for failures that stop a run before any card is drawn."""


class ConfigLoadError(ElementCardsError):
    """Raised when the font, colour table or output directory can't be used."""


class SourceFetchError(ElementCardsError):
    """Raised when element data can't be fetched or parsed."""


class ColorParseError(ValueError):
    """Raised for a hex colour string that isn't 3 or 6 hex digits."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid hex colour: {text!r}")
