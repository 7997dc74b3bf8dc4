"""Exceptions raised by the tour client."""


class TourError(Exception):
    """Base class for tour client errors."""


class CatalogNotLoadedError(TourError, RuntimeError):
    """Navigation was queried before the lesson table finished loading."""


class CatalogError(TourError, ValueError):
    """The table of contents and the lesson table disagree."""
