"""
services/exceptions.py – Structured custom exception hierarchy for CompatList.

All service-level errors derive from CompatListError so callers can catch
broadly or specifically depending on context.
"""


class CompatListError(Exception):
    """Base class for all CompatList exceptions."""


class LoadError(CompatListError):
    """Raised when the compatibility list cannot be fetched from any source."""


class EntryParseError(LoadError):
    """
    Raised when a fetched document is not a valid compatibility list.

    Attributes
    ----------
    source : URL or path the document was read from.
    """

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        super().__init__(f"Malformed compatibility list from {source}: {detail}")


class PageTemplateError(CompatListError):
    """Raised when a host page lacks an element the renderer must fill."""


class ExportError(CompatListError):
    """Raised on filesystem errors while writing an exported page."""


class InvalidTransitionError(CompatListError):
    """
    Raised when the listing controller is asked for an illegal state change.

    Attributes
    ----------
    current : Status the controller was in.
    target  : Status that was requested.
    """

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move listing from '{current}' to '{target}'.")
