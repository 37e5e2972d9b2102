"""
models/compat_entry.py – Immutable data model for a single compatibility entry.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Release:
    """
    One regional release of a title.

    Attributes
    ----------
    id : Title / product id of the release (e.g. "0004000000055D00").
    """

    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class CompatEntry:
    """
    Represents one title in the compatibility list.

    Attributes
    ----------
    title         : Human-readable game title.
    compatibility : Integer test outcome code (see services/classifier.py).
    releases      : Known releases, in the order given by the source document.
    """

    title: str
    compatibility: int
    releases: Tuple[Release, ...] = field(default_factory=tuple)

    @property
    def primary_id(self) -> str:
        """Id of the first release, or "N/A" when none is known."""
        return self.releases[0].id if self.releases else "N/A"

    def __str__(self) -> str:
        return f"{self.title}  [{self.primary_id}]  ({self.compatibility})"
