"""
Listing view model handed to the renderer.
"""

from dataclasses import dataclass
from typing import Optional

from dirserve.entities.directory_entry import DirectoryEntry


@dataclass(frozen=True)
class ListingView:
    """Rendered page model: the requested path and its sorted entries."""

    label: str
    entries: tuple[DirectoryEntry, ...]
    root_name: str = ""
    parent_href: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.parent_href is None
