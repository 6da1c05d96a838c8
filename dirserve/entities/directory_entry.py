"""
Directory entry domain entity.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, order=True)
class DirectoryEntry:
    """
    One child of a listed directory.

    Ordering and equality only consider ``(link, display_name)`` so listings sort
    the same way regardless of the stat-derived fields.
    """

    link: str
    display_name: str
    href: str = field(default="", compare=False)
    is_dir: bool = field(default=False, compare=False)
    size: Optional[int] = field(default=None, compare=False)

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry details used by the API schemas.

        Returns:
            Dictionary with entry information
        """
        return {
            "link": self.link,
            "name": self.display_name,
            "href": self.href,
            "is_dir": self.is_dir,
            "size": self.size,
        }
