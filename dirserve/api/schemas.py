"""
Pydantic models for API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class EntryInfo(BaseModel):
    """Schema for one directory entry."""

    link: str = Field(..., description="Percent-encoded name, relative to the listed directory")
    name: str = Field(..., description="Raw entry name for display")
    href: str = Field(..., description="Absolute URL path of the entry")
    is_dir: bool = Field(False, description="Whether the entry is a directory")
    size: Optional[int] = Field(None, description="File size in bytes, null for directories")

    @classmethod
    def from_entity(cls, entry):
        """Create an EntryInfo schema from a DirectoryEntry entity."""
        details = entry.get_details()
        return cls(
            link=details["link"],
            name=details["name"],
            href=details["href"],
            is_dir=details["is_dir"],
            size=details["size"],
        )


class ListingResponse(BaseModel):
    """Schema for a directory listing."""

    path: str = Field(..., description="Requested path, as received")
    root_name: str = Field(..., description="Name of the served root directory")
    parent: Optional[str] = Field(None, description="URL path of the parent directory")
    entries: List[EntryInfo] = Field(..., description="Sorted directory entries")

    @classmethod
    def from_view(cls, view):
        """Create a ListingResponse schema from a ListingView."""
        return cls(
            path=view.label,
            root_name=view.root_name,
            parent=view.parent_href,
            entries=[EntryInfo.from_entity(e) for e in view.entries],
        )
