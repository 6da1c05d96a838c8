"""
Directory reader port interface defining the contract for directory enumeration.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from dirserve.entities.directory_entry import DirectoryEntry


class DirectoryReaderPort(ABC):
    """Port interface for reading the immediate children of a directory."""

    @abstractmethod
    def iter_entries(self, directory: str) -> Iterator[DirectoryEntry]:
        """
        Iterate over the children of a directory inside the served root.

        Children that cannot be processed are skipped; the iteration itself
        only fails when the directory cannot be opened.

        Args:
            directory: Absolute, canonical path of the directory to read

        Returns:
            Iterator of DirectoryEntry entities, in filesystem order

        Raises:
            DirectoryNotFoundError: If the directory does not exist
            DirectoryReadError: If the directory cannot be opened
        """
        pass
