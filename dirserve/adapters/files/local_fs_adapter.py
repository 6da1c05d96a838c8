"""
Local file system adapter implementation for directory enumeration.
"""

import logging
import os
import stat
from typing import Callable, Iterator, Optional

from typing_extensions import override

from dirserve.entities.directory_entry import DirectoryEntry
from dirserve.exceptions import DirectoryNotFoundError, DirectoryReadError
from dirserve.ports.files.directory_reader_port import DirectoryReaderPort
from dirserve.utils.path_resolver import relative_to_root
from dirserve.utils.segment_codec import encode_path, encode_segment

EntryErrorSink = Callable[[str, Exception], None]


class LocalDirectoryReader(DirectoryReaderPort):
    """Local file system implementation of the directory reader port."""

    def __init__(
        self,
        root: str,
        logger: Optional[logging.Logger] = None,
        on_entry_error: Optional[EntryErrorSink] = None,
    ):
        """
        Initialize the adapter.

        Args:
            root: Canonical served root; hrefs are computed relative to it
            logger: Logger instance to use for logging. If None, a default logger will be created.
            on_entry_error: Called with (path, error) for every skipped child.
                Defaults to logging a warning.
        """
        self._root = root
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._on_entry_error: EntryErrorSink = on_entry_error or self._log_skipped

    @property
    def root(self) -> str:
        return self._root

    def _log_skipped(self, path: str, error: Exception) -> None:
        self._logger.warning(f"Skipping directory entry {path!r}: {error}")

    def _open(self, directory: str):
        try:
            return os.scandir(directory)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise DirectoryNotFoundError(f"Directory does not exist: {directory}") from e
        except OSError as e:
            raise DirectoryReadError(f"Failed to read directory {directory}: {e}") from e

    def _to_entry(self, entry: os.DirEntry) -> DirectoryEntry:
        """
        Build a DirectoryEntry from a scandir entry.

        Raises:
            OSError: If the entry cannot be stat'd
            ValueError: If the entry lies outside the root or its name is not valid UTF-8
        """
        st = entry.stat()
        # lone surrogates from undecodable names cannot be rendered
        entry.name.encode("utf-8")
        relative = relative_to_root(self._root, entry.path)
        is_dir = stat.S_ISDIR(st.st_mode)
        return DirectoryEntry(
            link=encode_segment(entry.name),
            display_name=entry.name,
            href="/" + encode_path(relative),
            is_dir=is_dir,
            size=None if is_dir else st.st_size,
        )

    @override
    def iter_entries(self, directory: str) -> Iterator[DirectoryEntry]:
        """
        Iterate over the children of a directory.

        Args:
            directory: Absolute, canonical path of the directory to read

        Returns:
            Iterator of DirectoryEntry entities

        Raises:
            DirectoryNotFoundError: If the directory does not exist
            DirectoryReadError: If the directory cannot be opened or read
        """
        scanner = self._open(directory)
        with scanner:
            while True:
                try:
                    entry = next(scanner)
                except StopIteration:
                    return
                except OSError as e:
                    raise DirectoryReadError(
                        f"Failed to read directory {directory}: {e}"
                    ) from e

                try:
                    item = self._to_entry(entry)
                except (OSError, ValueError) as e:
                    self._on_entry_error(entry.path, e)
                    continue
                yield item
