"""
Use case for building the listing of a requested directory.
"""

import logging
import os
from typing import Optional

from dirserve.entities.listing_view import ListingView
from dirserve.exceptions import DirectoryReadError, ListingError
from dirserve.ports.files.directory_reader_port import DirectoryReaderPort
from dirserve.utils.path_resolver import relative_to_root, resolve_request_path
from dirserve.utils.segment_codec import encode_path


class BuildListingUseCase:
    """Use case for resolving a request path and listing the directory behind it."""

    def __init__(
        self,
        root: str,
        directory_reader: DirectoryReaderPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            root: Canonical served root
            directory_reader: Reader for directory contents
            logger: Logger instance to use for logging
        """
        self._root = root
        self._directory_reader = directory_reader
        self._logger = logger or logging.getLogger(__name__)

    def _parent_href(self, target: str) -> Optional[str]:
        if target == self._root:
            return None
        parent = relative_to_root(self._root, os.path.dirname(target))
        return "/" + encode_path(parent)

    def execute(self, request_path: str) -> ListingView:
        """
        Build the listing for a request path.

        Args:
            request_path: Raw, still percent-encoded request path starting with '/'

        Returns:
            ListingView with entries sorted by (link, display name)

        Raises:
            ListingError: If the path is rejected or the directory cannot be read
        """
        try:
            target = resolve_request_path(self._root, request_path)
            self._logger.info(f"Listing directory: {target}")
            entries = tuple(sorted(self._directory_reader.iter_entries(target)))
            self._logger.info(f"Found {len(entries)} entries")
            return ListingView(
                label=request_path,
                entries=entries,
                root_name=os.path.basename(self._root) or self._root,
                parent_href=self._parent_href(target),
            )
        except ListingError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise DirectoryReadError(f"Failed to list {request_path}: {str(e)}")
