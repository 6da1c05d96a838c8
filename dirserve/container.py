"""
Dependency injection container for managing application dependencies.
"""

import logging

from dirserve.adapters.files.local_fs_adapter import LocalDirectoryReader
from dirserve.adapters.rendering.jinja_renderer import JinjaListingRenderer
from dirserve.api.responder import ListingResponder
from dirserve.config.settings import Settings
from dirserve.ports.files.directory_reader_port import DirectoryReaderPort
from dirserve.ports.rendering.listing_renderer_port import ListingRendererPort
from dirserve.use_cases.listing.build_listing import BuildListingUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_directory_reader(self) -> DirectoryReaderPort:
        """
        Get directory reader adapter instance.

        Returns:
            DirectoryReaderPort implementation
        """
        if "directory_reader" not in self._instances:
            self._instances["directory_reader"] = LocalDirectoryReader(
                self._settings.serve_root, self._logger
            )
        return self._instances["directory_reader"]

    def get_listing_renderer(self) -> ListingRendererPort:
        """
        Get listing renderer adapter instance.

        Returns:
            ListingRendererPort implementation
        """
        if "listing_renderer" not in self._instances:
            self._instances["listing_renderer"] = JinjaListingRenderer(
                templates_dir=self._settings.templates_dir, logger=self._logger
            )
        return self._instances["listing_renderer"]

    def get_build_listing_use_case(self) -> BuildListingUseCase:
        """
        Get build listing use case with injected dependencies.

        Returns:
            Configured BuildListingUseCase
        """
        if "build_listing_use_case" not in self._instances:
            self._instances["build_listing_use_case"] = BuildListingUseCase(
                self._settings.serve_root, self.get_directory_reader(), self._logger
            )
        return self._instances["build_listing_use_case"]

    def get_listing_responder(self) -> ListingResponder:
        """
        Get the listing responder used as the static layer's fallback.

        Returns:
            Configured ListingResponder
        """
        if "listing_responder" not in self._instances:
            self._instances["listing_responder"] = ListingResponder(
                self.get_build_listing_use_case(),
                self.get_listing_renderer(),
                self._logger,
            )
        return self._instances["listing_responder"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
