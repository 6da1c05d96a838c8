"""dirserve package: static file server with HTML directory listings.

Entry points are ``dirserve.main.create_app`` and the ``dirserve`` console
script in ``dirserve.cli_serve``.
"""

__version__ = "0.1.0"

__all__: list[str] = []
