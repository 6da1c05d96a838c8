import argparse
import sys

import uvicorn
from rich.console import Console
from rich.markup import escape

import dirserve
from dirserve.config.settings import get_settings
from dirserve.exceptions import ConfigurationError
from dirserve.main import configure_logging, create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirserve",
        description="Serve a directory over HTTP with HTML directory listings.",
    )
    parser.add_argument(
        "-s",
        "--serve-dir",
        default=None,
        help="Directory to serve. Defaults to current directory.",
    )
    parser.add_argument(
        "-p", "--port", type=int, default=None, help="Port to listen on (default: 8000)"
    )
    parser.add_argument(
        "--host", default=None, help="Address to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {dirserve.__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console(stderr=True)

    try:
        settings = get_settings(
            serve_dir=args.serve_dir,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 2

    configure_logging(settings.log_level)
    app = create_app(settings)

    console.print(
        f"Serving directory [bold]{escape(settings.serve_root)}[/bold] on "
        f"http://{settings.host}:{settings.port}",
        highlight=False,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
