"""Entry point for the sqlsnap server."""

import argparse
import logging

from sqlsnap.config import get_host, get_port, get_transport
from sqlsnap.server import configure_logging, create_server

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="sqlsnap", description="Stateless query proxy")
    parser.add_argument(
        "-port", "--port", type=int, default=None, help="HTTP port (default: SQLSNAP_PORT or 9091)"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the sqlsnap server."""
    args = parse_args(argv)
    configure_logging()
    server = create_server()

    transport = get_transport()
    if transport == "stdio":
        server.run(transport="stdio")
        return

    port = args.port if args.port is not None else get_port()
    logger.info("Starting sqlsnap server on port %d", port)
    server.run(transport="http", host=get_host(), port=port)


if __name__ == "__main__":
    main()
