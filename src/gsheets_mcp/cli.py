"""Command-line interface for the Google Sheets MCP server."""

import argparse
import asyncio
import logging
import sys

from .config import settings


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Google Sheets MCP server - spreadsheet tools over stdio"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level (default: %(default)s)"
    )

    # Also accepted after the subcommand; SUPPRESS keeps the top-level value when omitted.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=argparse.SUPPRESS, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser(
        "serve", parents=[common], help="Run the MCP server on stdio (default)"
    )
    subparsers.add_parser(
        "auth", parents=[common], help="Resolve Google credentials and report the result"
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.command == "auth":
        run_auth()
    else:
        run_server()


def configure_logging(level: str):
    """Send logs to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_server():
    """Run the stdio server, exiting with status 1 if it fails to start."""
    from .server import serve

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger(__name__).error(f"Server failed to start: {e}", exc_info=True)
        sys.exit(1)


def run_auth():
    """Run credential resolution once."""
    from .auth import CredentialSession

    print("Authenticating with Google Sheets API...", file=sys.stderr)
    try:
        credentials = CredentialSession().acquire()
    except Exception as e:
        print(f"Authentication failed: {e}", file=sys.stderr)
        sys.exit(1)

    if credentials.token or credentials.refresh_token:
        print("Authentication successful!", file=sys.stderr)
    else:
        print("No credentials configured; see the setup instructions above.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
