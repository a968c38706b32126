"""Entry point for the tvmaze package.

Run with: python -m tvmaze <operation> [arguments]
"""

import sys
from typing import List, Optional

import requests
from loguru import logger

from tvmaze.api import InvalidArgumentError, TvmazeClient, TvmazeUrlBuilder
from tvmaze.config.cli import args_to_cli_args, parse_arguments
from tvmaze.ui import ConsoleUI

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_INVALID_ARGUMENT = 2


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    logger.enable("tvmaze")
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def main(argv: Optional[List[str]] = None, console: Optional[ConsoleUI] = None) -> int:
    """
    Main entry point for the command-line client.

    Args:
        argv: Argument list (None for sys.argv).
        console: Console UI instance (created when None).

    Returns:
        Exit code (0 for success, 1 for a failed request, 2 for invalid input).
    """
    cli_args = args_to_cli_args(parse_arguments(argv))

    setup_logging(cli_args.debug)
    console = console or ConsoleUI()

    client = TvmazeUrlBuilder() if cli_args.url_only else TvmazeClient()
    method = getattr(client, cli_args.method)

    if cli_args.debug:
        arguments = ", ".join(f"{name}={value!r}" for name, value in cli_args.params.items())
        console.print_info(f"Calling {cli_args.method}({arguments})")

    try:
        result = method(**cli_args.params, options=cli_args.to_options())
    except InvalidArgumentError as e:
        console.print_error(str(e))
        return EXIT_INVALID_ARGUMENT
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        console.print_error(f"HTTP {status}: {e}")
        return EXIT_REQUEST_FAILED
    except requests.RequestException as e:
        console.print_error(f"Request failed: {e}")
        return EXIT_REQUEST_FAILED

    if cli_args.url_only:
        console.print_url(result)
    else:
        console.print_json(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
