"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from tvmaze.api.options import RequestOptions
from tvmaze.config.settings import LOOKUP_TYPES

# Namespace attributes forwarded as keyword arguments to the client method
METHOD_PARAMETERS = (
    "query",
    "embed",
    "lookup_type",
    "external_id",
    "country_code",
    "date",
    "show_id",
    "specials",
    "season",
    "number",
    "season_id",
    "page",
    "person_id",
)


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        method: Name of the TvmazeClient method to call.
        params: Keyword arguments for that method.
        https: If True, request over https.
        headers: Extra request headers.
        timeout: Request timeout in seconds.
        debug: If True, enable debug logging.
        url_only: If True, print the URL instead of requesting it.
    """

    method: str = ""
    params: Dict[str, Any] = field(default_factory=dict)
    https: bool = False
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None
    debug: bool = False
    url_only: bool = False

    def to_options(self) -> Optional[RequestOptions]:
        """Build per-call request options, or None when nothing was overridden."""
        if not (self.https or self.headers or self.timeout is not None):
            return None
        return RequestOptions(
            https=True if self.https else None,
            header=self.headers or None,
            timeout=self.timeout,
        )


def identifier(value: str) -> Union[int, str]:
    """Parse an ID argument: digits become an int, anything else stays a string."""
    return int(value) if value.isdigit() else value


def header_pair(value: str) -> tuple:
    """Parse a NAME=VALUE header argument."""
    name, sep, header_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"header must be NAME=VALUE, got {value!r}")
    return name.strip(), header_value.strip()


def _add_embed(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-e', '--embed',
        nargs='+',
        metavar='NAME',
        help='embed related resources (e.g. episodes cast)'
    )


def _add_command(
    subparsers,
    name: str,
    method: str,
    help_text: str
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(method=method)
    return parser


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='tvmaze',
        description="Query the TVmaze API and print the JSON response."
    )

    parser.add_argument(
        '--https',
        action='store_true',
        help='request over https instead of http'
    )

    parser.add_argument(
        '-H', '--header',
        dest='headers',
        action='append',
        type=header_pair,
        default=[],
        metavar='NAME=VALUE',
        help='extra request header (repeatable)'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='request timeout in seconds'
    )

    parser.add_argument(
        '--url-only',
        action='store_true',
        help="print the request URL without sending it"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    subparsers = parser.add_subparsers(dest='operation', metavar='OPERATION')
    subparsers.required = True

    # Search
    sub = _add_command(subparsers, 'search', 'search', 'search shows')
    sub.add_argument('query')

    sub = _add_command(subparsers, 'single-search', 'single_search', 'best matching show')
    sub.add_argument('query')
    _add_embed(sub)

    sub = _add_command(subparsers, 'search-people', 'search_people', 'search people')
    sub.add_argument('query')

    sub = _add_command(subparsers, 'lookup', 'lookup', 'look up a show by external ID')
    sub.add_argument('lookup_type', choices=LOOKUP_TYPES)
    sub.add_argument('external_id', type=identifier)

    # Schedule
    sub = _add_command(subparsers, 'schedule', 'schedule', 'episodes airing on a day')
    sub.add_argument('-c', '--country', dest='country_code', help='ISO 3166-1 country code')
    sub.add_argument('-d', '--date', help='ISO 8601 date (YYYY-MM-DD)')

    _add_command(subparsers, 'full-schedule', 'full_schedule', 'all future episodes')

    # Shows
    sub = _add_command(subparsers, 'show', 'show', 'show information')
    sub.add_argument('show_id', type=identifier)
    _add_embed(sub)

    sub = _add_command(subparsers, 'episodes', 'episodes', 'episode list of a show')
    sub.add_argument('show_id', type=identifier)
    sub.add_argument('--specials', action='store_true', help='include specials')

    sub = _add_command(subparsers, 'episode', 'episode', 'episode by season and number')
    sub.add_argument('show_id', type=identifier)
    sub.add_argument('season', type=int)
    sub.add_argument('number', type=int)

    sub = _add_command(subparsers, 'episodes-by-date', 'episodes_by_date', 'episodes aired on a date')
    sub.add_argument('show_id', type=identifier)
    sub.add_argument('date')

    for name, method, help_text in (
        ('seasons', 'seasons', 'season list of a show'),
        ('cast', 'cast', 'cast of a show'),
        ('crew', 'crew', 'crew of a show'),
        ('aliases', 'aliases', 'aliases of a show'),
    ):
        sub = _add_command(subparsers, name, method, help_text)
        sub.add_argument('show_id', type=identifier)

    sub = _add_command(subparsers, 'season-episodes', 'season_episodes', 'episode list of a season')
    sub.add_argument('season_id', type=identifier)

    sub = _add_command(subparsers, 'shows-index', 'shows_index', 'list all shows, paged')
    sub.add_argument('-p', '--page', type=int, default=None)

    _add_command(subparsers, 'show-updates', 'show_updates', 'last update time of every show')

    # People
    for name, method, help_text in (
        ('person', 'person', 'person information'),
        ('person-cast-credits', 'person_cast_credits', 'cast credits of a person'),
        ('person-crew-credits', 'person_crew_credits', 'crew credits of a person'),
    ):
        sub = _add_command(subparsers, name, method, help_text)
        sub.add_argument('person_id', type=identifier)
        _add_embed(sub)

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    values = vars(namespace)
    params = {
        name: values[name]
        for name in METHOD_PARAMETERS
        if name in values
    }

    return CLIArgs(
        method=namespace.method,
        params=params,
        https=namespace.https,
        headers=dict(namespace.headers),
        timeout=namespace.timeout,
        debug=namespace.debug,
        url_only=namespace.url_only,
    )
