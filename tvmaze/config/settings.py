"""Configuration settings and constants for the tvmaze package."""

from typing import Optional, Tuple

from tvmaze import __version__

# Host serving the public API (no scheme, no trailing slash)
BASE_HOST: str = "api.tvmaze.com"

# Default User-Agent sent with every request
USER_AGENT: str = f"Mozilla/5.0 (Python) Tvmaze/{__version__}"

# External ID namespaces accepted by lookup/shows
LOOKUP_TYPES: Tuple[str, ...] = ("thetvdb", "imdb", "tvrage")

# Request timeout in seconds (None leaves the transport default)
DEFAULT_REQUEST_TIMEOUT_SECONDS: Optional[float] = None

# Documented embed resources per endpoint family
SHOW_EMBEDS: Tuple[str, ...] = (
    "episodes", "seasons", "cast", "crew", "akas", "images",
    "nextepisode", "previousepisode",
)
PERSON_EMBEDS: Tuple[str, ...] = ("castcredits", "crewcredits")
CAST_CREDIT_EMBEDS: Tuple[str, ...] = ("show", "character")
CREW_CREDIT_EMBEDS: Tuple[str, ...] = ("show",)
