"""Configuration and CLI handling."""

from tvmaze.config.settings import (
    BASE_HOST,
    USER_AGENT,
    LOOKUP_TYPES,
    SHOW_EMBEDS,
    PERSON_EMBEDS,
    CAST_CREDIT_EMBEDS,
    CREW_CREDIT_EMBEDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)

__all__ = [
    "BASE_HOST",
    "USER_AGENT",
    "LOOKUP_TYPES",
    "SHOW_EMBEDS",
    "PERSON_EMBEDS",
    "CAST_CREDIT_EMBEDS",
    "CREW_CREDIT_EMBEDS",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
]
