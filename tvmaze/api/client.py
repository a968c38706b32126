"""TVmaze API client.

One method per documented endpoint. Each method validates its arguments,
maps them to an :class:`Endpoint` (path plus query) and hands it to the
request dispatcher.

See https://www.tvmaze.com/api for the endpoint reference.
"""

from typing import Any, Mapping, NamedTuple, Optional, Sequence, Union

import requests
from loguru import logger

from tvmaze.api.dispatcher import build_url, send_request
from tvmaze.api.exceptions import InvalidArgumentError
from tvmaze.api.options import Array, RequestOptions, merge_options
from tvmaze.config.settings import (
    CAST_CREDIT_EMBEDS,
    CREW_CREDIT_EMBEDS,
    LOOKUP_TYPES,
    PERSON_EMBEDS,
    SHOW_EMBEDS,
)

Identifier = Union[int, str]

# Characters that would change the meaning of an interpolated path segment
PATH_RESERVED = ("/", "?", "#")


class Endpoint(NamedTuple):
    """
    Path and query of a single API call.

    A query of None means the endpoint defines no query keys, so any
    query supplied in the caller's options is sent as-is.
    """

    path: str
    query: Optional[Mapping[str, Any]] = None


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty string, got {value!r}")
    return value


def _require_id(value: Any, name: str) -> Identifier:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidArgumentError(f"{name} must be an int or a string, got {value!r}")
    if isinstance(value, str):
        if not value.strip():
            raise InvalidArgumentError(f"{name} must not be empty")
        # IDs are interpolated into the path
        if any(char in value for char in PATH_RESERVED):
            raise InvalidArgumentError(f"{name} must not contain '/', '?' or '#': {value!r}")
    return value


def _embed_value(
    embed: Optional[Sequence[str]],
    known: Sequence[str] = ()
) -> Optional[Array]:
    """
    Tag an embed list, or return None when nothing is embedded.

    Names outside ``known`` are still sent, with a warning, since the
    service may accept resources added after this release.
    """
    if embed is None:
        return None
    if isinstance(embed, str):
        raise InvalidArgumentError(
            f"embed must be a list of resource names, not a string: {embed!r}"
        )
    names = list(embed)
    for name in names:
        _require_text(name, "embed item")

    unknown = [name for name in names if known and name not in known]
    if unknown:
        logger.warning(
            f"Unknown embed resource(s) {', '.join(unknown)}, expected one of {', '.join(known)}"
        )
    return Array(names) if names else None


class TvmazeClient:
    """
    Client for the TVmaze public API.

    Attributes:
        defaults: Options applied to every call of this client, before
            the per-call options.
        session: Optional requests.Session reused across calls.
    """

    def __init__(
        self,
        defaults: Optional[RequestOptions] = None,
        session: Optional[requests.Session] = None
    ) -> None:
        """
        Initialize the client.

        Args:
            defaults: Client-wide options (e.g. RequestOptions(https=True)).
            session: requests.Session to send requests through.
        """
        self.defaults = defaults or RequestOptions()
        self.session = session

    def _effective_options(
        self,
        endpoint: Endpoint,
        options: Optional[RequestOptions]
    ) -> RequestOptions:
        opts = merge_options(self.defaults, options)
        if endpoint.query is not None:
            opts = merge_options(opts, RequestOptions(query=endpoint.query))
        return opts

    def _dispatch(self, endpoint: Endpoint, options: Optional[RequestOptions]) -> Any:
        opts = self._effective_options(endpoint, options)
        return send_request(endpoint.path, opts, session=self.session)

    # Search

    def search(self, query: str, *, options: Optional[RequestOptions] = None) -> Any:
        """
        Search through all shows, in order of relevance.

        Args:
            query: Search input.
            options: Per-call request options.

        Returns:
            List of {score, show} results.
        """
        q = _require_text(query, "query")
        return self._dispatch(Endpoint("search/shows", {"q": q}), options)

    def single_search(
        self,
        query: str,
        embed: Optional[Sequence[str]] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        Return the single best matching show, with optional embedded resources.

        Args:
            query: Search input.
            embed: Resources to embed (e.g. ['episodes']).
            options: Per-call request options.

        Returns:
            The show object.
        """
        q = _require_text(query, "query")
        return self._dispatch(
            Endpoint("singlesearch/shows", {"q": q, "embed": _embed_value(embed, SHOW_EMBEDS)}),
            options,
        )

    def search_people(self, query: str, *, options: Optional[RequestOptions] = None) -> Any:
        """Search through all people, in order of relevance."""
        q = _require_text(query, "query")
        return self._dispatch(Endpoint("search/people", {"q": q}), options)

    # Lookup

    def lookup(
        self,
        lookup_type: str,
        external_id: Identifier,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        Look up a show by its ID on another site.

        Args:
            lookup_type: One of 'thetvdb', 'imdb' or 'tvrage'.
            external_id: ID of the show on that site.
            options: Per-call request options.

        Returns:
            The show object.

        Raises:
            InvalidArgumentError: If the lookup type is unknown.
        """
        if lookup_type not in LOOKUP_TYPES:
            raise InvalidArgumentError(
                f"Unknown lookup type {lookup_type!r}, expected one of {', '.join(LOOKUP_TYPES)}"
            )
        external_id = _require_id(external_id, "external_id")
        return self._dispatch(Endpoint("lookup/shows", {lookup_type: external_id}), options)

    def lookup_thetvdb(self, external_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """Look up a show by its TheTVDB ID."""
        return self.lookup("thetvdb", external_id, options=options)

    def lookup_imdb(self, external_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """Look up a show by its IMDb ID (e.g. 'tt3530232')."""
        return self.lookup("imdb", external_id, options=options)

    def lookup_tvrage(self, external_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """Look up a show by its TVRage ID."""
        return self.lookup("tvrage", external_id, options=options)

    # Schedule

    def schedule(
        self,
        country_code: Optional[str] = None,
        date: Optional[str] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        List the episodes airing in a country on a given day.

        Values are sent as-is; the service defaults to the US and today
        when they are omitted.

        Args:
            country_code: ISO 3166-1 country code (e.g. 'GB').
            date: ISO 8601 date (e.g. '2014-12-01').
            options: Per-call request options.
        """
        return self._dispatch(
            Endpoint("schedule", {"countrycode": country_code, "date": date}),
            options,
        )

    def full_schedule(self, *, options: Optional[RequestOptions] = None) -> Any:
        """List all future episodes known to TVmaze."""
        return self._dispatch(Endpoint("schedule/full"), options)

    # Shows

    def show(
        self,
        show_id: Identifier,
        embed: Optional[Sequence[str]] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        Retrieve the main information of a show.

        Args:
            show_id: TVmaze show ID.
            embed: Resources to embed (e.g. ['cast', 'episodes']).
            options: Per-call request options.
        """
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(
            Endpoint(f"shows/{show_id}", {"embed": _embed_value(embed, SHOW_EMBEDS)}),
            options,
        )

    def episodes(
        self,
        show_id: Identifier,
        specials: bool = False,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        List all episodes of a show.

        Args:
            show_id: TVmaze show ID.
            specials: Include specials in the list.
            options: Per-call request options.
        """
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(
            Endpoint(f"shows/{show_id}/episodes", {"specials": 1 if specials else None}),
            options,
        )

    def episode(
        self,
        show_id: Identifier,
        season: Identifier,
        number: Identifier,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """Retrieve one episode of a show by season and episode number."""
        show_id = _require_id(show_id, "show_id")
        season = _require_id(season, "season")
        number = _require_id(number, "number")
        return self._dispatch(
            Endpoint(
                f"shows/{show_id}/episodebynumber",
                {"season": season, "number": number},
            ),
            options,
        )

    def episodes_by_date(
        self,
        show_id: Identifier,
        date: str,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """List the episodes of a show aired on a date (ISO 8601)."""
        show_id = _require_id(show_id, "show_id")
        date = _require_text(date, "date")
        return self._dispatch(
            Endpoint(f"shows/{show_id}/episodesbydate", {"date": date}),
            options,
        )

    def seasons(self, show_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """List the seasons of a show."""
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(Endpoint(f"shows/{show_id}/seasons"), options)

    def season_episodes(self, season_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """List the episodes of a season."""
        season_id = _require_id(season_id, "season_id")
        return self._dispatch(Endpoint(f"seasons/{season_id}/episodes"), options)

    def cast(self, show_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """List the main cast of a show."""
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(Endpoint(f"shows/{show_id}/cast"), options)

    def crew(self, show_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """List the main crew of a show."""
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(Endpoint(f"shows/{show_id}/crew"), options)

    def aliases(self, show_id: Identifier, *, options: Optional[RequestOptions] = None) -> Any:
        """List the aliases (AKAs) of a show."""
        show_id = _require_id(show_id, "show_id")
        return self._dispatch(Endpoint(f"shows/{show_id}/akas"), options)

    def shows_index(
        self,
        page: Optional[int] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """
        List all shows, 250 per page, ordered by ID.

        Args:
            page: Page number; omitted from the request when falsy.
            options: Per-call request options.
        """
        return self._dispatch(Endpoint("shows", {"page": page or None}), options)

    def show_updates(self, *, options: Optional[RequestOptions] = None) -> Any:
        """Map every show ID to the timestamp of its last update."""
        return self._dispatch(Endpoint("updates/shows"), options)

    # People

    def person(
        self,
        person_id: Identifier,
        embed: Optional[Sequence[str]] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """Retrieve the main information of a person."""
        person_id = _require_id(person_id, "person_id")
        return self._dispatch(
            Endpoint(f"people/{person_id}", {"embed": _embed_value(embed, PERSON_EMBEDS)}),
            options,
        )

    def person_cast_credits(
        self,
        person_id: Identifier,
        embed: Optional[Sequence[str]] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """List the shows a person has cast credits for (embed e.g. ['show'])."""
        person_id = _require_id(person_id, "person_id")
        return self._dispatch(
            Endpoint(
                f"people/{person_id}/castcredits",
                {"embed": _embed_value(embed, CAST_CREDIT_EMBEDS)},
            ),
            options,
        )

    def person_crew_credits(
        self,
        person_id: Identifier,
        embed: Optional[Sequence[str]] = None,
        *,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """List the shows a person has crew credits for."""
        person_id = _require_id(person_id, "person_id")
        return self._dispatch(
            Endpoint(
                f"people/{person_id}/crewcredits",
                {"embed": _embed_value(embed, CREW_CREDIT_EMBEDS)},
            ),
            options,
        )


class TvmazeUrlBuilder(TvmazeClient):
    """
    Client variant that returns the URL each call would request.

    No network call is made. Useful to inspect or log requests.
    """

    def _dispatch(self, endpoint: Endpoint, options: Optional[RequestOptions]) -> str:
        opts = self._effective_options(endpoint, options)
        url = build_url(endpoint.path, opts)
        logger.debug(f"Built URL {url}")
        return url


# Shared default instance
Tvmaze = TvmazeClient()
