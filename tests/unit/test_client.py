"""Tests for the TVmaze API client."""

import pytest
import requests
from unittest.mock import Mock, patch

from tvmaze.api.client import Endpoint, Tvmaze, TvmazeClient, TvmazeUrlBuilder
from tvmaze.api.exceptions import InvalidArgumentError
from tvmaze.api.options import RequestOptions
from tvmaze.config.settings import USER_AGENT

BASE = "http://api.tvmaze.com/"


@pytest.fixture
def urls():
    """Client that returns URLs instead of requesting them."""
    return TvmazeUrlBuilder()


class TestEndpointUrls:
    """Every endpoint maps to its documented path and query."""

    @pytest.mark.parametrize("call, expected", [
        (lambda c: c.search("Firefly"), "search/shows?q=Firefly"),
        (lambda c: c.single_search("Firefly"), "singlesearch/shows?q=Firefly"),
        (lambda c: c.search_people("lauren lapkus"), "search/people?q=lauren+lapkus"),
        (lambda c: c.lookup("tvrage", 24493), "lookup/shows?tvrage=24493"),
        (lambda c: c.lookup_thetvdb(81189), "lookup/shows?thetvdb=81189"),
        (lambda c: c.lookup_imdb("tt3530232"), "lookup/shows?imdb=tt3530232"),
        (lambda c: c.lookup_tvrage(24493), "lookup/shows?tvrage=24493"),
        (lambda c: c.schedule("GB", "2014-12-01"), "schedule?countrycode=GB&date=2014-12-01"),
        (lambda c: c.schedule(), "schedule"),
        (lambda c: c.full_schedule(), "schedule/full"),
        (lambda c: c.show(396), "shows/396"),
        (lambda c: c.episodes(396), "shows/396/episodes"),
        (lambda c: c.episodes(396, True), "shows/396/episodes?specials=1"),
        (lambda c: c.episode(396, 1, 1), "shows/396/episodebynumber?season=1&number=1"),
        (lambda c: c.episodes_by_date(396, "2013-07-01"), "shows/396/episodesbydate?date=2013-07-01"),
        (lambda c: c.seasons(396), "shows/396/seasons"),
        (lambda c: c.season_episodes(1), "seasons/1/episodes"),
        (lambda c: c.cast(396), "shows/396/cast"),
        (lambda c: c.crew(396), "shows/396/crew"),
        (lambda c: c.aliases(396), "shows/396/akas"),
        (lambda c: c.shows_index(), "shows"),
        (lambda c: c.shows_index(2), "shows?page=2"),
        (lambda c: c.show_updates(), "updates/shows"),
        (lambda c: c.person(1), "people/1"),
        (lambda c: c.person_cast_credits(1), "people/1/castcredits"),
        (lambda c: c.person_crew_credits(100), "people/100/crewcredits"),
    ])
    def test_url(self, urls, call, expected):
        """Built URL matches the endpoint template."""
        assert call(urls) == BASE + expected

    def test_single_search_with_embed(self, urls):
        """Search string and embed are both encoded."""
        url = urls.single_search("star vs the forces of evil", ["episodes"])
        assert url == BASE + "singlesearch/shows?q=star+vs+the+forces+of+evil&embed%5B%5D=episodes"

    @pytest.mark.parametrize("method, path", [
        ("show", "shows/1"),
        ("person", "people/1"),
        ("person_cast_credits", "people/1/castcredits"),
        ("person_crew_credits", "people/1/crewcredits"),
    ])
    def test_embed_order_preserved(self, urls, method, path):
        """Each embed name is repeated in the given order."""
        url = getattr(urls, method)(1, ["b", "a"])
        assert url == BASE + path + "?embed%5B%5D=b&embed%5B%5D=a"

    def test_empty_embed_omitted(self, urls):
        """An empty embed list emits no embed key."""
        assert urls.show(1, []) == BASE + "shows/1"

    def test_page_zero_omitted(self, urls):
        """Falsy page numbers are not sent."""
        assert urls.shows_index(0) == BASE + "shows"

    def test_specials_false_omitted(self, urls):
        """specials=False sends no specials key."""
        assert "specials" not in urls.episodes(396, False)

    def test_https_option(self, urls):
        """https=True switches the scheme."""
        url = urls.show(396, options=RequestOptions(https=True))
        assert url == "https://api.tvmaze.com/shows/396"

    def test_endpoint_query_replaces_caller_query(self, urls):
        """Endpoints with query keys ignore a caller-supplied query."""
        url = urls.search("Firefly", options=RequestOptions(query={"x": "1"}))
        assert url == BASE + "search/shows?q=Firefly"

    def test_optional_only_endpoint_replaces_caller_query(self, urls):
        """show() without embed still discards the caller's query."""
        url = urls.show(1, options=RequestOptions(query={"x": "1"}))
        assert url == BASE + "shows/1"

    def test_queryless_endpoint_keeps_caller_query(self, urls):
        """Endpoints without query keys send the caller's query."""
        url = urls.show_updates(options=RequestOptions(query={"since": "day"}))
        assert url == BASE + "updates/shows?since=day"

    def test_client_defaults_apply(self):
        """Client-wide defaults apply to every call."""
        client = TvmazeUrlBuilder(defaults=RequestOptions(https=True))
        assert client.cast(1).startswith("https://")

    def test_per_call_overrides_client_defaults(self):
        """Per-call options win over client defaults."""
        client = TvmazeUrlBuilder(defaults=RequestOptions(https=True))
        assert client.cast(1, options=RequestOptions(https=False)).startswith("http://")


class TestArgumentValidation:
    """Malformed arguments fail before any request."""

    @pytest.mark.parametrize("call", [
        lambda c: c.search(""),
        lambda c: c.search("   "),
        lambda c: c.search(None),
        lambda c: c.single_search("Firefly", "episodes"),
        lambda c: c.single_search("Firefly", ["episodes", ""]),
        lambda c: c.search_people(42),
        lambda c: c.lookup("tvdb", 1),
        lambda c: c.lookup_imdb(None),
        lambda c: c.show(None),
        lambda c: c.show(""),
        lambda c: c.show(True),
        lambda c: c.show(1.5),
        lambda c: c.episode(396, None, 1),
        lambda c: c.episode(396, 1, None),
        lambda c: c.episodes_by_date(396, ""),
        lambda c: c.season_episodes(None),
        lambda c: c.person([1]),
        lambda c: c.show("396/episodes"),
        lambda c: c.show("1?x=y"),
        lambda c: c.seasons("1#top"),
        lambda c: c.person_crew_credits("100/castcredits"),
    ])
    @patch('tvmaze.api.dispatcher.requests.get')
    def test_invalid_argument(self, mock_get, call):
        """InvalidArgumentError is raised and nothing is sent."""
        with pytest.raises(InvalidArgumentError):
            call(TvmazeClient())
        mock_get.assert_not_called()

    def test_invalid_argument_is_value_error(self):
        """InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            TvmazeClient().search("")

    def test_season_zero_allowed(self, urls):
        """Season 0 (specials) is a valid number."""
        assert urls.episode(396, 0, 1).endswith("season=0&number=1")

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_path_characters_rejected(self, mock_get):
        """A string ID cannot redirect the request to another path."""
        with pytest.raises(InvalidArgumentError, match="must not contain"):
            TvmazeClient().show("396/episodes")
        mock_get.assert_not_called()

    def test_text_id_allowed(self, urls):
        """String IDs without path characters are interpolated."""
        assert urls.show("396") == BASE + "shows/396"


class TestEmbedNames:
    """Embed names are checked against the documented resources."""

    @pytest.mark.parametrize("method, embed", [
        ("single_search", ["episodes", "nextepisode"]),
        ("show", ["cast", "crew", "seasons"]),
        ("person", ["castcredits", "crewcredits"]),
        ("person_cast_credits", ["show", "character"]),
        ("person_crew_credits", ["show"]),
    ])
    def test_known_embeds_no_warning(self, urls, log_messages, method, embed):
        """Documented names are sent without a warning."""
        arg = "Firefly" if method == "single_search" else 1
        getattr(urls, method)(arg, embed)

        assert not [m for level, m in log_messages if level == "WARNING"]

    @pytest.mark.parametrize("method, embed", [
        ("single_search", ["castcredits"]),
        ("show", ["character"]),
        ("person", ["episodes"]),
        ("person_cast_credits", ["crewcredits"]),
        ("person_crew_credits", ["character"]),
    ])
    def test_unknown_embed_warns_and_is_sent(self, urls, log_messages, method, embed):
        """Undocumented names are logged and still requested."""
        arg = "Firefly" if method == "single_search" else 1
        url = getattr(urls, method)(arg, embed)

        warnings = [m for level, m in log_messages if level == "WARNING"]
        assert len(warnings) == 1
        assert embed[0] in warnings[0]
        assert url.endswith(f"embed%5B%5D={embed[0]}")


class TestClientRequests:
    """Calls go through the dispatcher with mocked HTTP."""

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_search_success(self, mock_get, make_response, mock_search_response):
        """search returns the API response unchanged."""
        mock_get.return_value = make_response(mock_search_response)

        result = TvmazeClient().search("Firefly")

        assert result == mock_search_response
        mock_get.assert_called_once_with(
            BASE + "search/shows?q=Firefly",
            headers={"User-Agent": USER_AGENT},
            timeout=None,
        )

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_lookup_imdb(self, mock_get, make_response, mock_show_response):
        """lookup_imdb requests the documented URL."""
        mock_get.return_value = make_response(mock_show_response)

        result = Tvmaze.lookup_imdb("tt3530232")

        assert result["id"] == 396
        assert mock_get.call_args[0][0] == BASE + "lookup/shows?imdb=tt3530232"

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_custom_header(self, mock_get, make_response):
        """Custom headers are sent alongside the User-Agent."""
        mock_get.return_value = make_response([])

        TvmazeClient().cast(396, options=RequestOptions(header={"X-Trace": "abc"}))

        headers = mock_get.call_args[1]["headers"]
        assert headers == {"User-Agent": USER_AGENT, "X-Trace": "abc"}

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_http_error_propagates(self, mock_get, make_response):
        """A 404 surfaces as the transport's HTTPError."""
        mock_get.return_value = make_response(None, status_code=404)

        with pytest.raises(requests.HTTPError):
            TvmazeClient().show(999999999)

    @patch('tvmaze.api.dispatcher.requests.get')
    def test_network_error_propagates(self, mock_get):
        """Network errors surface unchanged."""
        mock_get.side_effect = requests.ConnectionError("Network error")

        with pytest.raises(requests.ConnectionError):
            TvmazeClient().seasons(396)

    def test_session_used(self, make_response):
        """The client's session sends the request."""
        session = Mock()
        session.get.return_value = make_response({"id": 1})

        result = TvmazeClient(session=session).person(1)

        assert result == {"id": 1}
        assert session.get.call_args[0][0] == BASE + "people/1"


class TestEndpoint:
    """Tests for the Endpoint descriptor."""

    def test_defaults(self):
        """Query defaults to None."""
        endpoint = Endpoint("shows")
        assert endpoint.path == "shows"
        assert endpoint.query is None
