"""Tests for SuggestionProvider."""

from urllib.parse import urlencode

import httpx
import pytest

from vidmeta_client.exceptions import RemoteQueryFailure
from vidmeta_client.providers import SuggestionProvider
from vidmeta_client.settings import SuggestSettings

from helpers import make_response, make_routing_client, mirror_item


SUGGEST_URL = "http://suggestqueries.google.com/complete/search"


@pytest.mark.asyncio
class TestSuggestionProvider:
    """Test the autocomplete provider."""

    async def test_success(self):
        """A 200 array response is parsed with the mirror-shape parser."""
        client = make_routing_client(
            {SUGGEST_URL: make_response(200, [mirror_item("A", "a", 30)])}
        )

        records = await SuggestionProvider(client).suggest("a")

        assert [r.video_id for r in records] == ["a"]

    async def test_prefix_sent_as_encoded_param(self):
        """The prefix goes through params, so reserved characters cannot inject parameters."""
        client = make_routing_client({SUGGEST_URL: make_response(200, [])})
        prefix = "rock & roll?q=evil#frag"

        await SuggestionProvider(client).suggest(prefix)

        url = client.get.call_args.args[0]
        params = client.get.call_args.kwargs["params"]
        assert url == SUGGEST_URL
        assert params == {"client": "firefox", "ds": "yt", "q": prefix}
        assert "rock+%26+roll%3Fq%3Devil%23frag" in urlencode(params)

    async def test_non_array_entries_yield_empty_list(self):
        """An array without video objects is an empty, successful answer."""
        client = make_routing_client({SUGGEST_URL: make_response(200, ["a", ["ab", "abc"]])})

        assert await SuggestionProvider(client).suggest("a") == []

    async def test_http_error_status_raises(self):
        """A non-200 status maps to RemoteQueryFailure."""
        client = make_routing_client({SUGGEST_URL: make_response(503, "unavailable")})

        with pytest.raises(RemoteQueryFailure) as exc_info:
            await SuggestionProvider(client).suggest("a")

        assert exc_info.value.status_code == 503

    async def test_transport_error_raises(self):
        """A transport error maps to RemoteQueryFailure."""
        client = make_routing_client({SUGGEST_URL: httpx.ReadTimeout("timed out")})

        with pytest.raises(RemoteQueryFailure, match="Suggestion request failed"):
            await SuggestionProvider(client).suggest("a")

    async def test_parse_failure_raises(self):
        """A non-array body maps to RemoteQueryFailure."""
        client = make_routing_client({SUGGEST_URL: make_response(200, {"error": "x"})})

        with pytest.raises(RemoteQueryFailure, match="Unparsable"):
            await SuggestionProvider(client).suggest("a")

    async def test_no_retry(self):
        """Failures are not retried."""
        client = make_routing_client({SUGGEST_URL: make_response(500)})

        with pytest.raises(RemoteQueryFailure):
            await SuggestionProvider(client).suggest("a")

        assert client.get.await_count == 1

    async def test_custom_endpoint(self):
        """Endpoint and fixed parameters come from settings."""
        settings = SuggestSettings(url="https://suggest.example.com/q", client="chrome", ds="yt")
        client = make_routing_client({"https://suggest.example.com/q": make_response(200, [])})

        await SuggestionProvider(client, settings).suggest("x")

        assert client.get.call_args.kwargs["params"]["client"] == "chrome"
