"""
Unit tests for URL and header construction
"""

import pytest

from ProxerPy.clients.exceptions import InvalidParametersError
from ProxerPy.clients.options import ProxerOptions, TEST_MODE
from ProxerPy.clients.proxer_client import ProxerClient
from ProxerPy.clients.request import ProxerRequest
from ProxerPy.clients.request_builder import (
    API_KEY_HEADER,
    LOGIN_TOKEN_HEADER,
    TEST_MODE_HEADER,
    USER_AGENT_HEADER,
    build_headers,
    build_url,
    mask_secret,
)


class TestBuildUrl:
    """Test URL construction"""

    def test_default_options(self, entry_request):
        url = build_url(entry_request, ProxerOptions())
        assert url == "https://proxer.me/api/v1/info/entry"

    def test_insecure_scheme_and_port(self, entry_request, local_options):
        url = build_url(entry_request, local_options)
        assert url == "http://localhost:4000/api/v1/info/entry"

    def test_port_omitted_unless_set(self, entry_request):
        url = build_url(entry_request, ProxerOptions(host="example.org"))
        assert url == "https://example.org/api/v1/info/entry"

    def test_custom_base_path(self, entry_request):
        url = build_url(entry_request, ProxerOptions(path="/proxy/api"))
        assert url == "https://proxer.me/proxy/api/v1/info/entry"

    def test_each_field_changes_url(self, entry_request):
        base = ProxerOptions()
        variants = [
            ProxerOptions(use_ssl=False),
            ProxerOptions(host="proxer.net"),
            ProxerOptions(port=8443),
            ProxerOptions(path="/api2"),
        ]
        base_url = build_url(entry_request, base)
        urls = {build_url(entry_request, options) for options in variants}

        assert base_url not in urls
        assert len(urls) == len(variants)

        other_group = ProxerRequest(api_class="list", api_func="entry")
        other_func = ProxerRequest(api_class="info", api_func="comments")
        assert build_url(other_group, base) != base_url
        assert build_url(other_func, base) != base_url

    def test_path_fragment_verbatim(self):
        request = ProxerRequest(api_class="notifications", api_func="news")
        url = build_url(request, ProxerOptions(host="h", port=1, path="/p"))
        assert "/v1/notifications/news" in url
        assert url.endswith("/v1/notifications/news")

    @pytest.mark.parametrize("request_, options", [
        ("info/entry", ProxerOptions()),
        (ProxerRequest(api_class="info", api_func="entry"), {"host": "proxer.me"}),
        (ProxerRequest(api_class="", api_func="entry"), ProxerOptions()),
        (ProxerRequest(api_class="info", api_func=None), ProxerOptions()),
        (ProxerRequest(api_class="info", api_func="entry"), ProxerOptions(host="")),
        (ProxerRequest(api_class="info", api_func="entry"), ProxerOptions(port="80")),
    ])
    def test_malformed_input(self, request_, options):
        with pytest.raises(InvalidParametersError):
            build_url(request_, options)


class TestBuildHeaders:
    """Test header construction"""

    def test_api_key_headers(self, entry_request):
        client = ProxerClient.create("secret-key", ProxerOptions(device="dev/1"))
        headers = build_headers(entry_request, client)

        assert headers == {USER_AGENT_HEADER: "dev/1", API_KEY_HEADER: "secret-key"}

    def test_test_mode_headers(self, entry_request, test_mode_client):
        headers = build_headers(entry_request, test_mode_client)

        assert headers[TEST_MODE_HEADER] == "1"
        assert API_KEY_HEADER not in headers

    def test_exactly_one_of_key_or_test_marker(self, entry_request, client, test_mode_client):
        for c in (client, test_mode_client):
            headers = build_headers(entry_request, c)
            assert (API_KEY_HEADER in headers) != (TEST_MODE_HEADER in headers)

    def test_extra_headers_never_overwritten(self, client):
        request = ProxerRequest(
            api_class="info",
            api_func="entry",
            extra_header={"user-agent": "custom", API_KEY_HEADER: "other-key", "X-Extra": "1"},
        )
        headers = build_headers(request, client)

        assert headers["user-agent"] == "custom"
        assert USER_AGENT_HEADER not in headers
        assert headers[API_KEY_HEADER] == "other-key"
        assert headers["X-Extra"] == "1"

    def test_extra_headers_come_first(self, client):
        request = ProxerRequest(api_class="info", api_func="entry", extra_header={"X-First": "1"})
        headers = build_headers(request, client)
        assert list(headers)[0] == "X-First"

    def test_token_added_when_required_and_present(self, client):
        request = ProxerRequest(api_class="user", api_func="userinfo", authorization=True)
        headers = build_headers(request, client.with_login_token("tok"))
        assert headers[LOGIN_TOKEN_HEADER] == "tok"

    def test_token_not_added_when_not_required(self, entry_request, client):
        headers = build_headers(entry_request, client.with_login_token("tok"))
        assert LOGIN_TOKEN_HEADER not in headers

    def test_token_silently_omitted_without_login(self, client):
        request = ProxerRequest(api_class="user", api_func="userinfo", authorization=True)
        headers = build_headers(request, client)
        assert LOGIN_TOKEN_HEADER not in headers

    def test_malformed_request(self, client):
        with pytest.raises(InvalidParametersError):
            build_headers("info/entry", client)

    def test_non_string_extra_headers(self, client):
        request = ProxerRequest(api_class="info", api_func="entry", extra_header={"X-Count": 1})
        with pytest.raises(InvalidParametersError):
            build_headers(request, client)

    def test_malformed_client(self, entry_request):
        with pytest.raises(InvalidParametersError):
            build_headers(entry_request, object())

    def test_non_ascii_device_rejected(self, entry_request):
        client = ProxerClient.create("key-1", ProxerOptions(device="Prüfer/1"))
        with pytest.raises(InvalidParametersError) as exc_info:
            build_headers(entry_request, client)
        assert exc_info.value.details["header"] == "User-Agent"

    def test_non_ascii_extra_header_rejected(self, client):
        request = ProxerRequest(api_class="info", api_func="entry", extra_header={"X-Name": "Zoë"})
        with pytest.raises(InvalidParametersError):
            build_headers(request, client)


class TestMaskSecret:

    def test_masks_middle(self):
        assert mask_secret("abcdefgh") == "ab****gh"

    def test_short_values_fully_masked(self):
        assert mask_secret("abc") == "****"
