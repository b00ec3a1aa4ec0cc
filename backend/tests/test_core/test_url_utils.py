"""Tests for base URL building and query string rewriting."""

from paginator.core.url_utils import (
    build_base_url,
    get_request_path,
    update_query_string,
)
from tests.mocks.asgi import make_request


class TestBuildBaseUrl:
    def test_appends_port(self):
        assert build_base_url("localhost", 3333) == "http://localhost:3333"

    def test_default_port_omitted(self):
        assert build_base_url("example.com", 8080) == "http://example.com"

    def test_default_port_as_string_omitted(self):
        assert build_base_url("example.com", "8080") == "http://example.com"

    def test_port_80_is_kept(self):
        assert build_base_url("example.com", 80) == "http://example.com:80"

    def test_non_numeric_port_is_appended(self):
        assert build_base_url("example.com", "abc") == "http://example.com:abc"


class TestUpdateQueryString:
    def test_replaces_existing_value(self):
        result = update_query_string("/visitors?per_page=10&page=2", "page", 3)
        assert result == "/visitors?per_page=10&page=3"

    def test_appends_with_ampersand(self):
        result = update_query_string("/visitors?per_page=10", "page", 1)
        assert result == "/visitors?per_page=10&page=1"

    def test_appends_with_question_mark(self):
        assert update_query_string("/visitors", "page", 1) == "/visitors?page=1"

    def test_replaces_first_parameter(self):
        result = update_query_string("/visitors?page=2&per_page=10", "page", 3)
        assert result == "/visitors?page=3&per_page=10"

    def test_case_insensitive_key(self):
        result = update_query_string("/visitors?PAGE=2&sort=asc", "page", 3)
        assert result == "/visitors?page=3&sort=asc"

    def test_suffix_match_is_not_replaced(self):
        result = update_query_string("/visitors?per_page=10", "page", 2)
        assert result == "/visitors?per_page=10&page=2"

    def test_empty_value_is_replaced(self):
        assert update_query_string("/visitors?page=", "page", 4) == "/visitors?page=4"

    def test_other_parameters_untouched(self):
        uri = "/visitors?q=a%20b&page=1&tags=x,y"
        assert update_query_string(uri, "page", 2) == "/visitors?q=a%20b&page=2&tags=x,y"

    def test_arbitrary_key(self):
        result = update_query_string("/scans?offset=10&limit=5", "offset", 15)
        assert result == "/scans?offset=15&limit=5"

    def test_key_is_escaped(self):
        result = update_query_string("/items?a.b=1", "a+b", 2)
        assert result == "/items?a.b=1&a+b=2"


class TestGetRequestPath:
    def test_path_with_query(self):
        request = make_request("/visitors", "page=1&per_page=10")
        assert get_request_path(request) == "/visitors?page=1&per_page=10"

    def test_path_without_query(self):
        assert get_request_path(make_request("/visitors")) == "/visitors"

    def test_missing_request(self):
        assert get_request_path(None) == ""

    def test_encoded_path_kept(self):
        request = make_request("/files/a/b c", "page=1", raw_path="/files/a%2Fb%20c")
        assert get_request_path(request) == "/files/a%2Fb%20c?page=1"

    def test_raw_path_query_stripped(self):
        request = make_request("/visitors", "page=2", raw_path="/visitors?page=2")
        assert get_request_path(request) == "/visitors?page=2"

    def test_root_path_prefixed(self):
        request = make_request(
            "/visitors", "page=1", raw_path="/visitors", root_path="/api"
        )
        assert get_request_path(request) == "/api/visitors?page=1"

    def test_root_path_already_in_raw_path(self):
        request = make_request(
            "/api/visitors", raw_path="/api/visitors", root_path="/api"
        )
        assert get_request_path(request) == "/api/visitors"
