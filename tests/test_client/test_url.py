"""Tests for path, query-string and URL composition."""

from __future__ import annotations

import pytest

from ashttp.client.url import compose_path, encode_query, join_url


def _split_query(query: str) -> dict[str, str]:
    pairs = [pair.split("=", 1) for pair in query.split("&")]
    return {key: value for key, value in pairs}


class TestComposePath:
    def test_joins_with_slash(self) -> None:
        assert compose_path(["users", "456", "profile"]) == "users/456/profile"

    def test_empty_component_keeps_adjacent_slashes(self) -> None:
        assert compose_path(["api", "", "users"]) == "api//users"

    def test_no_components(self) -> None:
        assert compose_path([]) == ""

    @pytest.mark.parametrize("flags", [None, {}])
    def test_no_flags_means_no_question_mark(self, flags) -> None:
        assert compose_path(["users"], flags) == "users"

    def test_single_flag(self) -> None:
        assert compose_path(["users"], {"include": "posts,comments"}) == "users?include=posts,comments"

    def test_multiple_flags_any_order(self) -> None:
        result = compose_path(["users"], {"a": "1", "b": "2", "c": ""})
        path, query = result.split("?", 1)
        assert path == "users"
        assert set(query.split("&")) == {"a=1", "b=2", "c="}

    def test_flags_without_path(self) -> None:
        assert compose_path([], {"q": "x"}) == "?q=x"

    def test_values_not_percent_encoded(self) -> None:
        assert compose_path(["search"], {"q": "a b/c"}) == "search?q=a b/c"


class TestEncodeQuery:
    @pytest.mark.parametrize(
        "flags",
        [
            {"include": "posts,comments"},
            {"a": "1", "b": "2"},
            {"page": "3", "size": "50", "sort": "name", "empty": ""},
        ],
    )
    def test_resplit_recovers_flags(self, flags: dict[str, str]) -> None:
        assert _split_query(encode_query(flags)) == flags

    @pytest.mark.parametrize("flags", [None, {}])
    def test_empty(self, flags) -> None:
        assert encode_query(flags) == ""


class TestJoinUrl:
    def test_base_and_path(self) -> None:
        assert join_url("https://httpbin.dev/anything", "users/456") == "https://httpbin.dev/anything/users/456"

    def test_empty_path_gives_trailing_slash(self) -> None:
        assert join_url("https://httpbin.dev/anything", "") == "https://httpbin.dev/anything/"

    def test_base_trailing_slash_not_doubled(self) -> None:
        assert join_url("https://staging.example.com/", "users") == "https://staging.example.com/users"
        assert join_url("https://staging.example.com/", "") == "https://staging.example.com/"

    def test_explicit_empty_component_still_doubles(self) -> None:
        url = join_url("https://a.example.com", compose_path(["v1", "", "users"]))
        assert url == "https://a.example.com/v1//users"
