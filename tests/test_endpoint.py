import pytest

from syw_client.endpoint import is_absolute_url, resolve_endpoint

BASE = "https://platform.shopyourway.com"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/users/current", f"{BASE}/users/current"),
        ("users/current", f"{BASE}/users/current"),
        ("/users/current/", f"{BASE}/users/current"),
        ("users/current/", f"{BASE}/users/current"),
        ("https://api.example.test/v1/things/", "https://api.example.test/v1/things"),
        ("http://api.example.test/v1", "http://api.example.test/v1"),
        ("", BASE),
        ("/", BASE),
        ("/a//", f"{BASE}/a/"),
    ],
)
def test_resolve_endpoint(path: str, expected: str) -> None:
    assert resolve_endpoint(path, BASE) == expected


def test_relative_path_without_leading_slash_matches_slashed_form() -> None:
    for path in ("a", "a/b", "a/b/", "products/search"):
        assert resolve_endpoint(path, BASE) == resolve_endpoint("/" + path, BASE)


def test_absolute_url_ignores_base_url() -> None:
    url = "https://other.example.test/x/"
    assert resolve_endpoint(url, BASE) == resolve_endpoint(url, "http://unused.test") == url[:-1]


def test_is_absolute_url() -> None:
    assert is_absolute_url("https://example.test")
    assert not is_absolute_url("/relative/path")
    assert not is_absolute_url("relative")
