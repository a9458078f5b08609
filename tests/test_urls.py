from urllib.parse import urlsplit

import pytest

from sitefeed.errors import InvalidUrlError
from sitefeed.utils import url_with_base

BASE = "https://example.com:8080/blog/"


def test_resolves_root_relative_path() -> None:
    assert url_with_base("/posts/hello", "https://example.com") == "https://example.com/posts/hello"


def test_empty_path_resolves_to_site_root() -> None:
    assert url_with_base("", "https://example.com") == "https://example.com/"


def test_collapses_dot_segments() -> None:
    base = "https://example.com/posts/hello/"

    assert url_with_base("../img/a.png", base) == "https://example.com/posts/img/a.png"
    assert url_with_base("./b.png", base) == "https://example.com/posts/hello/b.png"
    assert url_with_base("/a/../b", base) == "https://example.com/b"


def test_trailing_slash_added_to_routes() -> None:
    assert url_with_base("/about", "https://example.com", True) == "https://example.com/about/"
    assert url_with_base("/about/", "https://example.com", True) == "https://example.com/about/"


def test_trailing_slash_skips_file_paths() -> None:
    assert url_with_base("/feed.xml", "https://example.com", True) == "https://example.com/feed.xml"
    assert url_with_base("/index.HTML", "https://example.com", True) == "https://example.com/index.HTML"


def test_trailing_slash_keeps_query_and_fragment() -> None:
    result = url_with_base("/about?ref=feed#team", "https://example.com", True)

    assert result == "https://example.com/about/?ref=feed#team"


def test_no_trailing_slash_when_disabled() -> None:
    assert url_with_base("/about", "https://example.com", False) == "https://example.com/about"


@pytest.mark.parametrize("path", ["/a", "/a/b/", "./c", "../d", "../../../e", "/f?x=1"])
def test_relative_paths_keep_base_origin(path: str) -> None:
    result = urlsplit(url_with_base(path, BASE))

    assert result.scheme == "https"
    assert result.netloc == "example.com:8080"


@pytest.mark.parametrize("base", ["example.com", "/relative/path", "", "http://[::1"])
def test_invalid_base_raises(base: str) -> None:
    with pytest.raises(InvalidUrlError):
        url_with_base("/about", base)
