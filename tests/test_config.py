from pathlib import Path

import pytest

from sitefeed.config import BuildConfig, FeedOptions, resolve_config
from sitefeed.errors import ConfigError, InvalidUrlError
from sitefeed.models import ContentRecord, FeedFormat
from sitefeed.utils import deep_merge


def _build(**overrides) -> dict:
    """Helper returning minimal build settings."""
    build = {"site_url": "https://example.com", "site_name": "Example", "out_dir": "dist"}
    build.update(overrides)
    return build


def test_defaults() -> None:
    config = resolve_config({"content_types": ["posts"]}, _build())

    assert config.outputs == {FeedFormat.RSS: "/feed.xml"}
    assert config.max_items == 25
    assert config.html_fields == ["description", "content"]
    assert config.enforce_trailing_slashes is False
    assert config.out_dir == Path("dist")
    assert config.filter_nodes(object()) is True
    assert config.feed_options == {
        "generator": "sitefeed",
        "id": "https://example.com/",
        "link": "https://example.com/",
        "title": "Example",
        "feed_links": {"rss": "https://example.com/feed.xml"},
    }


def test_missing_site_url_raises() -> None:
    with pytest.raises(ConfigError, match="missing siteUrl"):
        resolve_config({"content_types": ["posts"]}, _build(site_url=None))


@pytest.mark.parametrize("options", [{}, {"content_types": []}, {"content_types": None}, None])
def test_missing_content_types_raises(options) -> None:
    with pytest.raises(ConfigError, match="missing contentTypes"):
        resolve_config(options, _build())


def test_site_url_checked_before_content_types() -> None:
    with pytest.raises(ConfigError, match="missing siteUrl"):
        resolve_config({}, _build(site_url=""))


def test_invalid_site_url_raises() -> None:
    with pytest.raises(InvalidUrlError):
        resolve_config({"content_types": ["posts"]}, _build(site_url="example.com"))


def test_root_path_prefix_is_ignored() -> None:
    config = resolve_config({"content_types": ["posts"]}, _build(path_prefix="/"))

    assert config.path_prefix == ""
    assert config.item_url("/posts/a") == "https://example.com/posts/a"
    assert config.feed_options["feed_links"]["rss"] == "https://example.com/feed.xml"


def test_path_prefix_applies_to_feed_and_item_links() -> None:
    config = resolve_config(
        {"content_types": ["posts"], "enforce_trailing_slashes": True},
        _build(path_prefix="/blog"),
    )

    assert config.feed_options["id"] == "https://example.com/blog/"
    assert config.feed_options["link"] == "https://example.com/blog/"
    assert config.feed_options["feed_links"]["rss"] == "https://example.com/blog/feed.xml"
    assert config.item_url("/posts/a") == "https://example.com/blog/posts/a/"


def test_partial_format_settings_keep_default_output() -> None:
    config = resolve_config(
        {
            "content_types": ["posts"],
            "rss": {"enabled": False},
            "atom": {"enabled": True},
            "json": {"enabled": True, "output": "/feeds/all/"},
        },
        _build(),
    )

    assert config.outputs == {
        FeedFormat.ATOM: "/feed.atom",
        FeedFormat.JSON: "/feeds/all.json",
    }
    assert config.feed_options["feed_links"] == {
        "atom": "https://example.com/feed.atom",
        "json": "https://example.com/feeds/all.json",
    }


def test_output_extension_is_enforced() -> None:
    config = resolve_config(
        {"content_types": ["posts"], "rss": {"output": "/rss"}, "atom": True},
        _build(),
    )

    assert config.outputs[FeedFormat.RSS] == "/rss.xml"
    assert config.outputs[FeedFormat.ATOM] == "/feed.atom"


def test_user_feed_options_override_defaults() -> None:
    config = resolve_config(
        {
            "content_types": ["posts"],
            "feed_options": {
                "title": "Custom Title",
                "author": {"name": "Ada"},
                "feed_links": {"rss": "https://elsewhere.example/feed"},
            },
        },
        _build(),
    )

    assert config.feed_options["title"] == "Custom Title"
    assert config.feed_options["author"] == {"name": "Ada"}
    assert config.feed_options["generator"] == "sitefeed"
    assert config.feed_options["feed_links"] == {"rss": "https://example.com/feed.xml"}


@pytest.mark.parametrize("max_items,expected", [(None, None), (0, None), (10, 10)])
def test_max_items_unset_means_unbounded(max_items, expected) -> None:
    config = resolve_config({"content_types": ["posts"], "max_items": max_items}, _build())

    assert config.max_items == expected


def test_default_mapper_reads_configured_date_field() -> None:
    config = resolve_config(
        {"content_types": ["posts"], "date_field": "fields.date"},
        _build(),
    )
    record = ContentRecord(
        path="/posts/a",
        title="A",
        content="<p>Body</p>",
        fields={"date": "2023-01-02"},
    )

    assert config.node_to_feed_item(record) == {
        "title": "A",
        "date": "2023-01-02",
        "content": "<p>Body</p>",
    }


def test_accepts_model_instances() -> None:
    config = resolve_config(
        FeedOptions(content_types=["posts"], max_items=5),
        BuildConfig(site_url="https://example.com", out_dir="public"),
    )

    assert config.max_items == 5
    assert config.out_dir == Path("public")


def test_build_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITEFEED_SITE_URL", "https://env.example.com")
    monkeypatch.setenv("SITEFEED_PATH_PREFIX", "/docs")

    build = BuildConfig()

    assert build.site_url == "https://env.example.com"
    assert build.path_prefix == "/docs"
    assert BuildConfig(site_url="https://explicit.example.com").site_url == "https://explicit.example.com"


def test_unknown_option_rejected() -> None:
    with pytest.raises(ValueError):
        FeedOptions(content_types=["posts"], max_itmes=3)


def test_deep_merge_merges_nested_mappings() -> None:
    base = {"author": {"name": "Site", "email": "site@example.com"}, "title": "Site"}

    merged = deep_merge(base, {"author": {"name": "Ada"}, "language": "en"})

    assert merged == {
        "author": {"name": "Ada", "email": "site@example.com"},
        "title": "Site",
        "language": "en",
    }
    assert base["author"]["name"] == "Site"
