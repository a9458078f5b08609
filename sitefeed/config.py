"""
Configuration management for sitefeed.

Merges user feed options over defaults, validates the required build
settings, and derives output paths and feed-level metadata (including the
self links of every enabled format).

Responsibility: Resolve one read-only FeedConfiguration per build
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import FeedFormat
from .utils import deep_merge, ensure_extension, get_dotted, url_with_base

DEFAULT_GENERATOR = "sitefeed"

_DEFAULT_OUTPUTS: Dict[FeedFormat, Dict[str, Any]] = {
    FeedFormat.RSS: {"enabled": True, "output": "/feed.xml"},
    FeedFormat.ATOM: {"enabled": False, "output": "/feed.atom"},
    FeedFormat.JSON: {"enabled": False, "output": "/feed.json"},
}


def accept_all(record: Any) -> bool:
    """Default filter: keep every record"""
    return True


def make_default_mapper(date_field: str = "date") -> Callable[[Any], Dict[str, Any]]:
    """
    Build the default record-to-item mapping.

    Args:
        date_field: Dotted path of the record's date (e.g., 'date', 'fields.date')

    Returns:
        Function returning {'title', 'date', 'content'} for a record
    """

    def node_to_feed_item(record: Any) -> Dict[str, Any]:
        return {
            "title": get_dotted(record, "title"),
            "date": get_dotted(record, date_field),
            "content": get_dotted(record, "content"),
        }

    return node_to_feed_item


class BuildConfig(BaseSettings):
    """
    Site-wide build settings supplied by the host build.

    Values passed explicitly win over SITEFEED_* environment variables
    and the .env file.
    """

    site_url: Optional[str] = Field(default=None, description="Absolute site base URL")
    path_prefix: str = Field(default="", description="Sub-path the site is served from")
    out_dir: Path = Field(default=Path("dist"), description="Build output directory")
    site_name: Optional[str] = Field(default=None, description="Site title")

    model_config = SettingsConfigDict(
        env_prefix="SITEFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class FormatOutput(BaseModel):
    """Enable flag and output path of one feed format"""
    enabled: bool = False
    output: str


class FeedOptions(BaseModel):
    """
    User-supplied feed options with their defaults.

    Per-format settings may be given partially; missing keys keep the
    format's default (e.g. {'atom': {'enabled': True}} writes /feed.atom).

    Example:
        options = FeedOptions(
            content_types=["posts"],
            atom={"enabled": True},
            max_items=10,
            filter_nodes=lambda record: not record.get("draft"),
        )
    """

    content_types: Optional[List[str]] = Field(default_factory=list)
    feed_options: Dict[str, Any] = Field(default_factory=dict)
    rss: FormatOutput = Field(default_factory=lambda: FormatOutput(**_DEFAULT_OUTPUTS[FeedFormat.RSS]))
    atom: FormatOutput = Field(default_factory=lambda: FormatOutput(**_DEFAULT_OUTPUTS[FeedFormat.ATOM]))
    json_feed: FormatOutput = Field(
        default_factory=lambda: FormatOutput(**_DEFAULT_OUTPUTS[FeedFormat.JSON]),
        alias="json"
    )
    max_items: Optional[int] = Field(default=25, ge=0, description="None or 0 means unbounded")
    html_fields: List[str] = Field(default_factory=lambda: ["description", "content"])
    enforce_trailing_slashes: bool = False
    date_field: str = "date"
    filter_nodes: Callable[[Any], bool] = accept_all
    node_to_feed_item: Optional[Callable[[Any], Any]] = None
    skip_invalid_items: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def merge_format_defaults(cls, data):
        """Fill partial per-format settings from the format defaults"""
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        for fmt, defaults in _DEFAULT_OUTPUTS.items():
            key = "json_feed" if fmt is FeedFormat.JSON and "json_feed" in data else fmt.value
            value = data.get(key)
            if isinstance(value, bool):
                data[key] = {**defaults, "enabled": value}
            elif isinstance(value, Mapping):
                data[key] = {**defaults, **value}
        return data

    def output_for(self, fmt: FeedFormat) -> FormatOutput:
        """Settings of the given format"""
        if fmt is FeedFormat.JSON:
            return self.json_feed
        return getattr(self, fmt.value)


class FeedConfiguration(BaseModel):
    """
    Resolved settings for one feed generation run.

    Built once per build by resolve_config() and read-only afterwards.
    """

    site_url: str
    path_prefix: str = ""
    out_dir: Path = Path("dist")
    content_types: List[str]
    outputs: Dict[FeedFormat, str] = Field(
        default_factory=dict,
        description="Output path of every enabled format, in RSS/Atom/JSON order"
    )
    max_items: Optional[int] = None
    html_fields: List[str] = Field(default_factory=list)
    enforce_trailing_slashes: bool = False
    filter_nodes: Callable[[Any], bool] = accept_all
    node_to_feed_item: Callable[[Any], Any] = Field(default_factory=make_default_mapper)
    skip_invalid_items: bool = False
    feed_options: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def item_url(self, path: str) -> str:
        """Absolute URL of a site-relative record path"""
        return url_with_base(self.path_prefix + path, self.site_url, self.enforce_trailing_slashes)

    def self_link(self, fmt: FeedFormat) -> Optional[str]:
        """Absolute URL of the given format's feed document"""
        return self.feed_options.get("feed_links", {}).get(fmt.value)


def resolve_config(
    options: Union[FeedOptions, Mapping[str, Any], None],
    build_config: Union[BuildConfig, Mapping[str, Any]]
) -> FeedConfiguration:
    """
    Merge user options over defaults and derive the run configuration.

    Args:
        options: FeedOptions or a mapping of option values
        build_config: BuildConfig or a mapping of build settings

    Returns:
        Resolved FeedConfiguration

    Raises:
        ConfigError: If site_url or content_types is missing
        InvalidUrlError: If site_url is not an absolute URL
    """
    if not isinstance(options, FeedOptions):
        options = FeedOptions.model_validate(dict(options or {}))
    if not isinstance(build_config, BuildConfig):
        build_config = BuildConfig(**dict(build_config))

    if not build_config.site_url:
        raise ConfigError("missing siteUrl")
    if not options.content_types:
        raise ConfigError("missing contentTypes")

    site_url = build_config.site_url
    path_prefix = build_config.path_prefix if build_config.path_prefix != "/" else ""
    site_href = url_with_base(path_prefix, site_url, options.enforce_trailing_slashes)

    defaults = {
        "generator": DEFAULT_GENERATOR,
        "id": site_href,
        "link": site_href,
        "title": build_config.site_name,
    }
    feed_options = deep_merge(defaults, options.feed_options)

    outputs: Dict[FeedFormat, str] = {}
    feed_links: Dict[str, str] = {}
    for fmt in FeedFormat:
        settings = options.output_for(fmt)
        if not settings.enabled:
            continue
        output_path = ensure_extension(settings.output, fmt.extension)
        outputs[fmt] = output_path
        feed_links[fmt.value] = url_with_base(path_prefix + output_path, site_url)
    feed_options["feed_links"] = feed_links

    return FeedConfiguration(
        site_url=site_url,
        path_prefix=path_prefix,
        out_dir=build_config.out_dir,
        content_types=list(options.content_types),
        outputs=outputs,
        max_items=options.max_items or None,
        html_fields=list(options.html_fields),
        enforce_trailing_slashes=options.enforce_trailing_slashes,
        filter_nodes=options.filter_nodes,
        node_to_feed_item=options.node_to_feed_item or make_default_mapper(options.date_field),
        skip_invalid_items=options.skip_invalid_items,
        feed_options=feed_options,
    )
