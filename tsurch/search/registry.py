"""Built-in search sources and their aliases."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from tsurch.search.models import SourceDescriptor
from tsurch.search.render import render_html


class SourceRegistry:
    """Read-only lookup of source descriptors by canonical name or alias."""

    def __init__(
        self,
        sources: Mapping[str, SourceDescriptor],
        aliases: Mapping[str, str],
    ):
        self._sources = MappingProxyType(dict(sources))
        self._aliases = MappingProxyType(dict(aliases))

    def resolve_alias(self, raw: str) -> str:
        """Return the canonical name for an alias, or ``raw`` unchanged."""
        return self._aliases.get(raw, raw)

    def lookup(self, canonical: str) -> SourceDescriptor | None:
        return self._sources.get(canonical)

    def names(self) -> Mapping[str, SourceDescriptor]:
        return self._sources

    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def aliases_for(self, canonical: str) -> list[str]:
        return [alias for alias, name in self._aliases.items() if name == canonical]


BUILTIN_ALIASES: dict[str, str] = {
    "ddg": "duckduckgo",
    "duck": "duckduckgo",
    "wiki": "wikipedia",
    "wp": "wikipedia",
    "sp": "startpage",
    "start": "startpage",
    "rs": "rustdoc",
    "rdoc": "rustdoc",
}

BUILTIN_SOURCES: dict[str, SourceDescriptor] = {
    "duckduckgo": SourceDescriptor(
        method="POST",
        base_url="https://lite.duckduckgo.com/lite",
        body_shape="query_field",
        render=render_html,
    ),
    "startpage": SourceDescriptor(
        method="POST",
        base_url="https://startpage.com/sp/search",
        body_shape="query_field",
        render=render_html,
    ),
    "wikipedia": SourceDescriptor(
        method="GET",
        base_url="https://en.wikipedia.org/w/index.php?action=render&title=",
        body_shape="none",
        render=render_html,
    ),
    "rustdoc": SourceDescriptor(
        method="GET",
        base_url="https://doc.rust-lang.org/",
        body_shape="none",
        render=render_html,
    ),
}

DEFAULT_REGISTRY = SourceRegistry(BUILTIN_SOURCES, BUILTIN_ALIASES)
