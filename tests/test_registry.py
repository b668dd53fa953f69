import pytest

from tsurch.search.registry import BUILTIN_ALIASES, BUILTIN_SOURCES, DEFAULT_REGISTRY
from tsurch.search.render import render_html


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("ddg", "duckduckgo"),
        ("duck", "duckduckgo"),
        ("sp", "startpage"),
        ("start", "startpage"),
        ("wiki", "wikipedia"),
        ("wp", "wikipedia"),
        ("rs", "rustdoc"),
        ("rdoc", "rustdoc"),
    ],
)
def test_aliases_resolve_to_canonical_names(alias: str, canonical: str) -> None:
    assert DEFAULT_REGISTRY.resolve_alias(alias) == canonical


@pytest.mark.parametrize("raw", ["duckduckgo", "wikipedia", "bing", "", "DDG"])
def test_unknown_aliases_pass_through(raw: str) -> None:
    assert DEFAULT_REGISTRY.resolve_alias(raw) == raw


def test_lookup_covers_every_alias_target() -> None:
    for canonical in set(BUILTIN_ALIASES.values()):
        assert DEFAULT_REGISTRY.lookup(canonical) is not None


@pytest.mark.parametrize("name", ["ddg", "bing", "", "Wikipedia"])
def test_lookup_returns_none_for_unknown_names(name: str) -> None:
    assert DEFAULT_REGISTRY.lookup(name) is None


def test_builtin_source_table() -> None:
    expected = {
        "duckduckgo": ("POST", "https://lite.duckduckgo.com/lite", "query_field"),
        "startpage": ("POST", "https://startpage.com/sp/search", "query_field"),
        "wikipedia": (
            "GET",
            "https://en.wikipedia.org/w/index.php?action=render&title=",
            "none",
        ),
        "rustdoc": ("GET", "https://doc.rust-lang.org/", "none"),
    }
    assert set(BUILTIN_SOURCES) == set(expected)
    for name, (method, base_url, body_shape) in expected.items():
        source = DEFAULT_REGISTRY.lookup(name)
        assert source is not None
        assert (source.method, source.base_url, source.body_shape) == (method, base_url, body_shape)
        assert source.term_transform is None
        assert source.render is render_html


def test_registry_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.aliases()["g"] = "google"  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.names()["google"] = BUILTIN_SOURCES["rustdoc"]  # type: ignore[index]


def test_aliases_for_lists_short_names() -> None:
    assert DEFAULT_REGISTRY.aliases_for("duckduckgo") == ["ddg", "duck"]
    assert DEFAULT_REGISTRY.aliases_for("nothing") == []
