"""Shared search source models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

import httpx

HttpMethod = Literal["GET", "POST"]
BodyShape = Literal["none", "query_field"]

TermTransform = Callable[[str], str]
Renderer = Callable[[httpx.Response, int], str]


@dataclass(frozen=True, slots=True)
class SourceDescriptor:
    """How to request and render results for one search source."""

    method: HttpMethod
    base_url: str
    body_shape: BodyShape
    render: Renderer
    term_transform: TermTransform | None = None

    def effective_term(self, term: str) -> str:
        if self.term_transform is None:
            return term
        return self.term_transform(term)


@dataclass(slots=True)
class PreparedSearch:
    """Concrete request built from a descriptor and a search term."""

    source: str
    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    form: dict[str, str] | None = None


@dataclass(slots=True)
class SearchOutcome:
    """Rendered result of a completed search."""

    source: str
    term: str
    text: str
    elapsed: float
