"""Search sources, dispatch and rendering."""

from tsurch.search.client import (
    NonSuccessStatusError,
    RenderFailedError,
    RequestFailedError,
    SearchClient,
    SearchError,
    UnknownSourceError,
)
from tsurch.search.models import PreparedSearch, SearchOutcome, SourceDescriptor
from tsurch.search.registry import DEFAULT_REGISTRY, SourceRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "NonSuccessStatusError",
    "PreparedSearch",
    "RenderFailedError",
    "RequestFailedError",
    "SearchClient",
    "SearchError",
    "SearchOutcome",
    "SourceDescriptor",
    "SourceRegistry",
    "UnknownSourceError",
]
