"""Single-shot search dispatcher over the source registry."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from loguru import logger

from tsurch.search.models import PreparedSearch, SearchOutcome, SourceDescriptor
from tsurch.search.registry import DEFAULT_REGISTRY, SourceRegistry

if TYPE_CHECKING:
    from tsurch.config.schema import Config

USER_AGENT = "Mozilla/5.0 (Windows NT 6.1; Win64; x64; rv:80.0) Gecko/20100101 Firefox/80.0"


class SearchError(Exception):
    """Base class for fatal search failures."""

    exit_code = 1


class UnknownSourceError(SearchError):
    """Raised when a source name resolves to nothing in the registry."""

    exit_code = 2

    def __init__(self, source: str):
        super().__init__(f'Invalid search engine "{source}"')
        self.source = source


class RequestFailedError(SearchError):
    """Raised when the HTTP request itself could not be completed."""

    exit_code = 3

    def __init__(self) -> None:
        super().__init__("Request failed")


class NonSuccessStatusError(SearchError):
    """Raised when the server answers with a non-2xx status."""

    exit_code = 4

    def __init__(self, status_code: int):
        super().__init__(f"Non-successful response ({status_code})")
        self.status_code = status_code


class RenderFailedError(SearchError):
    """Raised when a successful response cannot be turned into text."""

    exit_code = 5

    def __init__(self) -> None:
        super().__init__("Failed to construct results text")


class SearchClient:
    """Resolve a source, send one request for it and render the response."""

    def __init__(
        self,
        registry: SourceRegistry | None = None,
        config: "Config | None" = None,
    ):
        from tsurch.config.schema import Config

        self.registry = registry or DEFAULT_REGISTRY
        self.config = config or Config()

    def resolve(self, source_raw: str) -> tuple[str, SourceDescriptor]:
        """Map a raw source name to its canonical name and descriptor."""
        canonical = self.registry.resolve_alias(source_raw)
        descriptor = self.registry.lookup(canonical)
        if descriptor is None:
            raise UnknownSourceError(source_raw)
        return canonical, descriptor

    def prepare(self, source_raw: str, term_raw: str) -> PreparedSearch:
        """Build the concrete request for a source and raw search term."""
        canonical, descriptor = self.resolve(source_raw)
        return self._build(canonical, descriptor, term_raw)

    def _build(self, canonical: str, descriptor: SourceDescriptor, term_raw: str) -> PreparedSearch:
        term = descriptor.effective_term(term_raw)

        form: dict[str, str] | None = None
        if descriptor.method == "GET":
            if self.config.quote_get_terms:
                term = quote(term, safe="")
            url = descriptor.base_url + term
        else:
            url = descriptor.base_url
            if descriptor.body_shape == "query_field":
                form = {"q": term}

        return PreparedSearch(
            source=canonical,
            method=descriptor.method,
            url=url,
            headers={"User-Agent": USER_AGENT},
            form=form,
        )

    def run(self, source_raw: str, term_raw: str) -> SearchOutcome:
        """
        Run one search end to end.

        Args:
            source_raw: Source alias or canonical name as typed by the user.
            term_raw: Search term, unmodified.

        Returns:
            The rendered outcome with elapsed wall-clock seconds.

        Raises:
            SearchError: One of its subclasses, carrying the exit code.
        """
        canonical, descriptor = self.resolve(source_raw)
        prepared = self._build(canonical, descriptor, term_raw)

        logger.debug("Searching {}: {} {}", prepared.source, prepared.method, prepared.url)
        started = time.monotonic()
        try:
            with httpx.Client(follow_redirects=True) as client:
                response = client.request(
                    prepared.method,
                    prepared.url,
                    headers=prepared.headers,
                    data=prepared.form,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Request to {} failed: {}", prepared.url, e)
            raise RequestFailedError() from e

        if not response.is_success:
            logger.debug("{} answered with status {}", prepared.url, response.status_code)
            raise NonSuccessStatusError(response.status_code)

        try:
            text = descriptor.render(response, self.config.columns)
        except Exception as e:
            logger.debug("Rendering {} response failed: {}", prepared.source, e)
            raise RenderFailedError() from e

        elapsed = time.monotonic() - started
        logger.debug("Search on {} finished in {:.3f}s", prepared.source, elapsed)
        return SearchOutcome(
            source=prepared.source,
            term=term_raw,
            text=text,
            elapsed=elapsed,
        )
