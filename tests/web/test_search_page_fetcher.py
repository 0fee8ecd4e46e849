# -*- coding: utf-8 -*-
import asyncio

import httpx
import pytest
from prometheus_client import REGISTRY

from kindle_search.domain.products.interfaces import FetchedDocument, FetchFailure
from kindle_search.errors import reason_mapper
from kindle_search.errors.reason_codes import ReasonCode
from kindle_search.infrastructure.parsers import ScraperOptions
from kindle_search.infrastructure.web.search_page_fetcher import SearchPageFetcher

SEARCH_URL = "https://www.amazon.com/s?k=the+martian&i=digital-text"


def _fetcher(handler, **option_overrides) -> SearchPageFetcher:
    options = ScraperOptions(**option_overrides)
    return SearchPageFetcher(options, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_ok_sends_query_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        return httpx.Response(200, text="<html><body>results</body></html>")

    outcome = await _fetcher(handler).fetch("  The   Martian ")

    assert isinstance(outcome, FetchedDocument)
    assert outcome.status_code == 200
    assert "results" in outcome.html
    assert seen["url"] == SEARCH_URL
    assert seen["headers"]["User-Agent"].startswith("Mozilla/5.0")
    assert seen["headers"]["Accept-Language"] == "en-US,en;q=0.9"
    assert "text/html" in seen["headers"]["Accept"]


@pytest.mark.asyncio
async def test_redirects_are_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/s":
            return httpx.Response(302, headers={"Location": "https://www.amazon.com/final"})
        return httpx.Response(200, text="<html>final</html>")

    outcome = await _fetcher(handler).fetch("dune")
    assert isinstance(outcome, FetchedDocument)
    assert outcome.url == "https://www.amazon.com/final"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 503])
async def test_non_2xx_is_failure(status):
    outcome = await _fetcher(lambda request: httpx.Response(status, text="nope")).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.HTTP_STATUS
    assert outcome.status_code == status


@pytest.mark.asyncio
async def test_empty_body_is_failure():
    outcome = await _fetcher(lambda request: httpx.Response(200, text="   ")).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.EMPTY_BODY


@pytest.mark.asyncio
async def test_transport_timeout_is_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    outcome = await _fetcher(handler).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.HTTP_TIMEOUT
    assert outcome.url.startswith("https://www.amazon.com/s?k=dune")


@pytest.mark.asyncio
async def test_connection_error_is_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = await _fetcher(handler).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.HTTP_CONNECTION
    assert outcome.to_dict()["reason"] == "http_connection"


@pytest.mark.asyncio
async def test_overall_timeout_is_failure():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, text="late")

    outcome = await _fetcher(handler, request_timeout_sec=0.01, overall_timeout_sec=0.05).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.HTTP_TIMEOUT


@pytest.mark.asyncio
async def test_blank_query_rejected():
    fetcher = _fetcher(lambda request: httpx.Response(200, text="x"))
    with pytest.raises(ValueError):
        await fetcher.fetch("   ")


def _failures(reason: str) -> float:
    return REGISTRY.get_sample_value("kindle_search_fetch_failure_total", {"reason": reason}) or 0.0


@pytest.mark.asyncio
async def test_non_2xx_keeps_reason_phrase_and_goes_through_mapper(monkeypatch):
    seen = []
    original = reason_mapper.map_error_to_reason

    def _spy(exc):
        seen.append(exc)
        return original(exc)

    monkeypatch.setattr("kindle_search.infrastructure.web.search_page_fetcher.map_error_to_reason", _spy)
    outcome = await _fetcher(lambda request: httpx.Response(404, text="nope")).fetch("dune")

    assert isinstance(seen[0], httpx.HTTPStatusError)
    assert outcome.details == "Not Found"
    assert outcome.to_dict()["statusCode"] == 404


@pytest.mark.asyncio
async def test_empty_body_keeps_status_and_details():
    outcome = await _fetcher(lambda request: httpx.Response(200, text="")).fetch("dune")
    assert isinstance(outcome, FetchFailure)
    assert outcome.reason is ReasonCode.EMPTY_BODY
    assert outcome.status_code == 200
    assert outcome.details == "Порожня відповідь сторінки пошуку"


@pytest.mark.asyncio
async def test_failure_is_logged_with_error_code(caplog):
    with caplog.at_level("WARNING", logger="kindle_search"):
        await _fetcher(lambda request: httpx.Response(200, text=" ")).fetch("dune")
    [record] = [r for r in caplog.records if hasattr(r, "error_code")]
    assert record.error_code == "empty_body"
    assert record.status_code == 200
    assert record.url.startswith("https://www.amazon.com/s?k=dune")


# ──────────────────────────────────────────────────────────────────────────────
#                          📈 Метрики фетча
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_fetch_counters_are_incremented():
    ok_before = REGISTRY.get_sample_value("kindle_search_fetch_ok_total") or 0.0
    status_before = _failures("http_status")
    empty_before = _failures("empty_body")

    await _fetcher(lambda request: httpx.Response(200, text="<html>ok</html>")).fetch("dune")
    await _fetcher(lambda request: httpx.Response(503, text="down")).fetch("dune")
    await _fetcher(lambda request: httpx.Response(200, text="")).fetch("dune")

    assert REGISTRY.get_sample_value("kindle_search_fetch_ok_total") == ok_before + 1
    assert _failures("http_status") == status_before + 1
    assert _failures("empty_body") == empty_before + 1
