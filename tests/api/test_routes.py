from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from kindle_search.api.routes import create_app
from kindle_search.domain.products.entities import BookProduct
from kindle_search.domain.products.interfaces import FetchFailure
from kindle_search.errors.reason_codes import ReasonCode
from kindle_search.services.book_search_service import SearchOutcome

DUNE = BookProduct(
    title="Dune",
    product_link="https://www.amazon.com/dp/B00B7NPRY8",
    price=Decimal("0.00"),
    is_subscription_included=True,
    subscription_buy_price=Decimal("12.99"),
)


@pytest.fixture
def service():
    svc = MagicMock()
    svc.search = AsyncMock(side_effect=lambda query: SearchOutcome(query=query, products=(DUNE,)))
    return svc


@pytest.fixture
def client(service):
    app = create_app(service)
    app.testing = True
    return app.test_client()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_search_by_path(client, service):
    resp = client.get("/api/books/Dune%20Messiah")
    assert resp.status_code == 200
    service.search.assert_awaited_once_with("Dune Messiah")
    assert resp.get_json() == [
        {
            "title": "Dune",
            "price": 0.0,
            "coverImageUrl": None,
            "productLink": "https://www.amazon.com/dp/B00B7NPRY8",
            "isSubscriptionIncluded": True,
            "subscriptionBuyPrice": 12.99,
        }
    ]


def test_search_by_query_param(client, service):
    resp = client.get("/api/books", query_string={"title": "  the   martian "})
    assert resp.status_code == 200
    service.search.assert_awaited_once_with("the martian")


@pytest.mark.parametrize("url", ["/api/books", "/api/books?title=", "/api/books?title=%20%20", "/api/books/%20"])
def test_blank_title_is_bad_request(client, service, url):
    resp = client.get(url)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    service.search.assert_not_awaited()


def test_no_results_is_not_found(client, service):
    service.search = AsyncMock(return_value=SearchOutcome(query="zzz"))
    resp = client.get("/api/books/zzz")
    assert resp.status_code == 404
    assert resp.get_json() == {
        "error": "No books found with the given title",
        "query": "zzz",
        "reason": "no_results",
    }


def test_fetch_failure_is_not_found_with_reason(client, service):
    failure = FetchFailure(reason=ReasonCode.HTTP_TIMEOUT, url="https://www.amazon.com/s?k=dune")
    service.search = AsyncMock(return_value=SearchOutcome(query="dune", failure=failure))
    resp = client.get("/api/books/dune")
    assert resp.status_code == 404
    assert resp.get_json()["reason"] == "http_timeout"


def test_unexpected_error_is_internal_server_error(client, service):
    service.search = AsyncMock(side_effect=RuntimeError("boom"))
    resp = client.get("/api/books/dune")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error"}


def test_unknown_route_stays_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
