import pytest

from kindle_search.infrastructure.parsers._infra_options import DEFAULT_SCRAPER_OPTIONS
from kindle_search.shared.utils.url_parser_service import UrlParserService

ORIGIN = "https://www.amazon.com"


@pytest.fixture
def svc() -> UrlParserService:
    return UrlParserService.from_options(DEFAULT_SCRAPER_OPTIONS)


# ───────────────────────────────────────────────────────────────────────────
# URL ПОИСКА
# ───────────────────────────────────────────────────────────────────────────

def test_search_url_folds_query(svc):
    assert svc.build_search_url("  The   Martian ") == f"{ORIGIN}/s?k=the+martian&i=digital-text"


def test_search_url_escapes_reserved_chars(svc):
    assert svc.build_search_url("C++ & You") == f"{ORIGIN}/s?k=c%2B%2B+%26+you&i=digital-text"


def test_search_url_without_category():
    svc = UrlParserService(ORIGIN + "/")
    assert svc.build_search_url("dune") == f"{ORIGIN}/s?k=dune"


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_blank_query_rejected(svc, query):
    with pytest.raises(ValueError):
        svc.build_search_url(query)


# ───────────────────────────────────────────────────────────────────────────
# КАНОНИКАЛИЗАЦИЯ ССЫЛОК
# ───────────────────────────────────────────────────────────────────────────

def test_relative_link_stripped_of_tracking(svc):
    assert svc.canonicalize("/dp/ABC123?ref=sr_1_1&qid=999") == f"{ORIGIN}/dp/ABC123"


def test_non_tracking_params_kept_verbatim(svc):
    href = "/Dune-Frank-Herbert/dp/B00B7NPRY8/ref=sr_1_1?dib=eyJ2&keywords=dune&qid=1&sr=8-1&th=1&foo=a%20b"
    assert svc.canonicalize(href) == f"{ORIGIN}/Dune-Frank-Herbert/dp/B00B7NPRY8/ref=sr_1_1?th=1&foo=a%20b"


def test_clean_link_round_trips(svc):
    href = "/dp/B08FHBV4ZX?format=kindle&lang=en#reviews"
    assert svc.canonicalize(href) == ORIGIN + href


def test_absolute_link_kept_as_is_without_tracking(svc):
    url = "https://www.amazon.com/gp/product/B01?tag=aff-20&linkCode=ll1&x=1"
    assert svc.canonicalize(url) == "https://www.amazon.com/gp/product/B01?x=1"


@pytest.mark.parametrize("href", [None, "", "   ", "javascript:void(0)", "#top", "dp/ABC"])
def test_invalid_href_gives_no_link(svc, href):
    assert svc.canonicalize(href) is None


def test_unparseable_url_keeps_qualified_link(svc):
    # Некорректный порт ломает разбор → остаётся исходная квалифицированная ссылка
    broken = "https://www.amazon.com:99999/dp/X?ref=abc"
    assert svc.canonicalize(broken) == broken


def test_strip_tracking_requires_scheme_and_host(svc):
    with pytest.raises(ValueError):
        svc.strip_tracking("http:foo")


def test_custom_denylist():
    svc = UrlParserService(ORIGIN, ["utm_source"])
    assert svc.canonicalize("/dp/X?utm_source=mail&ref=keep") == f"{ORIGIN}/dp/X?ref=keep"
