import pytest

from kindle_search.config.config_service import DEFAULT_CONFIG_PATH, ConfigService


def test_singleton():
    assert ConfigService() is ConfigService()


def test_dotted_get_from_packaged_yaml():
    cfg = ConfigService()
    assert DEFAULT_CONFIG_PATH.name == "config.yaml"
    assert cfg.get("scraper.base_url") == "https://www.amazon.com"
    assert cfg.get("server.port") == 3000
    assert cfg.get("scraper.missing", "fallback") == "fallback"
    assert cfg.get("scraper.base_url.deeper") is None


def test_section_returns_copy():
    cfg = ConfigService()
    section = cfg.section("scraper")
    section["category"] = "changed"
    assert cfg.get("scraper.category") == "digital-text"
    assert cfg.section("nope") == {}


def test_env_overrides_yaml(monkeypatch):
    monkeypatch.setenv("KINDLE_SEARCH_PORT", "8080")
    monkeypatch.setenv("KINDLE_SEARCH_LOG_LEVEL", "DEBUG")
    cfg = ConfigService()
    assert cfg.get("server.port") == "8080"
    assert cfg.get("logging.level") == "DEBUG"
    assert cfg.get("server.host") == "0.0.0.0"  # соседние ключи не теряются


def test_custom_config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("scraper:\n  category: stripbooks\n", encoding="utf-8")
    cfg = ConfigService(path)
    assert cfg.get("scraper.category") == "stripbooks"
    assert cfg.get("server.port") is None


def test_missing_file_gives_empty_config(tmp_path):
    cfg = ConfigService(tmp_path / "absent.yaml")
    assert cfg.get("scraper.base_url") is None


@pytest.mark.parametrize(
    ("flat", "nested"),
    [
        ({"a.b.c": 1}, {"a": {"b": {"c": 1}}}),
        ({"a": 1, "b.c": 2}, {"a": 1, "b": {"c": 2}}),
    ],
)
def test_unflatten(flat, nested):
    assert ConfigService._unflatten_dict(flat) == nested
