import json
import logging

from kindle_search.shared.utils.logger import (
    LOG_NAME,
    JsonFormatter,
    get_logger,
    init_logging,
    init_logging_from_config,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name=f"{LOG_NAME}.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JsonFormatter().format(_record(extraction={"index": 3, "status": "emitted"})))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["extraction"] == {"index": 3, "status": "emitted"}


def test_json_formatter_stringifies_unserializable_extra():
    payload = json.loads(JsonFormatter().format(_record(obj=object())))
    assert payload["obj"].startswith("<object object")


def test_get_logger_uses_common_prefix():
    assert get_logger().name == LOG_NAME
    assert get_logger("parsers").name == f"{LOG_NAME}.parsers"


def test_module_loggers_share_app_prefix():
    from kindle_search.api import routes
    from kindle_search.services import book_search_service
    from kindle_search.shared import metrics

    assert routes.logger.name == f"{LOG_NAME}.api"
    assert book_search_service.logger.name == f"{LOG_NAME}.services.search"
    assert metrics.logger.name == f"{LOG_NAME}.metrics"


def test_init_logging_without_file():
    root = init_logging(level="DEBUG", console=True, file=None)
    try:
        assert root.name == LOG_NAME
        assert root.level == logging.DEBUG
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)


def test_init_logging_from_config_with_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    root = init_logging_from_config({"level": "INFO", "console": False, "json": True, "file": str(log_file)})
    try:
        assert log_file.parent.is_dir()
        handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
