from __future__ import annotations

import json
import logging

from portfolio.logging_conf import JsonFormatter, get_logger, setup_logging


def _record(msg, **extra) -> logging.LogRecord:
    rec = logging.LogRecord("gate", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_formatter_includes_extras():
    out = json.loads(JsonFormatter().format(_record("route.rewrite", path="/about", event="route_rewrite")))
    assert out["message"] == "route.rewrite"
    assert out["logger"] == "gate"
    assert out["level"] == "INFO"
    assert out["path"] == "/about"
    assert out["event"] == "route_rewrite"
    assert "lineno" not in out
    assert "ts" in out


def test_formatter_merges_dict_messages():
    out = json.loads(JsonFormatter().format(_record({"component": "smoke", "probed": 3})))
    assert out["component"] == "smoke"
    assert out["probed"] == 3
    assert "message" not in out


def test_formatter_attaches_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys

        rec = logging.LogRecord("app", logging.ERROR, __file__, 1, "request.error", None, sys.exc_info())
    out = json.loads(JsonFormatter().format(rec))
    assert "RuntimeError: boom" in out["exc_info"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging()
    before = list(root.handlers)
    setup_logging()
    assert root.handlers == before


def test_get_logger_names():
    assert get_logger("gate").name == "gate"
    assert get_logger().name == "portfolio.logging_conf"
