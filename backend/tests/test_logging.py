from __future__ import annotations

import logging

from eventstream.core.logging import (
    CODEC_LOGGER,
    RequestIdFilter,
    configure_logging,
    request_id_ctx,
)


def test_codec_level_defaults_to_root_level():
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger(CODEC_LOGGER).level == logging.WARNING


def test_codec_level_can_be_set_separately():
    configure_logging("INFO", codec_level="debug")
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger(CODEC_LOGGER).level == logging.DEBUG


def test_request_id_filter_uses_context():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"

    token = request_id_ctx.set("req-1")
    try:
        RequestIdFilter().filter(record)
        assert record.request_id == "req-1"
    finally:
        request_id_ctx.reset(token)
