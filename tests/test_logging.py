"""
Tests for structured logging configuration
"""

import json

import structlog

from socialnet.logging import (
    add_request_id,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    request_id_ctx,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(i) == 14 for i in ids)


def test_set_and_clear_request_context():
    assert set_request_context("req-1") == "req-1"
    assert request_id_ctx.get() == "req-1"

    clear_request_context()
    assert request_id_ctx.get() is None

    generated = set_request_context()
    assert generated and request_id_ctx.get() == generated
    clear_request_context()


def test_add_request_id_processor():
    set_request_context("req-42")
    try:
        event = add_request_id(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event == {"event": "hello", "request_id": "req-42"}


def test_add_request_id_without_bound_request():
    assert add_request_id(None, "info", {"event": "hello"}) == {"event": "hello"}


def test_production_logging_emits_json(capsys):
    structlog.reset_defaults()
    configure_logging(debug=False)
    logger = get_logger("socialnet.tests")

    set_request_context("req-7")
    try:
        logger.info("Post liked", post_id="p1")
    finally:
        clear_request_context()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Post liked"
    assert record["post_id"] == "p1"
    assert record["request_id"] == "req-7"
    assert record["level"] == "info"
