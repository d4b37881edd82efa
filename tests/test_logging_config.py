import logging

from resort_shared.logging_config import LoggerAdapter, get_logger


def test_adapter_adds_context_without_touching_caller_extra(caplog):
    adapter = LoggerAdapter(get_logger("resort_shared.tests"), {"store": "dynamodb"})
    extra = {"collection": "Rooms"}

    with caplog.at_level(logging.INFO, logger="resort_shared.tests"):
        adapter.info("Created record", extra=extra)
        adapter.info("No context")

    assert extra == {"collection": "Rooms"}
    first, second = caplog.records
    assert first.store == "dynamodb"
    assert first.collection == "Rooms"
    assert second.store == "dynamodb"
