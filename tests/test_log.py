import io

from loguru import logger

from chatwo.log import configure_logging, get_logger
from chatwo.segmentation import segment_text


def test_forced_split_is_logged_with_component() -> None:
    stream = io.StringIO()
    handler_id = configure_logging("warning", sink=stream)
    try:
        segment_text("Z" * 30, 10)
        get_logger("stream").info("below the configured level")
    finally:
        logger.remove(handler_id)

    output = stream.getvalue()
    assert "WARNING" in output
    assert "assembler" in output
    assert "Forced split of a 30-char segment" in output
    assert "below the configured level" not in output


def test_unbound_records_get_the_default_component() -> None:
    stream = io.StringIO()
    handler_id = configure_logging(sink=stream)
    try:
        logger.info("plain loguru call")
    finally:
        logger.remove(handler_id)

    assert "chatwo" in stream.getvalue()


def test_import_leaves_host_extra_untouched() -> None:
    stream = io.StringIO()
    handler_id = logger.add(stream, format="{extra}")
    try:
        logger.info("host application message")
    finally:
        logger.remove(handler_id)

    assert stream.getvalue().strip() == "{}"
