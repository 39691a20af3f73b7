"""
Unit tests for the console logger.
"""

import io

from snapgram.utils.logger import SnapgramLogger, get_logger


def test_plain_message_format():
    stream = io.StringIO()
    logger = SnapgramLogger("comments", enable_colors=False, stream=stream)

    logger.warning("Author name unresolved", context="fetch", comment_id="c1")

    line = stream.getvalue().strip()
    assert "[COMMENTS/FETCH]" in line
    assert "[WARNING]" in line
    assert line.endswith("Author name unresolved | comment_id=c1")


def test_long_structured_extras_are_truncated():
    stream = io.StringIO()
    logger = SnapgramLogger("store", enable_colors=False, stream=stream)

    logger.debug("Records queried", filters={"post_id": "p" * 200})

    assert stream.getvalue().strip().endswith("...")


def test_colors_wrap_level():
    stream = io.StringIO()
    SnapgramLogger("api", enable_colors=True, stream=stream).success("done")

    assert "\033[" in stream.getvalue()


def test_get_logger_uppercases_service():
    assert get_logger("users").service_name == "USERS"
