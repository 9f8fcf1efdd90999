import io
import logging

from hyperfind import logging_setup
from hyperfind.logging_setup import LOGGER_NAME, configure_logging


def test_configure_logging_is_idempotent(monkeypatch) -> None:
    monkeypatch.setattr(logging_setup, "_HANDLER", None)
    stream = io.StringIO()
    logger = logging.getLogger(LOGGER_NAME)
    try:
        configure_logging(verbose=True, stream=stream)
        assert logger.level == logging.DEBUG
        configure_logging(stream=stream)
        assert logger.level == logging.INFO

        ours = [h for h in logger.handlers if getattr(h, "stream", None) is stream]
        assert len(ours) == 1

        logging.getLogger("hyperfind.usage").info("hello")
        assert "level=INFO logger=hyperfind.usage msg=hello" in stream.getvalue()
    finally:
        for h in [h for h in logger.handlers if getattr(h, "stream", None) is stream]:
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
