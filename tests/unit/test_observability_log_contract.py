import json
import logging

from admin_panel.app.infrastructure.logging.logger import get_logger, log_action


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_log_action_contains_required_fields_and_skips_none() -> None:
    logger = logging.getLogger("admin_panel.test.obs")
    logger.handlers = []
    logger.setLevel(logging.INFO)
    handler = CaptureHandler()
    logger.addHandler(handler)

    log_action(logger, "directory", "delete_one", "success", member_id="7", trace_id=None)

    assert len(handler.messages) == 1
    payload = json.loads(handler.messages[0])
    for key in ["ts", "level", "module", "action", "outcome", "member_id"]:
        assert key in payload
    assert payload["level"] == "INFO"
    assert "trace_id" not in payload


def test_log_action_respects_logger_level() -> None:
    logger = logging.getLogger("admin_panel.test.obs.level")
    logger.handlers = []
    logger.setLevel(logging.WARNING)
    handler = CaptureHandler()
    logger.addHandler(handler)

    log_action(logger, "members", "load", "success")
    log_action(logger, "members", "load", "error", level=logging.WARNING)

    assert len(handler.messages) == 1
    assert json.loads(handler.messages[0])["level"] == "WARNING"


def test_get_logger_installs_single_handler() -> None:
    name = "admin_panel.test.obs.single"
    logging.getLogger(name).handlers = []

    first = get_logger(name)
    second = get_logger(name)

    assert first is second
    assert len(first.handlers) == 1
