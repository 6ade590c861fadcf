from __future__ import annotations

import json
import logging

from engine.api.logging import JsonFormatter


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord("dodge.driver", logging.INFO, __file__, 1, "session_over score=%d", (12,), None)
    record.session = 3
    payload = json.loads(JsonFormatter().format(record))
    assert payload["logger"] == "dodge.driver"
    assert payload["level"] == "INFO"
    assert payload["msg"] == "session_over score=12"
    assert payload["fields"] == {"session": 3}
