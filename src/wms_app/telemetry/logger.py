from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from .events import TelemetryEvent

logger = logging.getLogger(__name__)


class TelemetryLogger:
    """Appends events as JSON lines. Off unless explicitly enabled."""

    def __init__(
        self,
        *,
        app_name: str,
        enabled: bool = False,
        log_file: str | Path | None = None,
        stdout_sink: bool = False,
        stdout_stream: TextIO | None = None,
    ) -> None:
        self.app_name = app_name
        self.enabled = enabled
        self.log_file = Path(log_file) if log_file else Path("artifacts") / "telemetry" / f"{app_name}.jsonl"
        self.stdout_sink = stdout_sink
        self.stdout_stream = stdout_stream

    def emit(self, event: TelemetryEvent) -> bool:
        if not self.enabled:
            return False

        payload = event.to_dict()
        payload["app_name"] = self.app_name
        line = json.dumps(payload, sort_keys=True)

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with self.log_file.open("a", encoding="utf-8") as fp:
                fp.write(f"{line}\n")
        except OSError:
            logger.warning("telemetry_write_failed", extra={"log_file": str(self.log_file)})
            return False

        if self.stdout_sink:
            stream = self.stdout_stream or sys.stdout
            stream.write(f"{line}\n")
            stream.flush()

        return True
