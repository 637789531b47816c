# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — configures structlog for acceptlang's log events.

The library emits two events:

- ``malformed_accept_language`` (debug) when a header is discarded
- ``locale_fallback`` (debug) when a resolver falls back to its default

Both may carry the raw, client-controlled header. The adapter installs
processors that tag these events with ``component="acceptlang"`` and cut
the header down to ``acceptlang.logging.max-header-length`` characters.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, WrappedLogger

from acceptlang.config import Config

LIBRARY_EVENTS = frozenset({"malformed_accept_language", "locale_fallback"})
DEFAULT_MAX_HEADER_LENGTH = 256


def tag_library_events(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Mark acceptlang's own events so they can be filtered downstream."""
    if event_dict.get("event") in LIBRARY_EVENTS:
        event_dict.setdefault("component", "acceptlang")
    return event_dict


class HeaderTruncator:
    """Processor bounding the ``header`` field of a log event."""

    def __init__(self, max_length: int = DEFAULT_MAX_HEADER_LENGTH) -> None:
        self.max_length = max_length

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        header = event_dict.get("header")
        if isinstance(header, str) and len(header) > self.max_length:
            event_dict["header"] = header[: self.max_length] + "..."
            event_dict["header_length"] = len(header)
        return event_dict


class StructlogAdapter:
    """LoggingPort backed by structlog.

    Reads ``acceptlang.logging.level`` (``root`` plus per-module entries),
    ``acceptlang.logging.format`` (``console`` or ``json``) and
    ``acceptlang.logging.max-header-length``.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._max_header_length: int = DEFAULT_MAX_HEADER_LENGTH
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        level_section = dict(config.get_section("acceptlang.logging.level"))
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("acceptlang.logging.format", "console")).lower()
        self._max_header_length = int(
            config.get("acceptlang.logging.max-header-length", DEFAULT_MAX_HEADER_LENGTH)
        )

        structlog.configure(
            processors=self.build_processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def build_processors(self) -> list[structlog.types.Processor]:
        """The processor chain for the configured format."""
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            tag_library_events,
            HeaderTruncator(self._max_header_length),
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        if self._format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())
        return processors

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the stdlib level of *name*; unknown names fall back to INFO."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
