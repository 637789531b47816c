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
"""PreferenceStore — the memoized, overridable preference list of one request."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from acceptlang.exceptions import MalformedHeaderException
from acceptlang.parser import parse_accept_language

logger = structlog.get_logger(__name__)


class PreferenceStore:
    """Holds the preferred languages of a single request.

    The header is parsed on the first :meth:`get` and the result is cached
    for the lifetime of the store. :meth:`set` replaces the cached list and
    stops the header from being consulted again.

    One store belongs to exactly one request; do not share it.

    Args:
        header: The raw ``Accept-Language`` value, or a zero-argument
            callable returning it. A callable is only invoked on first read.
    """

    def __init__(self, header: str | Callable[[], str | None] | None = None) -> None:
        self._header = header
        self._languages: list[str] | None = None

    @property
    def is_resolved(self) -> bool:
        """Whether a list has been computed or explicitly set."""
        return self._languages is not None

    def get(self) -> list[str]:
        """Return the preferred languages, parsing the header on first use.

        A malformed header yields an empty list; the empty list is cached
        like any other result.
        """
        if self._languages is None:
            self._languages = self._parse()
        return self._languages

    def set(self, languages: Iterable[str]) -> None:
        """Override the preferred languages. No validation is applied."""
        self._languages = list(languages)

    def _parse(self) -> list[str]:
        raw = self._header() if callable(self._header) else self._header
        try:
            return parse_accept_language(raw)
        except MalformedHeaderException as exc:
            logger.debug("malformed_accept_language", header=raw, entry=exc.entry, reason=str(exc))
            return []
