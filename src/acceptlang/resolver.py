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
"""Locale resolution — protocol and built-in resolvers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

import structlog

from acceptlang.exceptions import ConfigurationException
from acceptlang.request import DEFAULT_HEADER_NAME, LanguageRequest

logger = structlog.get_logger(__name__)

MATCH_EXACT = "exact"
MATCH_COMPATIBLE = "compatible"


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class AcceptHeaderLocaleResolver:
    """Picks one of the application's locales from the ``Accept-Language`` header.

    With ``match="compatible"`` (the default) a preference of ``en`` is
    satisfied by a supported ``en-GB``; with ``match="exact"`` only
    identical tags count. When nothing matches, or the header is absent or
    malformed, *default_locale* is returned.

    A request that is already a :class:`LanguageRequest` is used as is, so
    overrides set on it are honored.
    """

    def __init__(
        self,
        supported: Iterable[Any],
        default_locale: str,
        match: str = MATCH_COMPATIBLE,
        header_name: str = DEFAULT_HEADER_NAME,
    ) -> None:
        if match not in (MATCH_EXACT, MATCH_COMPATIBLE):
            raise ConfigurationException(
                f"Unknown locale match policy '{match}'",
                context={"match": match},
            )
        self._supported = list(supported)
        self._default = default_locale
        self._match = match
        self._header_name = header_name

    def resolve_locale(self, request: Any) -> str:
        if isinstance(request, LanguageRequest):
            languages = request
        else:
            languages = LanguageRequest(request, header_name=self._header_name)

        if self._match == MATCH_EXACT:
            locale = languages.preferred_language_from(self._supported)
        else:
            locale = languages.compatible_language_from(self._supported)

        if locale is None:
            logger.debug(
                "locale_fallback",
                default=self._default,
                preferences=languages.user_preferred_languages,
            )
            return self._default
        return str(locale)


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: str) -> None:
        self._locale = locale

    def resolve_locale(self, request: Any) -> str:  # noqa: ARG002
        return self._locale
