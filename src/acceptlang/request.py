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
"""LanguageRequest — language preferences attached to a host request object."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from acceptlang.matcher import compatible_language_from, preferred_language_from
from acceptlang.store import PreferenceStore

DEFAULT_HEADER_NAME = "accept-language"


def _environ_key(header_name: str) -> str:
    return "HTTP_" + header_name.upper().replace("-", "_")


class LanguageRequest:
    """Wraps a framework request and answers language questions about it.

    The header is read from ``request.headers`` (any mapping with ``get``)
    the first time preferences are needed, falling back to a WSGI
    ``request.environ`` (``HTTP_ACCEPT_LANGUAGE``). Assigning
    :attr:`user_preferred_languages` overrides the header for the rest of
    the request, e.g. with a language chosen from a cookie or session::

        languages = LanguageRequest(request)
        languages.user_preferred_languages = ["en-US", "en-GB", "en", "fr-FR"]
        languages.preferred_language_from(["fr-FR", "en"])  # 'en'
    """

    def __init__(self, request: Any, header_name: str = DEFAULT_HEADER_NAME) -> None:
        self._request = request
        self._header_name = header_name
        self._store = PreferenceStore(self._read_header)

    @property
    def request(self) -> Any:
        return self._request

    @property
    def user_preferred_languages(self) -> list[str]:
        """Preferred languages, highest priority first. Empty when unknown."""
        return self._store.get()

    @user_preferred_languages.setter
    def user_preferred_languages(self, languages: Iterable[str]) -> None:
        self._store.set(languages)

    def preferred_language_from(self, candidates: Iterable[Any]) -> str | None:
        """The best preferred language that is exactly one of *candidates*."""
        return preferred_language_from(self.user_preferred_languages, candidates)

    def compatible_language_from(self, candidates: Iterable[Any]) -> Any | None:
        """The first candidate compatible with the best preferred language, ignoring region."""
        return compatible_language_from(self.user_preferred_languages, candidates)

    def _read_header(self) -> str | None:
        headers = getattr(self._request, "headers", None)
        if headers is not None:
            value = headers.get(self._header_name)
            if value:
                return value

        environ = getattr(self._request, "environ", None)
        if environ is None:
            return None
        return environ.get(_environ_key(self._header_name))

    def __repr__(self) -> str:
        return f"LanguageRequest(header_name={self._header_name!r}, resolved={self._store.is_resolved})"
