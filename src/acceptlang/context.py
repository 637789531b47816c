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
"""Request-scoped access to the current LanguageRequest, backed by contextvars.

``AcceptLanguageMiddleware`` initializes the context for every HTTP request
and clears it once the response has been sent, so code without access to
the request object can still ask for the client's languages.
"""

from __future__ import annotations

from contextvars import ContextVar

from acceptlang.request import LanguageRequest

_language_request_var: ContextVar[LanguageRequest | None] = ContextVar(
    "acceptlang_language_request", default=None
)


class LanguageContext:
    """Class-level accessors for the LanguageRequest of the current task."""

    @classmethod
    def init(cls, language_request: LanguageRequest) -> LanguageRequest:
        """Make *language_request* current for this async task."""
        _language_request_var.set(language_request)
        return language_request

    @classmethod
    def current(cls) -> LanguageRequest | None:
        """The LanguageRequest of the current task, or None outside a request."""
        return _language_request_var.get()

    @classmethod
    def clear(cls) -> None:
        _language_request_var.set(None)
