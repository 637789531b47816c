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
"""Exception hierarchy for acceptlang.

All library exceptions inherit from AcceptLanguageException so callers can
catch one type for every failure raised here.

- MalformedHeaderException: the Accept-Language value does not follow the grammar
- ConfigurationException: invalid settings handed to a resolver or binder
"""

from __future__ import annotations

MALFORMED_HEADER_CODE = "ACCEPT_LANGUAGE_MALFORMED"
CONFIGURATION_CODE = "ACCEPT_LANGUAGE_CONFIG"


class AcceptLanguageException(Exception):
    """Base exception for all acceptlang errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Arbitrary key-value pairs for debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class MalformedHeaderException(AcceptLanguageException):
    """The header cannot be trusted as a whole.

    Raised by the parser only; ``PreferenceStore`` turns it into an empty
    preference list.
    """

    def __init__(self, message: str, entry: str | None = None) -> None:
        super().__init__(
            message,
            code=MALFORMED_HEADER_CODE,
            context={"entry": entry} if entry is not None else None,
        )

    @property
    def entry(self) -> str | None:
        return self.context.get("entry")


class ConfigurationException(AcceptLanguageException):
    """Invalid configuration values."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code=CONFIGURATION_CODE, context=context)
