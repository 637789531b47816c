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
"""AcceptLanguageMiddleware — installs a LanguageRequest for every HTTP request."""

from __future__ import annotations

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from acceptlang.config import Config, WebProperties
from acceptlang.context import LanguageContext
from acceptlang.logging import LoggingPort, StructlogAdapter
from acceptlang.request import DEFAULT_HEADER_NAME, LanguageRequest


class AcceptLanguageMiddleware:
    """Pure ASGI middleware exposing the client's languages to handlers.

    For each ``http`` scope a fresh :class:`LanguageRequest` is stored on
    ``request.state.<state_attribute>`` and made current in
    :class:`LanguageContext`. The context is cleared after the downstream
    app returns, even on error. Other scope types pass straight through.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = DEFAULT_HEADER_NAME,
        state_attribute: str = "languages",
    ) -> None:
        self.app = app
        self._header_name = header_name
        self._state_attribute = state_attribute

    @classmethod
    def from_config(
        cls,
        app: ASGIApp,
        config: Config,
        logging_port: LoggingPort | None = None,
    ) -> AcceptLanguageMiddleware:
        """Build the middleware from the ``acceptlang.web`` section of *config*.

        When *config* has an ``acceptlang.logging`` section, logging is
        configured through *logging_port* (a :class:`StructlogAdapter` by
        default) first.
        """
        if config.get_section("acceptlang.logging"):
            (logging_port or StructlogAdapter()).configure(config)
        properties = config.bind(WebProperties)
        return cls(
            app,
            header_name=properties.header_name,
            state_attribute=properties.state_attribute,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive, send)
        language_request = LanguageRequest(request, header_name=self._header_name)
        setattr(request.state, self._state_attribute, language_request)

        LanguageContext.init(language_request)
        try:
            await self.app(scope, receive, send)
        finally:
            LanguageContext.clear()
