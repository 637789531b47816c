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
"""acceptlang — Accept-Language parsing and locale matching.

Parse the header, keep the result per request, and match it against the
locales an application supports::

    from acceptlang import LanguageRequest

    languages = LanguageRequest(request)
    languages.compatible_language_from(["en-GB", "fr-FR"])

The ASGI middleware lives in :mod:`acceptlang.web`.
"""

from acceptlang.context import LanguageContext
from acceptlang.exceptions import (
    AcceptLanguageException,
    ConfigurationException,
    MalformedHeaderException,
)
from acceptlang.matcher import compatible_language_from, preferred_language_from
from acceptlang.parser import normalize_tag, parse_accept_language
from acceptlang.request import LanguageRequest
from acceptlang.resolver import (
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    LocaleResolver,
)
from acceptlang.store import PreferenceStore

__all__ = [
    # Parsing
    "normalize_tag",
    "parse_accept_language",
    # Preferences
    "LanguageContext",
    "LanguageRequest",
    "PreferenceStore",
    # Matching
    "compatible_language_from",
    "preferred_language_from",
    # Resolvers
    "AcceptHeaderLocaleResolver",
    "FixedLocaleResolver",
    "LocaleResolver",
    # Exceptions
    "AcceptLanguageException",
    "ConfigurationException",
    "MalformedHeaderException",
]
