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
"""Matching preferred languages against the locales an application supports.

Both queries walk the preferences in priority order, so the client's
ranking always decides. Candidates may be any objects whose ``str()`` is a
locale tag, e.g. strings or enum members.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def preferred_language_from(preferences: Sequence[str], candidates: Iterable[Any]) -> str | None:
    """Return the highest-priority preference that is exactly one of *candidates*.

    >>> preferred_language_from(["en-US", "en"], ["fr", "en"])
    'en'
    """
    available = {str(candidate) for candidate in candidates}
    for language in preferences:
        if language in available:
            return language
    return None


def compatible_language_from(preferences: Sequence[str], candidates: Iterable[Any]) -> Any | None:
    """Return the first candidate compatible with the highest-priority preference.

    A candidate is compatible with a preference when it equals it or
    extends it with a hyphenated suffix, so ``en`` accepts ``en-GB`` but
    not ``eng``. The matching candidate object itself is returned.

    >>> compatible_language_from(["en"], ["en-GB", "fr-FR"])
    'en-GB'
    """
    available = list(candidates)
    for language in preferences:
        prefix = f"{language}-"
        for candidate in available:
            tag = str(candidate)
            if tag == language or tag.startswith(prefix):
                return candidate
    return None
