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
"""Accept-Language header parsing (RFC 2616 section 14.4).

Turns a raw header such as ``da, en-gb;q=0.8, en;q=0.7`` into the list of
locale tags the client prefers, highest quality first::

    >>> parse_accept_language("da, en-gb;q=0.8, en;q=0.7, FR-FR;q=0.9")
    ['da', 'fr-FR', 'en-GB', 'en']

Browsers send this header, so it is not to be trusted: a single bad entry
makes the whole header malformed.
"""

from __future__ import annotations

import math
import re

from acceptlang.exceptions import MalformedHeaderException

_ENTRY_SEPARATOR_RE = re.compile(r"\s*,\s*")
_TAG_RE = re.compile(r"[A-Za-z-]+")

QUALITY_MARKER = ";q="
DEFAULT_QUALITY = 1.0


def parse_accept_language(raw: str | None) -> list[str]:
    """Return the normalized locale tags of *raw*, highest preference first.

    Entries with equal quality keep their header order. Quality values are
    dropped once sorted.

    Raises:
        MalformedHeaderException: a tag contains anything but letters and
            hyphens, a quality value is not a finite float, or an entry
            carries more than one quality marker. Qualities outside 0..1
            are accepted as they are.
    """
    if not raw or not raw.strip():
        return []

    weighted: list[tuple[str, float]] = []
    for entry in _ENTRY_SEPARATOR_RE.split(raw.strip()):
        if not entry:
            continue
        weighted.append(_parse_entry(entry))

    # list.sort is stable, so ties keep input order
    weighted.sort(key=lambda pair: pair[1], reverse=True)
    return [normalize_tag(tag) for tag, _ in weighted]


def normalize_tag(tag: str) -> str:
    """Lowercase the language part and uppercase the region after the last hyphen.

    >>> normalize_tag("EN-us")
    'en-US'
    """
    head, sep, region = tag.rpartition("-")
    if not sep:
        return tag.lower()
    return f"{head.lower()}-{region.upper()}"


def _parse_entry(entry: str) -> tuple[str, float]:
    parts = entry.split(QUALITY_MARKER)
    if len(parts) > 2:
        raise MalformedHeaderException(
            f"Accept-Language entry '{entry}' has more than one quality value",
            entry=entry,
        )

    tag = parts[0].strip()
    if not _TAG_RE.fullmatch(tag):
        raise MalformedHeaderException(
            f"Accept-Language tag '{tag}' is not a language range",
            entry=entry,
        )

    if len(parts) == 1:
        return tag, DEFAULT_QUALITY

    raw_quality = parts[1].strip()
    try:
        quality = float(raw_quality)
    except ValueError as exc:
        raise MalformedHeaderException(
            f"Accept-Language quality '{raw_quality}' is not a number",
            entry=entry,
        ) from exc
    # nan and inf have no place in a descending sort
    if not math.isfinite(quality):
        raise MalformedHeaderException(
            f"Accept-Language quality '{raw_quality}' is not a finite number",
            entry=entry,
        )
    return tag, quality
