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
"""Tests for parse_accept_language — header to ordered locale tags."""

import pytest

from acceptlang.exceptions import MalformedHeaderException
from acceptlang.parser import normalize_tag, parse_accept_language


class TestParseAcceptLanguage:
    def test_empty_string_yields_empty_list(self):
        assert parse_accept_language("") == []

    def test_none_yields_empty_list(self):
        assert parse_accept_language(None) == []

    def test_whitespace_only_yields_empty_list(self):
        assert parse_accept_language("   ") == []

    def test_sorts_by_quality_and_normalizes(self):
        header = "da, en-gb;q=0.8, en;q=0.7, FR-FR;q=0.9"
        assert parse_accept_language(header) == ["da", "fr-FR", "en-GB", "en"]

    def test_typical_browser_header(self):
        assert parse_accept_language("en-US,en;q=0.9") == ["en-US", "en"]

    def test_single_language(self):
        assert parse_accept_language("nl") == ["nl"]

    def test_equal_quality_keeps_input_order(self):
        header = "fr;q=0.5, de;q=0.8, es;q=0.5, it;q=0.8, pt;q=0.5"
        assert parse_accept_language(header) == ["de", "it", "fr", "es", "pt"]

    def test_implicit_quality_ties_with_explicit_one(self):
        assert parse_accept_language("nl-NL;q=1.0, nl-BE, nl") == ["nl-NL", "nl-BE", "nl"]

    def test_is_deterministic(self):
        header = "nl-NL, nl-BE;q=0.9, nl;q=0.9, en-US;q=0.5, en;q=0.5"
        assert parse_accept_language(header) == parse_accept_language(header)

    def test_tolerates_whitespace_around_commas(self):
        assert parse_accept_language("  en ,  fr;q=0.3 ,de;q=0.6 ") == ["en", "de", "fr"]

    def test_skips_empty_entries(self):
        assert parse_accept_language("en,,fr;q=0.5,") == ["en", "fr"]

    def test_keeps_duplicates(self):
        assert parse_accept_language("en, en;q=0.5") == ["en", "en"]

    def test_quality_above_one_is_accepted(self):
        assert parse_accept_language("en, fr;q=2") == ["fr", "en"]

    def test_integer_quality(self):
        assert parse_accept_language("en;q=0, fr;q=1") == ["fr", "en"]

    def test_quality_without_leading_digit(self):
        assert parse_accept_language("en;q=.5, fr") == ["fr", "en"]

    def test_negative_quality_is_accepted(self):
        assert parse_accept_language("en, fr;q=-0.5") == ["en", "fr"]

    def test_exponent_quality_ties_with_decimal(self):
        assert parse_accept_language("en;q=0.1, fr;q=1e-1, de;q=0.5") == ["de", "en", "fr"]

    def test_trailing_dot_quality(self):
        assert parse_accept_language("en;q=0.5, fr;q=1.") == ["fr", "en"]


class TestParseAcceptLanguageMalformed:
    @pytest.mark.parametrize(
        "header",
        [
            "123;q=abc",
            "en_US",
            "*",
            "en, *;q=0.5",
            "en;level=1",
            "en;q=abc",
            "en;q=",
            "en;q=0.5;q=0.4",
            "en;q=nan",
            "en;q=inf",
            "en;q=1e500",
        ],
    )
    def test_raises_malformed_header(self, header):
        with pytest.raises(MalformedHeaderException):
            parse_accept_language(header)

    def test_one_bad_entry_rejects_whole_header(self):
        with pytest.raises(MalformedHeaderException) as exc_info:
            parse_accept_language("en-US, fr;q=0.8, 42;q=0.5")
        assert exc_info.value.entry == "42;q=0.5"

    def test_error_carries_code(self):
        with pytest.raises(MalformedHeaderException) as exc_info:
            parse_accept_language("en;q=abc")
        assert exc_info.value.code == "ACCEPT_LANGUAGE_MALFORMED"


class TestNormalizeTag:
    def test_language_only_is_lowercased(self):
        assert normalize_tag("DA") == "da"

    def test_region_is_uppercased(self):
        assert normalize_tag("EN-us") == "en-US"

    def test_only_last_subtag_is_uppercased(self):
        assert normalize_tag("ZH-HANT-tw") == "zh-hant-TW"

    def test_already_canonical(self):
        assert normalize_tag("zh-CN") == "zh-CN"
