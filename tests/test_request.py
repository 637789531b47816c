"""Tests for LanguageRequest — preferences bound to a request object."""

from types import SimpleNamespace

from starlette.requests import Request

from acceptlang.request import LanguageRequest


def _request(header: str | None = None) -> SimpleNamespace:
    headers = {} if header is None else {"accept-language": header}
    return SimpleNamespace(headers=headers)


def _starlette_request(header: str) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(b"accept-language", header.encode("latin-1"))],
    }
    return Request(scope)


class TestUserPreferredLanguages:
    def test_reads_header(self):
        languages = LanguageRequest(_request("da, en-gb;q=0.8, en;q=0.7, FR-FR;q=0.9"))
        assert languages.user_preferred_languages == ["da", "fr-FR", "en-GB", "en"]

    def test_missing_header(self):
        assert LanguageRequest(_request()).user_preferred_languages == []

    def test_request_without_headers(self):
        assert LanguageRequest(object()).user_preferred_languages == []

    def test_malformed_header_yields_empty_list(self):
        languages = LanguageRequest(_request("123;q=abc"))
        assert languages.user_preferred_languages == []

    def test_starlette_headers_are_case_insensitive(self):
        languages = LanguageRequest(_starlette_request("en-US,en;q=0.9"))
        assert languages.user_preferred_languages == ["en-US", "en"]

    def test_falls_back_to_wsgi_environ(self):
        request = SimpleNamespace(environ={"HTTP_ACCEPT_LANGUAGE": "nl, en;q=0.5"})
        assert LanguageRequest(request).user_preferred_languages == ["nl", "en"]

    def test_environ_used_when_headers_lack_value(self):
        request = SimpleNamespace(headers={}, environ={"HTTP_ACCEPT_LANGUAGE": "fr"})
        assert LanguageRequest(request).user_preferred_languages == ["fr"]

    def test_headers_win_over_environ(self):
        request = SimpleNamespace(
            headers={"accept-language": "de"},
            environ={"HTTP_ACCEPT_LANGUAGE": "fr"},
        )
        assert LanguageRequest(request).user_preferred_languages == ["de"]

    def test_environ_key_follows_custom_header_name(self):
        request = SimpleNamespace(environ={"HTTP_X_LANGUAGE": "it"})
        languages = LanguageRequest(request, header_name="x-language")
        assert languages.user_preferred_languages == ["it"]

    def test_custom_header_name(self):
        request = SimpleNamespace(headers={"x-language": "fr"})
        languages = LanguageRequest(request, header_name="x-language")
        assert languages.user_preferred_languages == ["fr"]

    def test_override_wins_over_header(self):
        languages = LanguageRequest(_request("fr-FR, fr;q=0.9"))
        languages.user_preferred_languages = ["en-US", "en-GB", "en"]
        assert languages.user_preferred_languages == ["en-US", "en-GB", "en"]
        assert languages.preferred_language_from(["fr", "en"]) == "en"
        assert languages.compatible_language_from(["fr-FR", "en-GB"]) == "en-GB"

    def test_header_is_read_once(self):
        request = _request("fr")
        languages = LanguageRequest(request)
        assert languages.user_preferred_languages == ["fr"]
        request.headers["accept-language"] = "de"
        assert languages.user_preferred_languages == ["fr"]

    def test_exposes_wrapped_request(self):
        request = _request("fr")
        assert LanguageRequest(request).request is request


class TestMatching:
    def test_preferred_language_from(self):
        languages = LanguageRequest(_request("en-US,en;q=0.9"))
        assert languages.preferred_language_from(["fr", "en"]) == "en"

    def test_compatible_language_from(self):
        languages = LanguageRequest(_request("en"))
        assert languages.compatible_language_from(["en-GB", "fr-FR"]) == "en-GB"

    def test_no_match_for_malformed_header(self):
        languages = LanguageRequest(_request("en;q=abc"))
        assert languages.preferred_language_from(["en"]) is None
        assert languages.compatible_language_from(["en"]) is None


class TestRepr:
    def test_repr_shows_resolution_state(self):
        languages = LanguageRequest(_request("en"))
        assert "resolved=False" in repr(languages)
        languages.user_preferred_languages
        assert "resolved=True" in repr(languages)
