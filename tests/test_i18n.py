"""
Tests for message bundles and locale negotiation.
"""

import pytest

from app.core.config import DEFAULT_MESSAGES_DIR
from app.shared.i18n import (
    MessageNotFoundError,
    MessageSource,
    negotiate_locale,
    normalize_locale,
    parse_accept_language,
)


class TestParseAcceptLanguage:
    """Tests for parse_accept_language."""

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_empty_header(self, header) -> None:
        assert parse_accept_language(header) == []

    def test_orders_by_quality(self) -> None:
        header = "en;q=0.5, de-AT, fr;q=0.8"
        assert parse_accept_language(header) == ["de-at", "fr", "en"]

    def test_ties_keep_header_order(self) -> None:
        assert parse_accept_language("fr, de, en") == ["fr", "de", "en"]

    def test_drops_zero_quality_and_garbage(self) -> None:
        header = "de;q=0, en;q=abc, 12!, fr;q=0.3"
        assert parse_accept_language(header) == ["fr"]

    def test_keeps_wildcard(self) -> None:
        assert parse_accept_language("*;q=0.1, de") == ["de", "*"]


class TestNegotiateLocale:
    """Tests for negotiate_locale."""

    SUPPORTED = {"en", "de"}

    def test_no_header_uses_default(self) -> None:
        assert negotiate_locale(None, self.SUPPORTED, "en") == "en"

    def test_exact_match(self) -> None:
        assert negotiate_locale("de", self.SUPPORTED, "en") == "de"

    def test_region_falls_back_to_language(self) -> None:
        assert negotiate_locale("de-CH, en;q=0.5", self.SUPPORTED, "en") == "de"

    def test_unsupported_uses_next_range(self) -> None:
        assert negotiate_locale("fr, de;q=0.7", self.SUPPORTED, "en") == "de"

    def test_unsupported_only_uses_default(self) -> None:
        assert negotiate_locale("fr, es", self.SUPPORTED, "en") == "en"

    def test_wildcard_uses_default(self) -> None:
        assert negotiate_locale("*", self.SUPPORTED, "en") == "en"

    def test_normalizes_default(self) -> None:
        assert normalize_locale(" de_AT ") == "de-at"
        assert negotiate_locale(None, self.SUPPORTED, "EN") == "en"


class TestMessageSource:
    """Tests for MessageSource with the bundled message files."""

    @pytest.fixture
    def source(self) -> MessageSource:
        return MessageSource(DEFAULT_MESSAGES_DIR, default_locale="en")

    def test_default_locale_message(self, source) -> None:
        assert (
            source.get_message("user.not.found", "unknown")
            == "User with username unknown not found!"
        )

    def test_german_message(self, source) -> None:
        assert (
            source.get_message("user.not.found", "unknown", locale="de")
            == "Benutzer mit dem Benutzernamen unknown wurde nicht gefunden!"
        )

    def test_region_falls_back_to_language_bundle(self, source) -> None:
        assert source.get_message("user.not.found", "x", locale="de-AT").startswith(
            "Benutzer"
        )

    def test_unknown_locale_falls_back_to_default(self, source) -> None:
        assert source.get_message("user.not.found", "x", locale="fr") == (
            "User with username x not found!"
        )

    def test_log_message_ignores_request_locale(self, source) -> None:
        assert (
            source.get_log_message("user.not.found.log", "unknown")
            == "Lookup failed: no user with username 'unknown'"
        )

    def test_supported_locales(self, source) -> None:
        assert source.supported_locales == {"en", "de"}

    def test_missing_key_raises(self, source) -> None:
        with pytest.raises(MessageNotFoundError) as exc_info:
            source.get_message("no.such.key", locale="de")
        assert exc_info.value.key == "no.such.key"


class TestMessageSourceBundles:
    """Tests for bundle loading and formatting from custom directories."""

    def test_base_bundle_is_last_resort(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages", "greeting: 'Hello {0}'\nonly.base: base\n")
        write_bundle(tmp_path, "messages_de", "greeting: 'Hallo {0}'\n")
        source = MessageSource(tmp_path, default_locale="en")
        assert source.get_message("greeting", "Ada", locale="de") == "Hallo Ada"
        assert source.get_message("greeting", "Ada") == "Hello Ada"
        assert source.get_message("only.base", locale="de") == "base"

    def test_missing_arguments_leave_placeholder(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages", "pair: '{0} and {1}'\n")
        source = MessageSource(tmp_path)
        assert source.get_message("pair", "one") == "one and {1}"

    def test_arguments_can_repeat_and_reorder(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages", "swap: '{1}-{0}-{1}'\n")
        assert MessageSource(tmp_path).get_message("swap", "a", "b") == "b-a-b"

    def test_locale_file_names_are_normalized(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages_pt_BR", "hi: 'Oi'\n")
        source = MessageSource(tmp_path, default_locale="en")
        assert "pt-br" in source.supported_locales
        assert source.get_message("hi", locale="pt-BR") == "Oi"

    def test_empty_bundle_is_allowed(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages", "")
        with pytest.raises(MessageNotFoundError):
            MessageSource(tmp_path).get_message("anything")

    def test_non_mapping_bundle_is_rejected(self, tmp_path, write_bundle) -> None:
        write_bundle(tmp_path, "messages", "- a\n- b\n")
        with pytest.raises(ValueError):
            MessageSource(tmp_path)

    def test_missing_directory_is_rejected(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            MessageSource(tmp_path / "missing")

    def test_base_locale_is_supported_under_other_default(
        self, tmp_path, write_bundle
    ) -> None:
        write_bundle(tmp_path, "messages", "greeting: 'Hello'\n")
        write_bundle(tmp_path, "messages_de", "greeting: 'Hallo'\n")
        source = MessageSource(tmp_path, default_locale="de", base_locale="en")

        assert source.supported_locales == {"de", "en"}
        assert source.get_message("greeting", locale="en") == "Hello"
        assert source.get_message("greeting", locale="en-GB") == "Hello"
        assert source.get_message("greeting") == "Hallo"

    def test_locale_bundle_wins_over_base_for_base_locale(
        self, tmp_path, write_bundle
    ) -> None:
        write_bundle(tmp_path, "messages", "greeting: 'Hello'\n")
        write_bundle(tmp_path, "messages_en", "greeting: 'Hi there'\n")
        source = MessageSource(tmp_path, default_locale="en", base_locale="en")

        assert source.get_message("greeting", locale="en") == "Hi there"
