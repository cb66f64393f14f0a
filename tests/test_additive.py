"""Tests for the additive cipher engine."""

import pytest

from app.core.exceptions import (
    EmptyTextError,
    ErrorKind,
    InvalidCipherTextError,
    InvalidKeyError,
    ValidationError,
)
from app.services.engines.polyalphabetic.additive import AdditiveEngine


class TestAdditiveEngine:
    """Test suite for the additive cipher engine."""

    @pytest.fixture
    def engine(self):
        return AdditiveEngine("МИР")

    @pytest.fixture
    def long_plaintext(self):
        return (
            "Съешь же ещё этих мягких французских булок, да выпей чаю. "
            "Широкая электрификация южных губерний даст мощный толчок подъёму сельского хозяйства."
        )

    def test_repeating_key_on_uniform_text(self, engine):
        """Key letters show through when every plaintext letter is А."""
        assert engine.encrypt("ААААА") == "МИРМИ"

    def test_encrypt_max_shift(self):
        engine = AdditiveEngine("Я")
        assert engine.encrypt("ПРИВЕТ") == "ОПЗБДС"

    def test_decrypt_max_shift(self):
        engine = AdditiveEngine("Я")
        assert engine.decrypt("ОПЗБДС") == "ПРИВЕТ"

    def test_encrypt_shift_2(self):
        engine = AdditiveEngine("В")
        assert engine.encrypt("ПРИВЕТ") == "СТКДЖФ"

    def test_encrypt_drops_punctuation_and_spaces(self):
        engine = AdditiveEngine("В")
        assert engine.encrypt("ПРИВЕТ, МИР!") == "СТКДЖФОКТ"

    def test_encrypt_decrypt_roundtrip(self, engine, long_plaintext):
        """Decrypting recovers the letters-only uppercase text."""
        expected = (
            "СЪЕШЬЖЕЕЩЁЭТИХМЯГКИХФРАНЦУЗСКИХБУЛОКДАВЫПЕЙЧАЮ"
            "ШИРОКАЯЭЛЕКТРИФИКАЦИЯЮЖНЫХГУБЕРНИЙДАСТМОЩНЫЙТОЛЧОКПОДЪЁМУСЕЛЬСКОГОХОЗЯЙСТВА"
        )
        ciphertext = engine.encrypt(long_plaintext)

        assert len(ciphertext) == len(expected)
        assert engine.decrypt(ciphertext) == expected

    def test_lowercase_and_yo(self):
        engine = AdditiveEngine("Мир")
        ciphertext = engine.encrypt("доброе утро, ёж")
        assert engine.decrypt(ciphertext) == "ДОБРОЕУТРОЁЖ"

    def test_first_letter_key_is_identity(self):
        engine = AdditiveEngine("А")
        assert engine.encrypt("Привет, мир!") == "ПРИВЕТМИР"
        assert engine.decrypt("ПРИВЕТМИР") == "ПРИВЕТМИР"

    def test_key_longer_than_text(self):
        """Only the leading key positions are used."""
        engine = AdditiveEngine("МИРОВОЙ")
        assert engine.encrypt("АА") == "МИ"

    def test_shift_wraps_around(self):
        engine = AdditiveEngine("Б")
        assert engine.encrypt("Я") == "А"
        assert engine.decrypt("А") == "Я"

    def test_latin_letters_are_dropped(self):
        engine = AdditiveEngine("А")
        assert engine.encrypt("HELLO мир") == "МИР"

    def test_key_is_case_folded(self):
        engine = AdditiveEngine("мир")
        assert engine.key == "МИР"
        assert engine.shifts == (13, 9, 17)

    def test_decomposed_key_is_composed(self):
        engine = AdditiveEngine("\u0438\u0306\u0435\u0308")

        assert engine.key == "ЙЁ"
        assert engine.shifts == (10, 6)

    def test_key_is_immutable(self, engine):
        with pytest.raises(AttributeError):
            engine.shifts = (0,)

    @pytest.mark.parametrize(
        "key",
        ["МИР123", "МИР МИР", "МИР!", "KEY", "МИРkey", "\t"],
    )
    def test_invalid_key(self, key):
        with pytest.raises(InvalidKeyError, match="non-alphabetic character"):
            AdditiveEngine(key)

    def test_empty_key(self):
        with pytest.raises(InvalidKeyError, match="Empty key"):
            AdditiveEngine("")

    def test_non_string_key(self):
        with pytest.raises(InvalidKeyError):
            AdditiveEngine(5)

    @pytest.mark.parametrize("text", ["123", "1234+8765=9999", "", "   ", "HELLO"])
    def test_encrypt_without_letters(self, engine, text):
        with pytest.raises(EmptyTextError, match="Empty text, no letters"):
            engine.encrypt(text)

    def test_decrypt_empty(self, engine):
        with pytest.raises(EmptyTextError, match="Empty cipher text"):
            engine.decrypt("")

    @pytest.mark.parametrize("ciphertext", ["ьИРМИ", "МИР МИ", "МИР1", "МИР!", "MIR"])
    def test_decrypt_rejects_unclean_text(self, engine, ciphertext):
        with pytest.raises(InvalidCipherTextError, match="Incorrect data entry"):
            engine.decrypt(ciphertext)

    def test_errors_share_one_category(self, engine):
        with pytest.raises(ValidationError) as exc_info:
            engine.decrypt("мир")
        assert exc_info.value.kind == ErrorKind.INVALID_CIPHER_TEXT

    def test_parse_key(self):
        assert AdditiveEngine.parse_key("мир") == "мир"
        assert AdditiveEngine.parse_key(5) == "5"
        with pytest.raises(InvalidKeyError):
            AdditiveEngine.parse_key(None)
        with pytest.raises(InvalidKeyError):
            AdditiveEngine.parse_key(True)

    def test_explain(self, engine):
        """Test explanation generation."""
        explanation = engine.explain()

        assert "МИР" in explanation
        assert "М=13" in explanation
        assert "shift" in explanation.lower()
