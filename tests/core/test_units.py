"""
Unit Tests for Unit and DecomposedText
"""

import pytest

from harakat_toolkit.core.diacritics import FATHA, KASRA, SHADDA
from harakat_toolkit.core.models.units import DecomposedText, Unit

BA = "ب"
TA = "ت"


class TestUnit:
    """Tests for Unit dataclass."""

    def test_create_when_valid_then_counts_marks(self):
        unit = Unit(BA, (SHADDA, FATHA))

        assert unit.expected_count == 2
        assert unit.has_diacritics
        assert unit.text == BA + SHADDA + FATHA

    def test_create_when_no_marks_then_empty(self):
        unit = Unit(TA)

        assert unit.expected_count == 0
        assert not unit.has_diacritics
        assert unit.text == TA

    def test_create_when_letter_is_diacritic_then_raises(self):
        """A diacritic cannot be a base letter."""
        with pytest.raises(ValueError, match="cannot be a diacritic"):
            Unit(FATHA)

    def test_create_when_letter_has_two_code_points_then_raises(self):
        with pytest.raises(ValueError, match="one code point"):
            Unit(BA + TA)

    def test_create_when_mark_is_letter_then_raises(self):
        with pytest.raises(ValueError, match="Not a diacritic"):
            Unit(BA, (TA,))

    def test_unit_is_immutable(self):
        unit = Unit(BA)
        with pytest.raises(AttributeError):
            unit.letter = TA


class TestDecomposedText:
    """Tests for DecomposedText dataclass."""

    def test_from_units_when_built_then_derives_plain_and_total(self):
        text = BA + FATHA + TA + KASRA
        decomposed = DecomposedText.from_units(text, (Unit(BA, (FATHA,)), Unit(TA, (KASRA,))))

        assert decomposed.plain == BA + TA
        assert decomposed.original == text
        assert decomposed.total_diacritics == 2
        assert len(decomposed) == 2

    def test_create_when_unit_count_differs_from_plain_then_raises(self):
        with pytest.raises(ValueError, match="does not match plain length"):
            DecomposedText(plain=BA + TA, original="", total_diacritics=0, units=(Unit(BA),))

    def test_create_when_total_wrong_then_raises(self):
        with pytest.raises(ValueError, match="total_diacritics"):
            DecomposedText(plain=BA, original=BA, total_diacritics=1, units=(Unit(BA),))

    def test_empty_when_called_then_no_units(self):
        empty = DecomposedText.empty()

        assert empty.plain == ""
        assert empty.total_diacritics == 0
        assert list(empty) == []

    def test_unit_at_when_in_range_then_unit(self):
        decomposed = DecomposedText.from_units(BA + TA, (Unit(BA), Unit(TA)))

        assert decomposed.unit_at(1) == Unit(TA)

    @pytest.mark.parametrize("index", [2, 10, -1])
    def test_unit_at_when_out_of_range_then_none(self, index):
        """Out-of-range and negative indices have no unit."""
        decomposed = DecomposedText.from_units(BA + TA, (Unit(BA), Unit(TA)))

        assert decomposed.unit_at(index) is None
