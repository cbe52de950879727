"""
Unit Tests for the Decomposer
"""

import logging

import pytest

from harakat_toolkit.core.diacritics import DAMMA, FATHA, KASRA, SHADDA, SUKUN
from harakat_toolkit.core.models.units import Unit
from harakat_toolkit.grading.decomposer import (
    LeadingDiacriticError,
    decompose,
    strip_diacritics,
)

BA = "ب"
TA = "ت"
KAF = "ك"
MIM = "م"


class TestDecompose:
    """Tests for decompose()."""

    def test_decompose_when_kataba_then_three_units_with_fatha(self, kataba):
        result = decompose(kataba)

        assert result.plain == KAF + TA + BA
        assert result.total_diacritics == 3
        assert [u.diacritics for u in result] == [(FATHA,), (FATHA,), (FATHA,)]
        assert result.original == kataba

    def test_decompose_when_stacked_marks_then_kept_in_source_order(self):
        """Shadda then fatha stays in that order on the unit."""
        result = decompose(MIM + SHADDA + FATHA)

        assert result.units == (Unit(MIM, (SHADDA, FATHA)),)

    def test_decompose_when_duplicate_marks_then_both_kept(self):
        result = decompose(BA + FATHA + FATHA)

        assert result.units[0].diacritics == (FATHA, FATHA)
        assert result.total_diacritics == 2

    def test_decompose_when_space_then_unit_without_marks(self):
        """Spaces are base characters with no diacritics."""
        result = decompose(BA + FATHA + " " + TA + SUKUN)

        assert result.plain == BA + " " + TA
        assert result.units[1] == Unit(" ")

    def test_decompose_when_empty_then_no_units(self):
        result = decompose("")

        assert result.units == ()
        assert result.total_diacritics == 0

    @pytest.mark.parametrize("text", [
        BA + FATHA + TA + KASRA,
        KAF + SHADDA + DAMMA + BA,
        MIM + " " + BA + SUKUN,
        BA + TA + KAF,
    ])
    def test_decompose_plain_equals_text_without_marks(self, text):
        """plain is the input with every diacritic removed, one unit per letter."""
        result = decompose(text)

        assert result.plain == strip_diacritics(text)
        assert len(result.units) == len(strip_diacritics(text))

    def test_decompose_when_leading_mark_and_discard_then_dropped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="harakat_toolkit.grading.decomposer"):
            result = decompose(FATHA + BA + KASRA)

        assert result.units == (Unit(BA, (KASRA,)),)
        assert result.total_diacritics == 1
        assert "Discarding leading diacritic U+064E" in caplog.text

    def test_decompose_when_only_marks_and_discard_then_empty(self):
        assert decompose(FATHA + KASRA).units == ()

    def test_decompose_when_leading_mark_and_reject_then_raises(self):
        with pytest.raises(LeadingDiacriticError) as exc_info:
            decompose(FATHA + BA, leading_policy="reject")

        assert exc_info.value.mark == FATHA
        assert "U+064E" in str(exc_info.value)

    def test_decompose_when_reject_and_no_leading_mark_then_ok(self):
        assert decompose(BA + FATHA, leading_policy="reject").total_diacritics == 1

    def test_decompose_when_unknown_policy_then_raises(self):
        with pytest.raises(ValueError, match="Unknown leading_policy"):
            decompose(BA, leading_policy="ignore")


class TestStripDiacritics:
    """Tests for strip_diacritics()."""

    def test_strip_when_marked_then_letters_only(self, kataba):
        assert strip_diacritics(kataba) == KAF + TA + BA

    def test_strip_when_no_marks_then_unchanged(self):
        assert strip_diacritics(BA + " " + TA) == BA + " " + TA
