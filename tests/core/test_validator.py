"""
Unit Tests for Schema Validation

Tests for the validator module.
"""

import pytest

from harakat_toolkit.core.diacritics import FATHA
from harakat_toolkit.core.schemas.validator import (
    QUESTION_SCHEMA_VERSION,
    ValidationError,
    clean_answer_text,
    validate_answer_text,
    validate_question,
)

BA = "ب"
TA = "ت"


class TestValidateQuestion:
    """Tests for validate_question function."""

    @pytest.fixture
    def valid_question_data(self) -> dict:
        """Create valid question data for testing."""
        return {
            "schema_version": QUESTION_SCHEMA_VERSION,
            "id": "verbs_01",
            "name": "Past tense",
            "question_text": "Vocalise the verb:",
            "answer": BA + FATHA + TA + FATHA,
            "default_mark": 1.0,
            "penalty": 0.3333333,
            "candidates": "0x064E|0x0651::0x064E",
        }

    def test_validate_when_valid_data_then_no_error(self, valid_question_data):
        """Valid question data should pass validation."""
        validate_question(valid_question_data, strict=False)

    def test_validate_when_strict_and_valid_then_no_error(self, valid_question_data):
        """Valid data also passes the JSON schema."""
        validate_question(valid_question_data, strict=True)

    def test_validate_when_not_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question(["not", "a", "dict"])

    def test_validate_when_missing_id_then_raises_error(self, valid_question_data):
        """Missing required field should raise ValidationError."""
        del valid_question_data["id"]

        with pytest.raises(ValidationError, match="Missing required fields") as exc_info:
            validate_question(valid_question_data, strict=False)
        assert exc_info.value.errors == ["Missing field: id"]

    def test_validate_when_wrong_version_then_raises_error(self, valid_question_data):
        valid_question_data["schema_version"] = 99

        with pytest.raises(ValidationError, match="Unsupported") as exc_info:
            validate_question(valid_question_data)
        assert exc_info.value.path == "schema_version"

    def test_validate_when_answer_has_no_arabic_then_raises_error(self, valid_question_data):
        valid_question_data["answer"] = "kataba"

        with pytest.raises(ValidationError, match="Arabic script") as exc_info:
            validate_question(valid_question_data)
        assert exc_info.value.path == "answer"

    def test_validate_when_candidates_not_string_then_raises_error(self, valid_question_data):
        valid_question_data["candidates"] = ["0x064E"]

        with pytest.raises(ValidationError, match="wire string"):
            validate_question(valid_question_data)

    @pytest.mark.parametrize("mark", [0, -1, True, "1"])
    def test_validate_when_bad_default_mark_then_raises_error(self, valid_question_data, mark):
        valid_question_data["default_mark"] = mark

        with pytest.raises(ValidationError, match="default_mark"):
            validate_question(valid_question_data)

    def test_validate_when_penalty_out_of_range_then_raises_error(self, valid_question_data):
        valid_question_data["penalty"] = 2

        with pytest.raises(ValidationError, match="penalty"):
            validate_question(valid_question_data)

    def test_validate_when_strict_and_unknown_field_then_raises_error(self, valid_question_data):
        """The JSON schema forbids extra properties."""
        valid_question_data["colour"] = "blue"

        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(valid_question_data, strict=True)

    def test_validate_when_strict_and_bad_wire_then_raises_error(self, valid_question_data):
        valid_question_data["candidates"] = "fatha|kasra"

        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_data, strict=True)
        assert exc_info.value.path == "candidates"

    def test_validate_when_no_candidate_parses_then_raises_error(self, valid_question_data):
        valid_question_data["candidates"] = "garbage|0xZZ"

        with pytest.raises(ValidationError, match="No usable candidate") as exc_info:
            validate_question(valid_question_data)
        assert exc_info.value.path == "candidates"

    def test_validate_when_some_candidates_parse_then_no_error(self, valid_question_data):
        """Bad entries are skipped as long as one candidate is left."""
        valid_question_data["candidates"] = "0x064E|garbage"

        validate_question(valid_question_data)

    def test_validate_when_answer_starts_with_mark_then_raises_error(self, valid_question_data):
        valid_question_data["answer"] = FATHA + BA + FATHA

        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_data)
        assert exc_info.value.path == "answer"

    def test_validate_when_strict_and_empty_wire_then_no_error(self, valid_question_data):
        valid_question_data["candidates"] = ""

        validate_question(valid_question_data, strict=True)


class TestAnswerText:
    """Tests for validate_answer_text / clean_answer_text."""

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_validate_when_blank_then_requires_one_answer(self, text):
        with pytest.raises(ValidationError, match="at least 1 answer"):
            validate_answer_text(text)

    def test_validate_when_only_marks_then_not_arabic(self):
        """Diacritics alone carry no letter to attach to."""
        with pytest.raises(ValidationError, match="Arabic script"):
            validate_answer_text(FATHA + FATHA)

    def test_validate_when_leading_mark_then_rejected(self):
        with pytest.raises(ValidationError, match=r"U\+064E"):
            validate_answer_text(" " + FATHA + BA + FATHA)

    def test_clean_when_latin_mixed_in_then_removed(self):
        assert clean_answer_text(BA + FATHA + " (ba)") == BA + FATHA + " ()"
