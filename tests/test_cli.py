"""Tests for the harakat-grade command line."""

import json

from harakat_toolkit.cli import EXIT_INVALID_QUESTION, EXIT_IO_ERROR, EXIT_OK, main
from harakat_toolkit.core.diacritics import DAMMA, FATHA, KASRA

BA = "ب"
TA = "ت"


class TestCli:
    """Tests for cli.main()."""

    def test_main_when_partial_answer_then_summary(self, question_file, capsys):
        code = main([str(question_file), BA + FATHA + TA + DAMMA])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.startswith("1 / 2 (gradedpartial)")
        assert "[1]" in out

    def test_main_when_json_then_outcome_dict(self, question_file, capsys):
        code = main([str(question_file), BA + FATHA + TA + KASRA, "--json"])

        data = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert data["fraction"] == 1.0
        assert data["state"] == "gradedright"
        assert data["wrong_units"] == []
        assert [u["status"] for u in data["answer_view"]] == ["correct", "correct"]

    def test_main_when_json_and_wrong_then_wrong_units_listed(self, question_file, capsys):
        main([str(question_file), BA + TA, "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["right"] == 0
        assert data["wrong"] == 2
        assert [u["index"] for u in data["wrong_units"]] == [0, 1]
        assert data["wrong_units"][1]["expected"] == KASRA

    def test_main_when_html_then_markup(self, question_file, capsys):
        main([str(question_file), BA + FATHA + TA + DAMMA, "--html"])

        out = capsys.readouterr().out
        assert 'class="harakat_wrong"' in out
        assert "(1 / 2)" in out

    def test_main_when_blank_answer_then_not_graded(self, question_file, capsys):
        code = main([str(question_file), "  "])

        assert code == EXIT_OK
        assert "Please enter an answer." in capsys.readouterr().out

    def test_main_when_strict_leading_and_leading_mark_then_not_graded(self, question_file, capsys):
        code = main([str(question_file), FATHA + BA + FATHA + TA + KASRA, "--strict-leading"])

        assert code == EXIT_OK
        assert "Not graded (invalid)" in capsys.readouterr().out

    def test_main_when_question_invalid_then_exit_2(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"schema_version": 1, "id": "q", "answer": "latin"}), encoding="utf-8")

        assert main([str(path), BA]) == EXIT_INVALID_QUESTION

    def test_main_when_file_missing_then_exit_1(self, tmp_path):
        assert main([str(tmp_path / "missing.json"), BA]) == EXIT_IO_ERROR

    def test_main_when_reference_starts_with_mark_then_exit_2(self, tmp_path):
        path = tmp_path / "leading.json"
        data = {"schema_version": 1, "id": "q", "answer": FATHA + BA + FATHA}
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

        assert main([str(path), BA + FATHA, "--strict-leading"]) == EXIT_INVALID_QUESTION
