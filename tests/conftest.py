import json
import os
import pytest
import sys
from pathlib import Path

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import harakat_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from harakat_toolkit.core.diacritics import FATHA, KASRA
from harakat_toolkit.core.models.question import HarakatQuestion

# Letters used across the tests
BA = "ب"
TA = "ت"
KAF = "ك"

KATABA = KAF + FATHA + TA + FATHA + BA + FATHA


# Common test fixtures
@pytest.fixture
def kataba() -> str:
    """Reference answer with three letters, each carrying fatha."""
    return KATABA


@pytest.fixture
def sample_question() -> HarakatQuestion:
    """Question whose answer is ba+fatha, ta+kasra."""
    return HarakatQuestion(
        id="q_batu",
        name="Two letters",
        question_text="Add the harakat:",
        answer=BA + FATHA + TA + KASRA,
    )


@pytest.fixture
def question_file(tmp_path: Path, sample_question: HarakatQuestion) -> Path:
    """Write the sample question to a JSON file."""
    data = {"schema_version": 1}
    data.update(sample_question.to_dict())
    path = tmp_path / "question.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path
