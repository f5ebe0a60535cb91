"""Question bank loading for profile sorting.

The bank ships as YAML beside this module and is treated as read-only input.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from .models import Question, QuestionBankError, validate_question

DEFAULT_QUESTION_BANK_PATH = Path(__file__).resolve().parent / "question_bank.yaml"


@dataclass(frozen=True)
class QuestionBank:
    version: int
    questions: Tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.questions)

    def __getitem__(self, index: int) -> Question:
        return self.questions[index]

    def __iter__(self):
        return iter(self.questions)

    def to_dict(self) -> Dict[str, object]:
        return {"version": self.version, "questions": [question.to_dict() for question in self.questions]}


def parse_question_bank(payload: Dict[str, object]) -> QuestionBank:
    """Build a validated QuestionBank from a mapping."""

    if not isinstance(payload, dict):
        raise QuestionBankError("question bank root must be a mapping")
    version = payload.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int):
        raise QuestionBankError("version must be an integer")

    raw_questions = payload.get("questions")
    if not isinstance(raw_questions, list) or not raw_questions:
        raise QuestionBankError("questions must be a non-empty list")

    questions: List[Question] = []
    for idx, entry in enumerate(raw_questions):
        try:
            question = Question.from_dict(entry)
        except QuestionBankError as exc:
            raise QuestionBankError(f"questions[{idx}]: {exc}") from exc
        validate_question(question, idx)
        questions.append(question)
    return QuestionBank(version=version, questions=tuple(questions))


def load_question_bank(path: Optional[Path] = None) -> QuestionBank:
    """Load and validate a question bank from YAML (or JSON, a YAML subset)."""

    source = Path(path) if path else DEFAULT_QUESTION_BANK_PATH
    try:
        payload = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise QuestionBankError(f"Failed to parse question bank {source}: {exc}") from exc
    return parse_question_bank(payload)


@lru_cache(maxsize=1)
def default_question_bank() -> QuestionBank:
    return load_question_bank(DEFAULT_QUESTION_BANK_PATH)
