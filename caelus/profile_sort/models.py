"""Shared data models for profile sorting.

- Purpose: define the question bank entries, sparse answer sets, and classification results.
- Assumptions: weight vectors are aligned positionally with each question's options.
- Side effects: none; classes are passive containers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

DESIGNER = "designer"
CONSUMER = "consumer"
LABELS: Tuple[str, str] = (DESIGNER, CONSUMER)
# Ties (including an empty questionnaire) resolve to this label.
DEFAULT_LABEL = CONSUMER

AnswerSet = Dict[int, str]


class QuestionBankError(ValueError):
    """Raised when a question bank entry breaks the option/weight alignment."""


@dataclass(frozen=True)
class Question:
    prompt: str
    options: Tuple[str, ...]
    weight: Dict[str, Tuple[int, ...]]

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "Question":
        if not isinstance(payload, dict):
            raise QuestionBankError("question entries must be mappings")
        options = payload.get("options")
        weight = payload.get("weight")
        if not isinstance(options, list):
            raise QuestionBankError("options must be a list")
        if not isinstance(weight, dict):
            raise QuestionBankError("weight must be a mapping of label to list")
        return cls(
            prompt=payload.get("question") or payload.get("prompt"),  # type: ignore[arg-type]
            options=tuple(options),
            weight={label: tuple(values) if isinstance(values, list) else values for label, values in weight.items()},
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "question": self.prompt,
            "options": list(self.options),
            "weight": {label: list(values) for label, values in self.weight.items()},
        }


def validate_question(question: Question, index: int = 0) -> None:
    """Validate a Question for option/weight alignment."""

    prefix = f"questions[{index}]"
    if not isinstance(question.prompt, str) or not question.prompt.strip():
        raise QuestionBankError(f"{prefix}.question must be a non-empty string")
    if not question.options:
        raise QuestionBankError(f"{prefix}.options must not be empty")
    for idx, option in enumerate(question.options):
        if not isinstance(option, str) or not option:
            raise QuestionBankError(f"{prefix}.options[{idx}] must be a non-empty string")
    if len(set(question.options)) != len(question.options):
        raise QuestionBankError(f"{prefix}.options must be unique")

    for label in LABELS:
        if label not in question.weight:
            raise QuestionBankError(f"{prefix}.weight.{label} is required")
    for label, values in question.weight.items():
        if label not in LABELS:
            raise QuestionBankError(f"{prefix}.weight.{label} is not a known label")
        if not isinstance(values, (list, tuple)) or len(values) != len(question.options):
            raise QuestionBankError(
                f"{prefix}.weight.{label} must have {len(question.options)} entries to match options"
            )
        for idx, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise QuestionBankError(f"{prefix}.weight.{label}[{idx}] must be a non-negative integer")


def answers_from_sequence(answers: Sequence[Optional[str]]) -> AnswerSet:
    """Convert a positional answer list with gaps into a sparse AnswerSet."""

    return {index: answer for index, answer in enumerate(answers) if answer is not None and answer != ""}


@dataclass(frozen=True)
class IntegrityWarning:
    """An answer that could not be scored against its question."""

    question_index: int
    answer: object
    reason: str

    def __str__(self) -> str:
        return f"question {self.question_index}: {self.reason} ({self.answer!r})"


@dataclass
class ClassificationResult:
    scores: Dict[str, int]
    label: str
    warnings: List[IntegrityWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.label,
            "scores": dict(self.scores),
            "warnings": [asdict(warning) for warning in self.warnings],
        }


@dataclass
class ProfileRecord:
    """Finalized profile handed to the persistence collaborator."""

    result: ClassificationResult
    answers: AnswerSet

    def ordered_answers(self, length: Optional[int] = None) -> List[Optional[str]]:
        size = length if length is not None else (max(self.answers) + 1 if self.answers else 0)
        return [self.answers.get(index) for index in range(size)]

    def to_payload(self, question_count: Optional[int] = None) -> Dict[str, object]:
        return {
            "type": self.result.label,
            "scores": dict(self.result.scores),
            "answers": self.ordered_answers(question_count),
        }


def empty_scores(labels: Iterable[str] = LABELS) -> Dict[str, int]:
    return {label: 0 for label in labels}
