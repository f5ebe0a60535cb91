"""Weighted designer/consumer classifier.

- Purpose: score a sparse answer set against a question bank and pick a label.
- Assumptions: answers are matched to options by exact string equality.
- Side effects: integrity problems are logged at WARNING; no other state is touched.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .models import (
    CONSUMER,
    DESIGNER,
    LABELS,
    ClassificationResult,
    IntegrityWarning,
    Question,
    empty_scores,
)

logger = logging.getLogger(__name__)


def _resolve_answer(
    question_bank: Sequence[Question], index: object, answer: object
) -> Tuple[Optional[int], Optional[IntegrityWarning]]:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(question_bank):
        return None, IntegrityWarning(question_index=index, answer=answer, reason="question index outside the bank")  # type: ignore[arg-type]
    if not isinstance(answer, str):
        return None, IntegrityWarning(question_index=index, answer=answer, reason="answer must be a string")

    question = question_bank[index]
    try:
        option_index = question.options.index(answer)
    except ValueError:
        return None, IntegrityWarning(question_index=index, answer=answer, reason="answer is not one of the options")

    for label in LABELS:
        vector = question.weight.get(label) or ()
        if option_index >= len(vector):
            return None, IntegrityWarning(
                question_index=index, answer=answer, reason=f"no {label} weight for option {option_index}"
            )
    return option_index, None


def _sort_key(item: Tuple[object, object]):
    index = item[0]
    if isinstance(index, int) and not isinstance(index, bool):
        return (0, index, "")
    return (1, 0, repr(index))


def decide(scores: Mapping[str, int]) -> str:
    """Return ``designer`` only on a strictly greater score, otherwise ``consumer``."""

    return DESIGNER if scores.get(DESIGNER, 0) > scores.get(CONSUMER, 0) else CONSUMER


def classify(question_bank: Sequence[Question], answers: Mapping[int, str]) -> ClassificationResult:
    """Accumulate per-label weights for every resolvable answer.

    Unanswered questions contribute nothing. Answers that cannot be resolved
    against their question are excluded and reported on ``warnings``.
    """

    scores = empty_scores()
    warnings: List[IntegrityWarning] = []

    for index, answer in sorted(answers.items(), key=_sort_key):
        option_index, warning = _resolve_answer(question_bank, index, answer)
        if warning is not None:
            logger.warning("Skipping answer for %s", warning)
            warnings.append(warning)
            continue
        question = question_bank[index]
        for label in LABELS:
            scores[label] += question.weight[label][option_index]

    return ClassificationResult(scores=scores, label=decide(scores), warnings=warnings)


def _valid_indices(question_bank: Sequence[Question], answers: Mapping[int, str]) -> Dict[int, int]:
    resolved: Dict[int, int] = {}
    for index, answer in answers.items():
        option_index, warning = _resolve_answer(question_bank, index, answer)
        if warning is None and option_index is not None:
            resolved[index] = option_index
    return resolved


def missing_questions(question_bank: Sequence[Question], answers: Mapping[int, str]) -> List[int]:
    """Return indices that still lack a present, valid answer."""

    resolved = _valid_indices(question_bank, answers)
    return [index for index in range(len(question_bank)) if index not in resolved]


def is_complete(question_bank: Sequence[Question], answers: Mapping[int, str]) -> bool:
    return not missing_questions(question_bank, answers)


def answer_progress(question_bank: Sequence[Question], answers: Mapping[int, str]) -> float:
    if not len(question_bank):
        return 1.0
    return len(_valid_indices(question_bank, answers)) / len(question_bank)
