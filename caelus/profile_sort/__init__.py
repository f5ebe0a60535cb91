"""Designer/consumer profile sorting from the onboarding questionnaire."""
from __future__ import annotations

from .classifier import answer_progress, classify, decide, is_complete, missing_questions
from .models import DEFAULT_LABEL, LABELS, ClassificationResult, IntegrityWarning, ProfileRecord, Question
from .question_bank import QuestionBank, default_question_bank, load_question_bank

__all__ = [
    "DEFAULT_LABEL",
    "LABELS",
    "ClassificationResult",
    "IntegrityWarning",
    "ProfileRecord",
    "Question",
    "QuestionBank",
    "answer_progress",
    "classify",
    "decide",
    "default_question_bank",
    "is_complete",
    "load_question_bank",
    "missing_questions",
]
