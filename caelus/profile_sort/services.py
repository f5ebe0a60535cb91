"""Services wrapping the profile classifier for UI and persistence layers.

- Purpose: enforce the completion gate before a profile is finalized and hand records to a store.
- Assumptions: callers own the AnswerSet and pass it in on every call.
- Side effects: JsonProfileStore writes the finalized profile and a timestamp to disk.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Sequence

from caelus.path_utils import get_profile_path

from . import classifier
from .models import ClassificationResult, ProfileRecord, Question
from .question_bank import default_question_bank

logger = logging.getLogger(__name__)


class IncompleteQuestionnaireError(ValueError):
    """Raised when a final profile is requested before every question is validly answered."""


class ProfileStore(Protocol):
    def save(self, record: ProfileRecord) -> None:
        ...


class ProfileSortService:
    """Facade pairing a question bank with the classifier.

    ``evaluate`` is advisory and can run after every answer change; ``finalize``
    only succeeds once the questionnaire is complete.
    """

    def __init__(self, question_bank: Optional[Sequence[Question]] = None) -> None:
        self.question_bank = question_bank if question_bank is not None else default_question_bank()

    def evaluate(self, answers: Mapping[int, str]) -> ClassificationResult:
        return classifier.classify(self.question_bank, answers)

    def progress(self, answers: Mapping[int, str]) -> float:
        return classifier.answer_progress(self.question_bank, answers)

    def preflight_answers(self, answers: Mapping[int, str]) -> Optional[str]:
        """Validate answers before finalizing.

        Returns a string message when the answers are rejected; otherwise returns ``None``.
        """

        missing = classifier.missing_questions(self.question_bank, answers)
        if missing:
            numbers = ", ".join(str(index + 1) for index in missing)
            return f"Answer every question before finishing (missing: {numbers})."
        result = self.evaluate(answers)
        if result.has_warnings:
            details = "; ".join(str(warning) for warning in result.warnings)
            return f"Some answers could not be scored ({details})."
        return None

    def finalize(self, answers: Mapping[int, str]) -> ProfileRecord:
        message = self.preflight_answers(answers)
        if message:
            raise IncompleteQuestionnaireError(message)
        result = self.evaluate(answers)
        return ProfileRecord(result=result, answers=dict(answers))

    def publish(self, record: ProfileRecord, store: Optional[ProfileStore] = None) -> ProfileRecord:
        target = store if store is not None else JsonProfileStore(question_count=len(self.question_bank))
        target.save(record)
        logger.info("Profile saved as %s (scores %s)", record.result.label, record.result.scores)
        return record


class JsonProfileStore:
    """Persist the latest profile as JSON for the UI router to pick up."""

    def __init__(self, path: Optional[Path] = None, question_count: Optional[int] = None) -> None:
        self.path = Path(path) if path else get_profile_path()
        self.question_count = question_count

    def save(self, record: ProfileRecord) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            **record.to_payload(self.question_count),
            "saved_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def load(self) -> Dict[str, object]:
        return json.loads(self.path.read_text(encoding="utf-8"))
