"""CLI entrypoint for profile sorting.

- Purpose: classify a saved answer set and optionally persist the finalized profile.
- Assumptions: the answers file is UTF-8 JSON, either an index->option object or a positional list.
- Side effects: with ``--save`` the profile is written through JsonProfileStore.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from caelus.config_service import ConfigError, load_config, resolve_log_level

from .models import AnswerSet, answers_from_sequence
from .question_bank import default_question_bank, load_question_bank
from .services import JsonProfileStore, ProfileSortService


def _load_answers(path: Path) -> AnswerSet:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, list):
        return answers_from_sequence(payload)
    if isinstance(payload, dict):
        answers: AnswerSet = {}
        for key, value in payload.items():
            try:
                index = int(key)
            except ValueError as exc:
                raise ValueError(f"answer key {key!r} must be a question index") from exc
            answers[index] = value
        return answers
    raise ValueError("answers file must contain a JSON object or list")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort a visitor into designer or consumer from questionnaire answers")
    parser.add_argument("--answers", type=Path, required=True, help="Path to an answers JSON file")
    parser.add_argument("--bank", type=Path, help="Alternate question bank YAML")
    parser.add_argument("--final", action="store_true", help="Require every question to be answered")
    parser.add_argument("--save", action="store_true", help="Persist the finalized profile (implies --final)")
    parser.add_argument("--profile-path", type=Path, help="Where to write the profile when saving")
    parser.add_argument("--config", type=Path, help="Settings file (defaults to the platform config path)")
    parser.add_argument("--log-level", help="Logging level (defaults to logging.level from settings)")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = load_config(args.config)
        logging.basicConfig(level=resolve_log_level(args.log_level or config.get("logging.level", "INFO")))
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        bank = load_question_bank(args.bank) if args.bank else default_question_bank()
        answers = _load_answers(args.answers)
        service = ProfileSortService(bank)

        if args.final or args.save:
            record = service.finalize(answers)
            result = record.result
        else:
            record = None
            result = service.evaluate(answers)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    for warning in result.warnings:
        print(f"[warning] {warning}", file=sys.stderr)

    if record is not None and args.save:
        profile_path = args.profile_path or config.get("storage.profile_path") or None
        service.publish(record, JsonProfileStore(path=profile_path, question_count=len(bank)))

    payload = result.to_dict()
    payload["progress"] = service.progress(answers)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
