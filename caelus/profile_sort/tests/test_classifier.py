import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from caelus.profile_sort import classifier  # noqa: E402
from caelus.profile_sort.models import (  # noqa: E402
    DEFAULT_LABEL,
    Question,
    QuestionBankError,
    answers_from_sequence,
    validate_question,
)
from caelus.profile_sort.question_bank import (  # noqa: E402
    default_question_bank,
    load_question_bank,
    parse_question_bank,
)


def _single_question_bank():
    return [
        Question(
            prompt="Pick one",
            options=("A", "B"),
            weight={"designer": (5, 0), "consumer": (0, 5)},
        )
    ]


@pytest.mark.parametrize(
    "answers, expected_scores, expected_label",
    [
        ({0: "A"}, {"designer": 5, "consumer": 0}, "designer"),
        ({0: "B"}, {"designer": 0, "consumer": 5}, "consumer"),
        ({}, {"designer": 0, "consumer": 0}, DEFAULT_LABEL),
    ],
)
def test_single_question_scenario(answers, expected_scores, expected_label):
    result = classifier.classify(_single_question_bank(), answers)

    assert result.scores == expected_scores
    assert result.label == expected_label
    assert result.warnings == []


def test_empty_answers_tie_resolves_to_consumer():
    result = classifier.classify(default_question_bank(), {})

    assert result.scores == {"designer": 0, "consumer": 0}
    assert result.label == "consumer"
    assert DEFAULT_LABEL == "consumer"


def test_exact_tie_resolves_to_consumer():
    bank = [
        Question(prompt="q1", options=("x",), weight={"designer": (3,), "consumer": (0,)}),
        Question(prompt="q2", options=("y",), weight={"designer": (0,), "consumer": (3,)}),
    ]

    result = classifier.classify(bank, {0: "x", 1: "y"})

    assert result.scores == {"designer": 3, "consumer": 3}
    assert result.label == "consumer"


def test_classify_is_deterministic():
    bank = default_question_bank()
    answers = {0: bank[0].options[2], 3: bank[3].options[1], 6: bank[6].options[3]}

    first = classifier.classify(bank, answers)
    second = classifier.classify(bank, answers)

    assert first == second


def test_designer_maximizing_answers_win():
    bank = default_question_bank()
    answers = {}
    for index, question in enumerate(bank):
        designer = question.weight["designer"]
        answers[index] = question.options[designer.index(max(designer))]

    result = classifier.classify(bank, answers)

    assert result.label == "designer"
    assert result.scores == {"designer": 35, "consumer": 1}


def test_consumer_maximizing_answers_win():
    bank = default_question_bank()
    answers = {}
    for index, question in enumerate(bank):
        consumer = question.weight["consumer"]
        answers[index] = question.options[consumer.index(max(consumer))]

    result = classifier.classify(bank, answers)

    assert result.label == "consumer"
    assert result.scores["consumer"] == 35


def test_swapping_one_answer_only_changes_that_contribution():
    bank = default_question_bank()
    answers = {index: question.options[0] for index, question in enumerate(bank)}
    baseline = classifier.classify(bank, answers)

    swapped = dict(answers)
    swapped[1] = bank[1].options[3]
    changed = classifier.classify(bank, swapped)

    for label in ("designer", "consumer"):
        delta = bank[1].weight[label][3] - bank[1].weight[label][0]
        assert changed.scores[label] - baseline.scores[label] == delta


def test_answer_not_in_options_is_skipped_with_warning(caplog):
    bank = _single_question_bank() * 2

    with caplog.at_level("WARNING"):
        result = classifier.classify(bank, {0: "A", 1: "a"})

    assert result.scores == {"designer": 5, "consumer": 0}
    assert len(result.warnings) == 1
    assert result.warnings[0].question_index == 1
    assert result.warnings[0].answer == "a"
    assert "not one of the options" in caplog.text


def test_out_of_range_index_and_non_string_answers_warn():
    bank = _single_question_bank()

    result = classifier.classify(bank, {5: "A", 0: 1})

    assert result.scores == {"designer": 0, "consumer": 0}
    assert {warning.question_index for warning in result.warnings} == {0, 5}


def test_misaligned_weights_are_reported_instead_of_raising():
    bank = [Question(prompt="broken", options=("A", "B"), weight={"designer": (1,), "consumer": (0, 1)})]

    result = classifier.classify(bank, {0: "B"})

    assert result.scores == {"designer": 0, "consumer": 0}
    assert "designer weight" in result.warnings[0].reason


def test_completion_helpers():
    bank = default_question_bank()
    partial = {0: bank[0].options[0], 2: "stale option"}

    assert not classifier.is_complete(bank, partial)
    assert classifier.missing_questions(bank, partial) == [1, 2, 3, 4, 5, 6]
    assert classifier.answer_progress(bank, partial) == pytest.approx(1 / 7)

    full = {index: question.options[-1] for index, question in enumerate(bank)}
    assert classifier.is_complete(bank, full)
    assert classifier.answer_progress(bank, full) == 1.0


def test_answers_from_sequence_drops_gaps():
    assert answers_from_sequence(["A", None, "", "B"]) == {0: "A", 3: "B"}


def test_default_bank_shape():
    bank = default_question_bank()

    assert bank.version == 1
    assert len(bank) == 7
    assert bank[0].options[0] == "I want to create and sell sustainable fashion designs"
    assert bank[6].weight["consumer"] == (1, 1, 5, 5)


def test_validate_question_rejects_misaligned_weights():
    question = Question(prompt="q", options=("A", "B", "C"), weight={"designer": (1, 2), "consumer": (0, 0, 0)})

    with pytest.raises(QuestionBankError, match="must have 3 entries"):
        validate_question(question)


def test_parse_question_bank_rejects_missing_label():
    payload = {"questions": [{"question": "q", "options": ["A"], "weight": {"designer": [1]}}]}

    with pytest.raises(QuestionBankError, match="weight.consumer is required"):
        parse_question_bank(payload)


def test_load_question_bank_from_file(tmp_path):
    bank_path = tmp_path / "bank.yaml"
    bank_path.write_text(
        "version: 3\n"
        "questions:\n"
        "  - question: Do you sew?\n"
        "    options: [sew, buy]\n"
        "    weight:\n"
        "      designer: [4, 0]\n"
        "      consumer: [0, 4]\n",
        encoding="utf-8",
    )

    bank = load_question_bank(bank_path)

    assert bank.version == 3
    assert classifier.classify(bank, {0: "sew"}).label == "designer"


def test_load_question_bank_rejects_bad_yaml(tmp_path):
    bank_path = tmp_path / "bank.yaml"
    bank_path.write_text("questions: [unclosed", encoding="utf-8")

    with pytest.raises(QuestionBankError):
        load_question_bank(bank_path)


def test_default_bank_serializes_to_a_loadable_mapping():
    bank = default_question_bank()

    payload = bank.to_dict()

    assert payload["questions"][1]["weight"]["consumer"] == [0, 1, 4, 5]
    assert parse_question_bank(payload) == bank
