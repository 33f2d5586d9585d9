import pytest

from learnhub.domain.assessment import (
    ChoiceOption,
    InvalidQuestion,
    MultipleChoice,
    QuestionSpec,
    ShortAnswer,
    TrueFalse,
    build_correctness,
    grade,
)
from learnhub.domain.assessment.grading import normalize_answer


def _mc(points=5):
    return QuestionSpec(
        id="q1",
        points=points,
        order=1,
        correctness=MultipleChoice(options=(
            ChoiceOption(id="a", text="Right", is_correct=True),
            ChoiceOption(id="b", text="Wrong"),
        )),
    )


def _tf(correct="true"):
    return QuestionSpec(id="q2", points=5, order=2, correctness=TrueFalse(correct_value=correct))


def _sa(correct="Paris"):
    return QuestionSpec(id="q3", points=3, order=3, correctness=ShortAnswer(correct_value=correct))


# ---------------------------------------------------------
# MULTIPLE_CHOICE
# ---------------------------------------------------------
def test_multiple_choice_correct_option_awards_points():
    result = grade(_mc(), "a")
    assert result.is_correct is True
    assert result.earned_points == 5


@pytest.mark.parametrize("answer", ["b", "z", None, ""])
def test_multiple_choice_wrong_unknown_or_missing_is_incorrect(answer):
    result = grade(_mc(), answer)
    assert result.is_correct is False
    assert result.earned_points == 0


def test_multiple_choice_requires_exactly_one_correct_option():
    with pytest.raises(InvalidQuestion):
        MultipleChoice(options=(ChoiceOption(id="a", is_correct=True), ChoiceOption(id="b", is_correct=True)))
    with pytest.raises(InvalidQuestion):
        MultipleChoice(options=(ChoiceOption(id="a"), ChoiceOption(id="b")))


def test_multiple_choice_rejects_duplicate_option_ids():
    with pytest.raises(InvalidQuestion):
        MultipleChoice(options=(ChoiceOption(id="a", is_correct=True), ChoiceOption(id="a")))


# ---------------------------------------------------------
# TRUE_FALSE
# ---------------------------------------------------------
def test_true_false_accepts_string_and_boolean():
    assert grade(_tf("true"), "true").is_correct is True
    assert grade(_tf("true"), True).is_correct is True
    assert grade(_tf("false"), False).is_correct is True


def test_true_false_is_case_sensitive():
    assert grade(_tf("true"), "True").is_correct is False
    assert grade(_tf("true"), "false").is_correct is False


# ---------------------------------------------------------
# SHORT_ANSWER
# ---------------------------------------------------------
@pytest.mark.parametrize("answer", ["paris", " Paris ", "PARIS", "Paris"])
def test_short_answer_ignores_case_and_surrounding_whitespace(answer):
    result = grade(_sa(), answer)
    assert result.is_correct is True
    assert result.earned_points == 3


@pytest.mark.parametrize("answer", ["Pariss", "Par is", "   ", None])
def test_short_answer_has_no_fuzzy_matching(answer):
    assert grade(_sa(), answer).is_correct is False


# ---------------------------------------------------------
# normalize / build
# ---------------------------------------------------------
def test_normalize_answer_treats_structures_as_missing():
    assert normalize_answer(["a"]) is None
    assert normalize_answer({"a": 1}) is None
    assert normalize_answer(3) == "3"


def test_build_correctness_from_stored_fields():
    mc = build_correctness(
        "MULTIPLE_CHOICE",
        options=[{"id": "a", "text": "x", "is_correct": True}, {"id": "b", "text": "y"}],
    )
    assert mc.correct_option_id == "a"

    tf = build_correctness("TRUE_FALSE", correct_answer="false")
    assert tf == TrueFalse(correct_value="false")

    with pytest.raises(InvalidQuestion):
        build_correctness("SHORT_ANSWER", correct_answer="  ")
    with pytest.raises(ValueError):
        build_correctness("ESSAY", correct_answer="x")


@pytest.mark.parametrize("flag", ["false", "true", 1, 0])
def test_build_correctness_rejects_non_boolean_correct_flag(flag):
    with pytest.raises(InvalidQuestion):
        build_correctness(
            "MULTIPLE_CHOICE",
            options=[{"id": "a", "is_correct": flag}, {"id": "b", "is_correct": True}],
        )


def test_string_false_flag_never_marks_option_correct():
    options = [{"id": "a", "is_correct": "false"}, {"id": "b", "is_correct": False}]
    with pytest.raises(InvalidQuestion):
        build_correctness("MULTIPLE_CHOICE", options=options)


def test_missing_or_null_correct_flag_means_wrong_option():
    mc = build_correctness(
        "MULTIPLE_CHOICE",
        options=[{"id": "a", "is_correct": None}, {"id": "b"}, {"id": "c", "is_correct": True}],
    )
    assert mc.correct_option_id == "c"
