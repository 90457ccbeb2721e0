import pytest

from guessme.domain.enums import QuestionCategory
from guessme.domain.models import Subject
from guessme.errors import GenerationImpossible
from guessme.questions.generator import QuestionGenerator, format_answer
from guessme.util.rng import Rng

FULL_SUBJECT = Subject(
    id="full",
    profile_image_url="https://example.invalid/full.jpg",
    age=33,
    occupation="Pilot",
    education="PhD",
    height=177.6,
    weight=70.2,
    smoker=True,
    favorite_color="Teal",
    favorite_movie="Alien",
    favorite_food="Ramen",
    favorite_flower="Lotus",
    favorite_sport="Fencing",
    favorite_hobby="Chess",
)


def _number(choice: str) -> int:
    return int(choice.split()[0])


def test_subject_without_attributes_yields_nothing(rng):
    assert QuestionGenerator(rng).generate(Subject(id="blank")) is None


@pytest.mark.parametrize("category", list(QuestionCategory))
def test_every_category_builds_a_valid_question(category):
    generator = QuestionGenerator(Rng(5))
    question = generator.build_question(FULL_SUBJECT, category)
    expected = 2 if category == QuestionCategory.SMOKER else 4
    assert question.category == category
    assert len(question.choices) == expected
    assert len(set(question.choices)) == expected
    assert question.choices.count(question.correct_answer) == 1
    assert question.image_url == FULL_SUBJECT.profile_image_url
    assert question.subject_id == "full"


def test_age_choices_stay_within_ten_years():
    generator = QuestionGenerator(Rng(2024))
    subject = Subject(id="s", age=28)
    for _ in range(100):
        question = generator.generate(subject)
        assert question is not None
        assert question.correct_answer == "28"
        assert "28" in question.choices
        for choice in question.choices:
            assert 18 <= int(choice) <= 38


def test_age_distractors_never_go_below_eighteen():
    generator = QuestionGenerator(Rng(3))
    subject = Subject(id="s", age=19)
    for _ in range(30):
        question = generator.generate(subject)
        assert question is not None
        assert min(int(choice) for choice in question.choices) >= 18


def test_height_and_weight_use_units():
    generator = QuestionGenerator(Rng(8))
    height = generator.build_question(FULL_SUBJECT, QuestionCategory.HEIGHT)
    weight = generator.build_question(FULL_SUBJECT, QuestionCategory.WEIGHT)
    assert height.correct_answer == "178 cm"
    assert weight.correct_answer == "70 kg"
    assert all(choice.endswith(" cm") for choice in height.choices)
    assert all(choice.endswith(" kg") for choice in weight.choices)
    assert all(abs(_number(choice) - 178) <= 15 for choice in height.choices)


def test_weight_distractors_respect_minimum():
    generator = QuestionGenerator(Rng(11))
    subject = Subject(id="s", weight=50)
    for _ in range(30):
        question = generator.generate(subject)
        assert question is not None
        distractors = [c for c in question.choices if c != question.correct_answer]
        assert all(_number(choice) >= 45 for choice in distractors)


def test_smoker_question_offers_yes_and_no():
    question = QuestionGenerator(Rng(1)).build_question(Subject(id="s", smoker=False), QuestionCategory.SMOKER)
    assert sorted(question.choices) == ["No", "Yes"]
    assert question.correct_answer == "No"


def test_same_seed_gives_same_question():
    first = QuestionGenerator(Rng(42)).generate(FULL_SUBJECT)
    second = QuestionGenerator(Rng(42)).generate(FULL_SUBJECT)
    assert first is not None and second is not None
    assert first.category == second.category
    assert first.choices == second.choices


def test_catalog_entries_matching_the_answer_are_not_repeated():
    catalog = lambda category: ("Teacher", "Doctor", "Nurse", "Chef")
    generator = QuestionGenerator(Rng(4), catalog=catalog)
    question = generator.build_question(Subject(id="s", occupation="teacher"), QuestionCategory.OCCUPATION)
    assert question.correct_answer == "teacher"
    assert "Teacher" not in question.choices
    assert sorted(question.choices) == ["Chef", "Doctor", "Nurse", "teacher"]


def test_small_catalog_fails_closed():
    catalog = lambda category: ("Teacher", "Doctor")
    generator = QuestionGenerator(Rng(4), catalog=catalog)
    subject = Subject(id="s", occupation="Pilot")
    with pytest.raises(GenerationImpossible):
        generator.build_question(subject, QuestionCategory.OCCUPATION)
    assert generator.generate(subject) is None


def test_retry_budget_is_bounded():
    generator = QuestionGenerator(Rng(4), max_attempts=1)
    assert generator.generate(Subject(id="s", favorite_color="Teal")) is None
    assert generator.generate(Subject(id="s", age=40)) is None


def test_missing_attribute_raises():
    with pytest.raises(GenerationImpossible):
        QuestionGenerator(Rng(1)).build_question(Subject(id="s", age=20), QuestionCategory.OCCUPATION)


def test_format_answer():
    assert format_answer(QuestionCategory.AGE, 31) == "31"
    assert format_answer(QuestionCategory.HEIGHT, 165.2) == "165 cm"
    assert format_answer(QuestionCategory.WEIGHT, 80) == "80 kg"
    assert format_answer(QuestionCategory.SMOKER, True) == "Yes"
    assert format_answer(QuestionCategory.FAVORITE_SPORT, "Golf") == "Golf"
