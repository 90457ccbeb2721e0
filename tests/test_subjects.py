import pytest

from guessme.errors import CatalogError
from guessme.questions.generator import QuestionGenerator
from guessme.subjects import load_subjects
from guessme.util.rng import Rng


def test_sample_subjects_load(sample_subjects_path):
    subjects = load_subjects(sample_subjects_path)
    assert len(subjects) == 8
    by_id = {subject.id: subject for subject in subjects}
    assert by_id["ben"].smoker is False
    assert by_id["empty-profile"].askable_categories() == []


def test_every_sample_subject_but_one_is_askable(sample_subjects_path):
    generator = QuestionGenerator(Rng(3))
    questions = [generator.generate(subject) for subject in load_subjects(sample_subjects_path)]
    assert sum(question is None for question in questions) == 1


def test_invalid_subject_file(tmp_path):
    path = tmp_path / "subjects.yml"
    path.write_text("subjects:\n  - id: x\n    age: -4\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_subjects(path)
