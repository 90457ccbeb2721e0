from guessme.domain.models import Subject
from guessme.profiling.setup import SetupPolicy, is_profile_complete, is_setup_complete


def test_default_policy_needs_photo_age_and_work_or_school():
    assert is_setup_complete(Subject(id="a", profile_image_url="img", age=30, occupation="Chef"))
    assert is_setup_complete(Subject(id="a", profile_image_url="img", age=30, education="PhD"))
    assert not is_setup_complete(Subject(id="a", age=30, occupation="Chef"))
    assert not is_setup_complete(Subject(id="a", profile_image_url="img", occupation="Chef"))
    assert not is_setup_complete(Subject(id="a", profile_image_url="img", age=30))


def test_policy_is_configurable():
    relaxed = SetupPolicy(require_photo=False, require_age=False, require_any_of=())
    assert is_setup_complete(Subject(id="a"), relaxed)


def test_profile_complete_when_anything_is_askable():
    assert is_profile_complete(Subject(id="a", smoker=True))
    assert not is_profile_complete(Subject(id="a", profile_image_url="img"))
