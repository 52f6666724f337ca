import pytest
from pydantic import ValidationError

from app.schemas.artifacts import ChallengeArtifact, RescueArtifact, SherpaArtifact
from app.services.fallbacks import rescue_fallback, sherpa_fallback
from payloads import challenge_payload, rescue_payload, sherpa_payload


def test_valid_payloads_parse():
    ChallengeArtifact.model_validate(challenge_payload())
    SherpaArtifact.model_validate(sherpa_payload())
    RescueArtifact.model_validate(rescue_payload())


@pytest.mark.parametrize("n", [2, 4])
def test_challenge_requires_exactly_three_questions(n):
    p = challenge_payload()
    p["challenge"]["questions"] = [f"q{i}" for i in range(n)]
    with pytest.raises(ValidationError):
        ChallengeArtifact.model_validate(p)


def test_challenge_content_type_enum():
    p = challenge_payload(analysis={"content_type": "documentary", "topic": "x"})
    with pytest.raises(ValidationError):
        ChallengeArtifact.model_validate(p)


@pytest.mark.parametrize("n,ok", [(1, False), (2, True), (4, True), (5, False)])
def test_prerequisite_bounds(n, ok):
    p = sherpa_payload()
    p["sherpa"]["prerequisite_recommendation"] = [f"p{i}" for i in range(n)]
    if ok:
        SherpaArtifact.model_validate(p)
    else:
        with pytest.raises(ValidationError):
            SherpaArtifact.model_validate(p)


@pytest.mark.parametrize("n,ok", [(1, False), (2, True), (5, True), (6, False)])
def test_flash_card_bounds(n, ok):
    p = rescue_payload(flash_cards=[{"front": f"f{i}", "back": f"b{i}"} for i in range(n)])
    if ok:
        RescueArtifact.model_validate(p)
    else:
        with pytest.raises(ValidationError):
            RescueArtifact.model_validate(p)


def test_sherpa_fallback_shape():
    fb = sherpa_fallback()
    assert fb.analysis.topic == "General Topic"
    assert fb.analysis.difficulty_level == "Beginner"
    assert len(fb.quiz.questions) == 3
    assert 2 <= len(fb.sherpa.prerequisite_recommendation) <= 4
    assert fb.sherpa.difficulty_warning is False
    SherpaArtifact.model_validate(fb.model_dump())


def test_rescue_fallback_shape():
    fb = rescue_fallback()
    RescueArtifact.model_validate(fb.model_dump())
    assert 2 <= len(fb.flash_cards) <= 5


def test_fallbacks_are_fresh_instances():
    a = sherpa_fallback()
    a.quiz.questions.clear()
    assert len(sherpa_fallback().quiz.questions) == 3
