import pytest

from app.services.fallbacks import rescue_fallback, sherpa_fallback
from payloads import rescue_payload


def test_rescue_success(client, generator, titles):
    titles.by_id["aircAruvnKk"] = "Gradient descent"
    generator.result = rescue_payload()

    r = client.post(
        "/api/rescue",
        json={"url": "https://youtu.be/aircAruvnKk", "transcript": "the  cost\nfunction", "timestamp": "3:15"},
    )

    assert r.status_code == 200
    assert r.json() == rescue_payload()
    prompt = generator.calls[0].prompt
    assert "Gradient descent" in prompt
    assert "the cost function" in prompt
    assert "3:15" in prompt


def test_rescue_without_url_skips_title_lookup(client, generator, titles):
    generator.result = rescue_payload()
    r = client.post("/api/rescue", json={"transcript": "words"})
    assert r.status_code == 200
    assert titles.calls == []


def test_unresolvable_url_only_costs_the_title(client, generator, titles):
    generator.result = rescue_payload()
    r = client.post("/api/rescue", json={"url": "not a video", "transcript": "words"})
    assert r.status_code == 200
    assert titles.calls == []


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"transcript": ""},
        {"transcript": "   \n"},
        {"url": "https://youtu.be/aircAruvnKk"},
        {"url": "https://youtu.be/aircAruvnKk", "transcript": ""},
    ],
)
def test_transcript_is_required(client, generator, body):
    r = client.post("/api/rescue", json=body)
    assert r.status_code == 400
    assert "error" in r.json()
    assert generator.calls == []


def test_generation_failure_serves_rescue_fallback(client, failing_generator):
    r = client.post("/api/rescue", json={"transcript": "words"})

    assert r.status_code == 200
    body = r.json()
    assert body == rescue_fallback().model_dump()
    assert body != sherpa_fallback().model_dump()
    assert 2 <= len(body["flash_cards"]) <= 5


def test_too_many_flash_cards_serves_fallback(client, generator):
    generator.result = rescue_payload(flash_cards=[{"front": str(i), "back": str(i)} for i in range(6)])
    r = client.post("/api/rescue", json={"transcript": "words"})
    assert r.status_code == 200
    assert r.json() == rescue_fallback().model_dump()
