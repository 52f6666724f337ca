import pytest

from app.api.deps import get_settings
from app.core.config import Settings
from app.main import app
from app.services.learning import MSG_LINK_OR_TRANSCRIPT, MSG_TRANSCRIPT_UNAVAILABLE
from app.services.llm.prompts import TRIMMED_NOTE
from payloads import challenge_payload


def test_manual_transcript_generates_challenge(client, generator, transcripts):
    generator.result = challenge_payload()

    r = client.post("/api/challenge", json={"transcript": "  neurons   fire\n together  "})

    assert r.status_code == 200
    body = r.json()
    assert body["analysis"]["content_type"] == "educational"
    assert len(body["challenge"]["questions"]) == 3
    assert transcripts.calls == []
    assert "neurons fire together" in generator.calls[0].prompt


def test_manual_transcript_wins_over_url(client, generator, transcripts):
    generator.result = challenge_payload()
    r = client.post("/api/challenge", json={"url": "https://youtu.be/aircAruvnKk", "transcript": "pasted"})
    assert r.status_code == 200
    assert transcripts.calls == []


def test_url_transcript_is_fetched(client, generator, transcripts):
    transcripts.by_id["aircAruvnKk"] = "fetched words"
    generator.result = challenge_payload()

    r = client.post("/api/challenge", json={"url": "https://www.youtube.com/watch?v=aircAruvnKk"})

    assert r.status_code == 200
    assert transcripts.calls == ["aircAruvnKk"]
    assert "fetched words" in generator.calls[0].prompt


def test_long_transcript_is_trimmed_and_flagged(client, generator):
    app.dependency_overrides[get_settings] = lambda: Settings(transcript_max_chars=50)
    generator.result = challenge_payload()

    r = client.post("/api/challenge", json={"transcript": "w" * 80})

    assert r.status_code == 200
    prompt = generator.calls[0].prompt
    assert "w" * 50 in prompt and "w" * 51 not in prompt
    assert TRIMMED_NOTE in prompt


@pytest.mark.parametrize("body", [{}, {"url": "", "transcript": ""}, {"url": "   ", "transcript": "   "}])
def test_empty_input_is_rejected_without_generation(client, generator, body):
    r = client.post("/api/challenge", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": MSG_LINK_OR_TRANSCRIPT}
    assert generator.calls == []


def test_unresolvable_url_is_rejected(client, generator):
    r = client.post("/api/challenge", json={"url": "not a video"})
    assert r.status_code == 400
    assert r.json()["error"] == MSG_LINK_OR_TRANSCRIPT
    assert generator.calls == []


def test_unavailable_transcript_asks_for_manual_entry(client, generator, transcripts):
    r = client.post("/api/challenge", json={"url": "https://youtu.be/aircAruvnKk"})
    assert r.status_code == 400
    assert r.json()["error"] == MSG_TRANSCRIPT_UNAVAILABLE
    assert transcripts.calls == ["aircAruvnKk"]
    assert generator.calls == []


def test_generation_failure_is_500(client, failing_generator):
    r = client.post("/api/challenge", json={"transcript": "some words"})
    assert r.status_code == 500
    assert r.json() == {"error": "Unable to generate a challenge right now."}


def test_out_of_bounds_generation_is_not_forwarded(client, generator):
    p = challenge_payload()
    p["challenge"]["questions"] = ["just one"]
    generator.result = p

    r = client.post("/api/challenge", json={"transcript": "some words"})

    assert r.status_code == 500
    assert "error" in r.json()


def test_invalid_json_is_400(client, generator):
    r = client.post("/api/challenge", content=b"{nope", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body."}
    assert generator.calls == []


def test_wrong_field_type_is_400(client, generator):
    r = client.post("/api/challenge", json={"url": 42})
    assert r.status_code == 400
    assert r.json()["error"].startswith("Invalid request: url")
    assert generator.calls == []
