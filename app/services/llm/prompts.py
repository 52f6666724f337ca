"""
Prompt assembly. Everything here is a pure function of its inputs: no network,
no settings lookups, so the exact text sent to the backend is easy to test.
"""
from __future__ import annotations

from app.schemas.artifacts import ChallengeArtifact, RescueArtifact, SherpaArtifact
from app.services.llm.base import GenerationRequest
from app.services.transcript import TrimmedTranscript

UNKNOWN_TITLE = "Unknown video"

TRIMMED_NOTE = "Note: Transcript was trimmed for speed. Prioritize the core ideas."

CHALLENGE_SYSTEM = " ".join(
    [
        "You are a Tough Love Tutor.",
        "Analyze the transcript and decide if it is educational or entertainment.",
        "If educational: set analysis.content_type to 'educational' and provide exactly 3 Socratic questions "
        "that require deep understanding.",
        "If entertainment: set analysis.content_type to 'entertainment', gently roast the user in the "
        "instructions, and still provide 3 reflective questions.",
        "Keep the tone firm but helpful. Keep the output concise.",
    ]
)

SHERPA_SYSTEM = """You are the Sherpa, a patient guide who rescues learners from confusing videos.

You will be given a video title and, optionally, what the learner is confused about and where in the video.
Hard rules:
- Identify the topic and rate its difficulty as Beginner, Intermediate or Advanced.
- If the topic is Advanced, set sherpa.difficulty_warning to true; otherwise false.
- Explain the core idea plainly and give one concrete everyday analogy.
- Recommend 2 to 4 prerequisites the learner should review first, most fundamental first.
- Write exactly 3 quiz questions, each with a short answer and a one-sentence explanation.
- Do not invent details about the video you cannot infer from the title or the learner's note.
"""

SHERPA_MODE_GUIDANCE = {
    "lost": "The learner pressed \"I'm Lost\": focus on the explanation, analogy and prerequisites; "
    "keep the quiz gentle.",
    "quiz": "The learner pressed \"Quiz Me\": keep the explanation brief and make the quiz questions "
    "probe real understanding.",
}

RESCUE_SYSTEM = """You are a study coach who rescues learners stuck at a specific point in a video.

You will be given the video transcript and, optionally, the title and the timestamp where the learner got stuck.
Hard rules:
- overview: 2-3 sentences on what the video covers.
- stuck_analysis: explain the likely reason the learner got stuck at that point, using the transcript.
- recommendations: 2 to 5 concrete actions to get unstuck.
- next_steps: 2 to 5 short steps for continuing the video afterwards.
- flash_cards: 2 to 5 cards; front is a question, back is a 1-2 sentence answer.
- Be faithful to the transcript; do not invent facts.
"""


def _transcript_block(transcript: TrimmedTranscript) -> str:
    lines = ["Transcript (may be truncated):", transcript.text]
    if transcript.truncated:
        lines += ["", TRIMMED_NOTE]
    return "\n".join(lines)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def assemble_challenge(transcript: TrimmedTranscript) -> GenerationRequest:
    return GenerationRequest(
        system=CHALLENGE_SYSTEM,
        prompt=_transcript_block(transcript),
        schema=ChallengeArtifact,
    )


def assemble_sherpa(
    mode: str,
    title: str | None = None,
    note: str | None = None,
    timestamp: str | None = None,
) -> GenerationRequest:
    system = SHERPA_SYSTEM + "\n" + SHERPA_MODE_GUIDANCE[mode]

    lines = [f"Video title: {_clean(title) or UNKNOWN_TITLE}"]
    if _clean(note):
        lines.append(f"Learner's confusion: {_clean(note)}")
    if _clean(timestamp):
        lines.append(f"Got stuck around: {_clean(timestamp)}")
    if len(lines) == 1:
        lines.append("The learner did not describe the confusion; cover the fundamentals of the topic.")

    return GenerationRequest(system=system, prompt="\n".join(lines), schema=SherpaArtifact)


def assemble_rescue(
    transcript: TrimmedTranscript,
    title: str | None = None,
    timestamp: str | None = None,
) -> GenerationRequest:
    lines = [f"Video title: {_clean(title) or UNKNOWN_TITLE}"]
    if _clean(timestamp):
        lines.append(f"Stuck at timestamp: {_clean(timestamp)}")
    lines += ["", _transcript_block(transcript)]

    return GenerationRequest(system=RESCUE_SYSTEM, prompt="\n".join(lines), schema=RescueArtifact)
