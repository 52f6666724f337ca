"""
Static guidance served (with HTTP 200) when generation fails on endpoints
that can still offer something generic. Factories return fresh instances so
callers may not mutate a shared object.
"""
from __future__ import annotations

from app.schemas.artifacts import (
    FlashCard,
    Quiz,
    QuizQuestion,
    RescueArtifact,
    SherpaAnalysis,
    SherpaArtifact,
    SherpaGuidance,
)


def sherpa_fallback() -> SherpaArtifact:
    return SherpaArtifact(
        analysis=SherpaAnalysis(topic="General Topic", difficulty_level="Beginner"),
        sherpa=SherpaGuidance(
            explanation=(
                "We couldn't analyze this video right now, so here is a general way back in: "
                "pause, name the last idea that made sense, and rebuild from there one step at a time."
            ),
            analogy=(
                "Think of it like a hiking trail: when you lose the path, walk back to the last "
                "marker you recognize instead of pushing further into the woods."
            ),
            prerequisite_recommendation=[
                "Re-watch the minute before the point where you got lost",
                "Write down the key terms the video uses and look up any unfamiliar ones",
                "Find a short beginner-level introduction to the same topic",
            ],
            difficulty_warning=False,
        ),
        quiz=Quiz(
            questions=[
                QuizQuestion(
                    question="What is the main question this video is trying to answer?",
                    answer="State it in one sentence in your own words.",
                    explanation="If you can't name the goal, the details won't have anywhere to attach.",
                ),
                QuizQuestion(
                    question="What was the last idea you fully understood?",
                    answer="Name the concept and where in the video it appeared.",
                    explanation="This is your restart point; resume watching from just after it.",
                ),
                QuizQuestion(
                    question="Which term or step felt unfamiliar?",
                    answer="Pick the single word or step that made you stop following.",
                    explanation="Usually one missing prerequisite causes the confusion. Look that up first.",
                ),
            ]
        ),
    )


def rescue_fallback() -> RescueArtifact:
    return RescueArtifact(
        overview=(
            "We couldn't build a tailored rescue plan right now. "
            "Here is a general plan for getting unstuck on any video lesson."
        ),
        stuck_analysis=(
            "Getting stuck usually means a concept was introduced faster than it could be absorbed, "
            "or it depends on something covered earlier that didn't fully land."
        ),
        recommendations=[
            "Rewind about a minute before the point where you got stuck and re-watch at a slower speed",
            "Pause after each new term and restate it in your own words",
            "Look up one short beginner explanation of the concept that lost you",
        ],
        next_steps=[
            "Write a one-sentence summary of what the video covered before the stuck point",
            "Continue watching and check whether the next section clears things up",
            "Try the rescue again later for a plan tailored to this transcript",
        ],
        flash_cards=[
            FlashCard(
                front="What should you do first when you get lost in a video?",
                back="Go back to the last idea you understood and restart from there.",
            ),
            FlashCard(
                front="How do you check that you understood a new term?",
                back="Explain it in your own words without looking at the video.",
            ),
        ],
    )
