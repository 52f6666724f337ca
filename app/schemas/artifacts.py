"""
Learning artifacts returned by the generation endpoints.

The array bounds are part of the contract: a generated value that violates
them fails validation and is treated as a generation failure.
"""
from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


# ----------------------------
# Challenge
# ----------------------------
class ChallengeAnalysis(BaseModel):
    content_type: Literal["educational", "entertainment"]
    topic: str


class Challenge(BaseModel):
    title: str
    instructions: str
    questions: Annotated[list[str], Field(min_length=3, max_length=3)]


class ChallengeArtifact(BaseModel):
    analysis: ChallengeAnalysis
    challenge: Challenge


# ----------------------------
# Sherpa guidance (lost / quiz)
# ----------------------------
class SherpaAnalysis(BaseModel):
    topic: str
    difficulty_level: Literal["Beginner", "Intermediate", "Advanced"]


class SherpaGuidance(BaseModel):
    explanation: str
    analogy: str
    prerequisite_recommendation: Annotated[list[str], Field(min_length=2, max_length=4)]
    difficulty_warning: bool


class QuizQuestion(BaseModel):
    question: str
    answer: str
    explanation: str


class Quiz(BaseModel):
    questions: Annotated[list[QuizQuestion], Field(min_length=3, max_length=3)]


class SherpaArtifact(BaseModel):
    analysis: SherpaAnalysis
    sherpa: SherpaGuidance
    quiz: Quiz


# ----------------------------
# Stuck-point rescue
# ----------------------------
class FlashCard(BaseModel):
    front: str
    back: str


class RescueArtifact(BaseModel):
    overview: str
    stuck_analysis: str
    recommendations: Annotated[list[str], Field(min_length=2, max_length=5)]
    next_steps: Annotated[list[str], Field(min_length=2, max_length=5)]
    flash_cards: Annotated[list[FlashCard], Field(min_length=2, max_length=5)]
