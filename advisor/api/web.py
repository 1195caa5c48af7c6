"""Advisor API — FastAPI router for the questionnaire and recommendations.

The rendering surface fetches the question catalog, collects answers
client-side and posts the AnswerSet here for evaluation.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from advisor.config import settings
from advisor.formatters import format_results_text
from advisor.questionnaire.catalog import QUESTIONS, get_question
from advisor.recommendations.engine import evaluate
from advisor.schemas.questionnaire import Question
from advisor.schemas.recommendation import AnswerSet, RecommendationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["advisor"])


@router.get("/questions", response_model=list[Question])
async def list_questions() -> list[Question]:
    """All questionnaire screens in step order."""
    return QUESTIONS


@router.get("/questions/{step}", response_model=Question)
async def question_detail(step: str) -> Question:
    """One questionnaire screen."""
    try:
        return get_question(step)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown step: {step}") from None


@router.post("/recommendations", response_model=RecommendationResult)
async def recommendations(answers: AnswerSet) -> RecommendationResult:
    """Evaluate an AnswerSet."""
    return evaluate(answers)


@router.post("/recommendations/summary", response_class=PlainTextResponse)
async def recommendations_summary(answers: AnswerSet) -> str:
    """Plain-text summary of the recommendations, ready to email."""
    result = evaluate(answers)
    logger.info("Built text summary with %d recommendations", len(result.recommendations))
    return format_results_text(answers, result, settings.branding)
