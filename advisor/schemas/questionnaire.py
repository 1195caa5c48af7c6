"""Pydantic schemas describing questionnaire screens for a rendering surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from advisor.models.enums import QuestionStep


class AnswerOption(BaseModel):
    """One selectable answer."""

    id: str
    label: str


class Question(BaseModel):
    """One questionnaire screen."""

    model_config = ConfigDict(populate_by_name=True)

    step: QuestionStep
    title: str
    subtitle: str
    multi_select: bool = Field(alias="multiSelect")
    options: list[AnswerOption]
