"""Pydantic schemas for questionnaire and recommendation data."""
