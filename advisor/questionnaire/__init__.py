"""Questionnaire screens and step order."""
