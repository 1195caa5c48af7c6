"""Equipment Finance Advisor — questionnaire-driven financing recommendations."""
