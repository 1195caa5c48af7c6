"""Tests for the advisor HTTP API and text formatters.

Covers:
- Questionnaire catalog endpoints (list, detail, 404)
- Recommendation endpoint (camelCase body, 422 on bad values)
- Plain-text summary endpoint and formatter functions
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from advisor.config import BrandingSettings
from advisor.formatters import format_answers, format_list, format_results_text
from advisor.main import app
from advisor.models.enums import EquipmentType, PainPoint
from advisor.recommendations import evaluate
from advisor.schemas.recommendation import AnswerSet

# ── Formatter unit tests ─────────────────────────────────────────────


class TestFormatList:
    def test_values(self):
        assert format_list(["a", "b"]) == "a, b"

    def test_empty(self):
        assert format_list([]) == "-"

    def test_none(self):
        assert format_list(None) == "-"


class TestFormatAnswers:
    def test_empty(self):
        assert format_answers(AnswerSet()) == [
            "Challenges: -",
            "Equipment: -",
            "Priorities: -",
            "Company size: -",
            "Timeframe: -",
        ]

    def test_labels(self):
        lines = format_answers(AnswerSet(
            selected_pain_points={PainPoint.CASHFLOW},
            equipment_type=EquipmentType.OFFICE,
        ))
        assert lines[0] == "Challenges: Cash Flow Strain During Capex Cycles"
        assert lines[1] == "Equipment: Office Equipment & Furniture"


class TestFormatResultsText:
    @pytest.fixture()
    def branding(self):
        return BrandingSettings(
            advisor_name="Acme Advisor",
            contact_phone="555-0100",
            contact_email="",
        )

    def test_sections(self, branding):
        answers = AnswerSet(selected_pain_points={PainPoint.CASHFLOW})
        text = format_results_text(answers, evaluate(answers), branding)
        assert text.startswith("Acme Advisor")
        assert "1. Capital Lease (Finance Lease)" in text
        assert "2. Sale-Leaseback" in text
        assert "   ✓ Immediate cash infusion" in text
        assert "Phone: 555-0100" in text
        assert "Email:" not in text

    def test_defaults(self, branding):
        text = format_results_text(AnswerSet(), evaluate(AnswerSet()), branding)
        assert "1. Operating Lease" in text
        assert "2. Capital Lease" in text
        assert "3." not in text


# ── Web route integration tests ──────────────────────────────────────


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestQuestionRoutes:
    def test_list(self, client):
        resp = client.get("/api/questions")
        assert resp.status_code == 200
        body = resp.json()
        assert [q["step"] for q in body] == [
            "painPoints",
            "equipmentType",
            "financialGoals",
            "companySize",
            "timeframe",
        ]
        assert body[0]["multiSelect"] is True
        assert body[0]["options"][0] == {
            "id": "cashflow",
            "label": "Cash Flow Strain During Capex Cycles",
        }

    def test_detail(self, client):
        resp = client.get("/api/questions/companySize")
        assert resp.status_code == 200
        assert resp.json()["multiSelect"] is False

    def test_unknown_step(self, client):
        resp = client.get("/api/questions/favouriteColour")
        assert resp.status_code == 404


class TestRecommendationRoutes:
    def test_empty_body_defaults(self, client):
        resp = client.post("/api/recommendations", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["usedDefaults"] is True
        assert [r["productType"] for r in body["recommendations"]] == [
            "Operating Lease",
            "Capital Lease",
        ]

    def test_fleet_and_cashflow(self, client):
        resp = client.post("/api/recommendations", json={
            "selectedPainPoints": ["cashflow"],
            "equipmentType": "Transportation & Fleet Vehicles",
            "companySize": "$50-100M Revenue",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert [r["productType"] for r in body["recommendations"]] == [
            "Capital Lease (Finance Lease)",
            "TRAC Lease (Terminal Rental Adjustment)",
            "Sale-Leaseback",
        ]
        assert body["matchedRules"][1] == {
            "rule": "trac_lease",
            "product": "trac_lease",
            "reasons": ["equipment_type:Transportation & Fleet Vehicles"],
        }
        assert "bestFor" in body["recommendations"][0]

    def test_invalid_value(self, client):
        resp = client.post("/api/recommendations", json={"equipmentType": "Spaceships"})
        assert resp.status_code == 422

    def test_summary(self, client):
        with patch("advisor.api.web.settings") as mock_settings:
            mock_settings.branding = BrandingSettings(
                advisor_name="Acme Advisor",
                contact_phone="",
                contact_email="advisor@example.com",
            )
            resp = client.post(
                "/api/recommendations/summary",
                json={"selectedFinancialGoals": ["preserve_credit"]},
            )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert "1. Equipment Term Loan" in resp.text
        assert "Priorities: Preserve Bank Credit Lines" in resp.text
        assert "Email: advisor@example.com" in resp.text
