"""
Tests for the HTTP API and server-rendered pages.
"""

import json

import pytest

from fincalc.calculators.base import OUT_OF_RANGE


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCalculationsAPI:
    def test_list(self, client):
        response = client.get("/api/calculate/")
        assert response.status_code == 200

        calculators = {c["id"]: c for c in response.json()}
        assert len(calculators) == 6
        fields = {f["name"]: f for f in calculators["loan-payment"]["fields"]}
        assert fields["amount"]["constraint"] == "positive"
        assert fields["rate"]["constraint"] == "non_negative"
        assert fields["years"]["default"] == "5"

    def test_loan_payment(self, client):
        response = client.post(
            "/api/calculate/loan-payment",
            json={"inputs": {"amount": "20000", "rate": "7", "years": "5"}},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is True
        assert data["results"]["payment"] == pytest.approx(396.02, abs=0.01)
        assert data["display"][0] == {"label": "Monthly payment", "value": "$396.02"}

    def test_numeric_inputs_accepted(self, client):
        response = client.post(
            "/api/calculate/salary-to-hourly",
            json={"inputs": {"salary": 72000, "hours": 40, "weeks": 52}},
        )
        data = response.json()
        assert data["valid"] is True
        assert data["results"]["monthly"] == 6000

    def test_invalid_input_is_not_an_http_error(self, client):
        response = client.post(
            "/api/calculate/student-loan-payoff",
            json={"inputs": {"balance": "10000", "rate": "10", "payment": "50"}},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is False
        assert data["errors"]["payment"] == "Payment is too low to reduce the balance."
        assert data["results"] == {"months": 0, "total_interest": 0, "total_paid": 0}

    def test_mortgage_cross_field_error(self, client):
        response = client.post(
            "/api/calculate/mortgage-payment",
            json={
                "inputs": {
                    "home_price": "350000",
                    "down_payment": "400000",
                    "rate": "6.2",
                    "years": "30",
                    "tax_rate": "1.1",
                    "insurance": "1200",
                    "hoa": "0",
                }
            },
        )
        data = response.json()
        assert data["errors"]["loan_amount"] == "Down payment cannot exceed the home price."
        assert all(value == 0 for value in data["results"].values())

    def test_missing_inputs_fail_validation(self, client):
        response = client.post("/api/calculate/compound-interest", json={})
        data = response.json()
        assert response.status_code == 200
        assert data["valid"] is False
        assert data["errors"]["years"] == "Enter a number greater than 0."

    def test_non_finite_result_is_zeroed(self, client):
        response = client.post(
            "/api/calculate/compound-interest",
            json={"inputs": {"principal": "1e308", "contribution": "0", "rate": "6", "years": "20"}},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is False
        assert data["errors"]["result"] == OUT_OF_RANGE
        assert data["results"] == {
            "future_value": 0,
            "total_contributions": 0,
            "interest_earned": 0,
        }
        assert all("∞" not in item["value"] for item in data["display"])

    def test_overflowing_years_do_not_fail_the_request(self, client):
        response = client.post(
            "/api/calculate/compound-interest",
            json={"inputs": {"principal": "5000", "contribution": "200", "rate": "6", "years": "1000000"}},
        )
        assert response.status_code == 200
        assert response.json()["errors"]["result"] == OUT_OF_RANGE

    def test_unknown_calculator(self, client):
        response = client.post("/api/calculate/payday-loan", json={"inputs": {}})
        assert response.status_code == 404


class TestPreferencesAPI:
    def test_defaults(self, client):
        data = client.get("/api/preferences").json()
        assert data["theme_setting"] == "system"
        assert data["theme"] == "light"
        assert data["a11y"] == {"text_size": "normal", "high_contrast": False, "reduce_motion": False}

    def test_update_persists(self, client, tmp_path):
        response = client.put(
            "/api/preferences", json={"theme_setting": "dark", "text_size": "large"}
        )
        assert response.status_code == 200
        assert response.json()["html_attributes"]["data-theme"] == "dark"

        stored = json.loads((tmp_path / "preferences.json").read_text(encoding="utf-8"))
        assert json.loads(stored["theme"]) == "dark"
        assert json.loads(stored["a11y"])["text_size"] == "large"

    def test_invalid_update(self, client):
        response = client.put("/api/preferences", json={"theme_setting": "sepia"})
        assert response.status_code == 422

    def test_toggle(self, client):
        assert client.post("/api/preferences/toggle-theme").json()["theme_setting"] == "dark"
        assert client.post("/api/preferences/toggle-theme").json()["theme_setting"] == "light"

    def test_system_settings(self, client):
        data = client.post(
            "/api/preferences/system",
            json={"prefers_dark": True, "prefers_reduced_motion": True},
        ).json()
        assert data["theme"] == "dark"
        assert data["reduce_motion"] is True
        assert data["html_attributes"]["data-reduce-motion"] == "true"


class TestPages:
    def test_home(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<!--head-tags-->" not in response.text
        assert 'data-theme="light"' in response.text

    def test_calculator_with_query(self, client):
        response = client.get(
            "/calculators/salary-to-hourly",
            params={"salary": "72000", "hours": "40", "weeks": "48"},
        )
        assert response.status_code == 200
        assert "$1,500.00" in response.text

    def test_calculator_out_of_range_query(self, client):
        response = client.get(
            "/calculators/investment-fee-impact",
            params={
                "starting_balance": "15000",
                "annual_contribution": "3000",
                "annual_return": "0",
                "years": "20.5",
                "fee": "300",
            },
        )
        assert response.status_code == 200
        assert OUT_OF_RANGE in response.text

    def test_theme_applies_to_pages(self, client):
        client.put("/api/preferences", json={"theme_setting": "dark"})
        assert 'data-theme="dark"' in client.get("/privacy").text

    def test_not_found(self, client):
        response = client.get("/no/such/page")
        assert response.status_code == 404
        assert "Page not found" in response.text

    def test_static_css(self, client):
        assert client.get("/static/site.css").status_code == 200
