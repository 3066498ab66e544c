"""
E2E tests for buyer personas through the HTTP surface.

Each persona walks the flow a comparison screen drives: recommendations,
financing for the top pick, affordability badge inputs, and pre-approval.

Buyer personas:
- buyer_prime: Strong credit, high income, trade-in
- buyer_first_time: Thin budget, fair credit, small down payment
- buyer_stretched: Target payment far above what income supports
"""

import pytest
from fastapi.testclient import TestClient

FINANCE_OPTION = {"kind": "finance", "term_months": 60, "down_payment": 5000, "annual_interest_rate_percent": 5.5}


def _walk(client: TestClient, profile: dict) -> dict:
    """Run recommendation -> financing -> affordability -> pre-approval"""
    recommendations = client.post("/v1/recommendations", json={"profile": profile, "option": FINANCE_OPTION}).json()
    top_id = recommendations["top_vehicle_ids"][0]

    vehicles = {v["id"]: v for v in client.get("/v1/vehicles").json()}
    financing = client.post(
        "/v1/financing/calculate",
        json={"base_price": vehicles[top_id]["base_price"], "option": FINANCE_OPTION},
    ).json()
    affordability = client.post(
        "/v1/affordability",
        json={"monthly_payment": financing["monthly_payment"], "profile": profile},
    ).json()
    preapproval = client.post("/v1/preapproval", json={"profile": profile, "vehicle_id": top_id}).json()

    return {
        "recommendations": recommendations,
        "financing": financing,
        "affordability": affordability,
        "preapproval": preapproval,
    }


@pytest.mark.integration
def test_buyer_prime(client: TestClient):
    """
    buyer_prime: 780 credit, $12k/month, $8k down, $5k trade-in
    Expected: broad choice, comfortable payment, very likely approval
    """
    flow = _walk(
        client,
        {
            "monthly_income": 12000,
            "credit_score": 780,
            "max_down_payment": 8000,
            "preferred_monthly_payment": 600,
            "has_trade_in": True,
            "trade_in_value": 5000,
        },
    )

    assert len(flow["recommendations"]["affordable_vehicle_ids"]) == 20
    assert len(flow["recommendations"]["top_vehicle_ids"]) == 3
    assert flow["affordability"]["can_afford"] is True
    assert flow["preapproval"]["likelihood_status"] == "Very Likely"


@pytest.mark.integration
def test_buyer_first_time(client: TestClient):
    """
    buyer_first_time: 640 credit, $3.5k/month, $1.5k down, no trade-in
    Expected: short affordable list, guidance on credit and down payment
    """
    flow = _walk(
        client,
        {
            "monthly_income": 3500,
            "credit_score": 640,
            "max_down_payment": 1500,
            "preferred_monthly_payment": 400,
        },
    )

    affordable = flow["recommendations"]["affordable_vehicle_ids"]
    assert 0 < len(affordable) < 20
    assert "sequoia-2024" not in affordable
    assert flow["preapproval"]["likelihood_status"] in ("Possible", "Unlikely")
    assert any("credit" in r for r in flow["preapproval"]["recommendations"])
    assert any("down payment" in r for r in flow["preapproval"]["recommendations"])


@pytest.mark.integration
def test_buyer_stretched(client: TestClient):
    """
    buyer_stretched: 600 credit, $2k/month, targets a $1,200 payment
    Expected: cheapest-vehicle fallback, stretched payment, unlikely approval
    """
    flow = _walk(
        client,
        {
            "monthly_income": 2000,
            "credit_score": 600,
            "max_down_payment": 0,
            "preferred_monthly_payment": 1200,
        },
    )

    assert sorted(flow["recommendations"]["affordable_vehicle_ids"]) == sorted(
        ["corolla-2023", "corolla-hybrid-2024", "corolla-cross-2024"]
    )
    assert flow["recommendations"]["top_vehicle_ids"] == ["corolla-2023"]
    # $5,000 down on a $21,550 Corolla is ~$316/month, 15.8% of income
    assert flow["affordability"]["risk_level"] == "medium"
    assert flow["preapproval"]["likelihood_status"] == "Unlikely"
    assert flow["preapproval"]["income_ratio"]["status"] == "issue"
