"""
End-to-end flows through the full application.

Uses the real rules.yaml seed accounts and the real dependency graph.
"""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

FORM = {"Content-Type": "application/x-www-form-urlencoded"}


def _balance(client: TestClient, account_number: str) -> int:
    response = client.get(f"/api/accounts/{account_number}")
    assert response.status_code == 200
    return int(response.json()["balance_pence"])


def _total(client: TestClient) -> int:
    return sum(a["balance_pence"] for a in client.get("/api/accounts").json()["accounts"])


class TestStartup:
    def test_health(self, app_client: TestClient) -> None:
        response = app_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_seed_accounts_loaded(self, app_client: TestClient) -> None:
        data = app_client.get("/api/accounts").json()

        assert data["count"] == 4
        assert data["accounts"][2]["full_name"] == "Michael David Thompson"
        assert data["accounts"][2]["balance_display"] == "£5000.00"

    def test_banking_page(self, app_client: TestClient) -> None:
        body = app_client.get("/").text

        assert "Security Thinking Bank" in body
        assert "ACC004 - Emma Charlotte Wilson" in body


class TestTransferFlow:
    def test_transfer_visible_on_every_surface(self, app_client: TestClient) -> None:
        response = app_client.post(
            "/transfer",
            content="from_account=ACC002&to_account=ACC004&amount=750.00",
            headers=FORM,
        )
        assert response.status_code == 200

        # Full balance moved; the source is now empty
        assert _balance(app_client, "ACC002") == 0
        assert _balance(app_client, "ACC004") == 200000
        assert "£2000.00" in app_client.get("/").text

        rejected = app_client.post(
            "/api/transfers",
            json={"from_account": "ACC002", "to_account": "ACC004", "amount": "0.01"},
        )
        assert rejected.status_code == 400
        assert rejected.json()["detail"]["errors"][0]["code"] == "insufficient_funds"
        assert _balance(app_client, "ACC002") == 0

    def test_money_is_conserved(self, app_client: TestClient) -> None:
        before = _total(app_client)

        for body in (
            {"from_account": "ACC001", "to_account": "ACC002", "amount": "12.34"},
            {"from_account": "ACC003", "to_account": "ACC001", "amount": ".5"},
            {"from_account": "ACC001", "to_account": "ACC001", "amount": "1.00"},
            {"from_account": "ACC004", "to_account": "ACC003", "amount": "999999"},
        ):
            app_client.post("/api/transfers", json=body)

        after = _total(app_client)
        assert after == before

    def test_rejections_reach_security_log(
        self, app_client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="security"):
            app_client.post(
                "/transfer",
                content="from_account=ACC001&to_account=ACC001&amount=1.00",
                headers=FORM,
            )

        assert "[SECURITY] Transfer blocked: Attempted self-transfer: ACC001" in caplog.text


class TestProfileFlow:
    def test_update_then_read_back(self, app_client: TestClient) -> None:
        response = app_client.put(
            "/api/accounts/ACC003/profile",
            json={"full_name": "Michael Thompson", "address": "1 Princes Street"},
        )
        assert response.status_code == 200

        data = app_client.get("/api/accounts/ACC003").json()
        assert data["full_name"] == "Michael Thompson"
        assert data["address"] == "1 Princes Street"
        assert data["balance_pence"] == 500000

    def test_rejected_update_changes_nothing(self, app_client: TestClient) -> None:
        response = app_client.post(
            "/update-profile",
            content="account=ACC003&new_name=Valid&new_address=" + "A" * 64,
            headers=FORM,
        )
        assert response.status_code == 400

        data = app_client.get("/api/accounts/ACC003").json()
        assert data["full_name"] == "Michael David Thompson"
