"""Тесты API коммунальных платежей."""
from decimal import Decimal

from tests.conftest import create_department, create_utility_payment


class TestUtilityPayments:

    def test_create_computes_total(self, client):
        alpha = create_department(client)
        payment = create_utility_payment(client, alpha["id"], payment_month="2024-01-20")
        assert Decimal(payment["total_amount"]) == Decimal("100")
        assert Decimal(payment["consumption"]) == Decimal("50")
        assert isinstance(payment["price_per_unit"], str)
        assert payment["payment_month"] == "2024-01-01"
        assert payment["department_name"] == "Alpha"

    def test_wrong_total_rejected(self, client):
        alpha = create_department(client)
        resp = client.post(
            "/api/v1/utility-payments",
            json={
                "department_id": alpha["id"],
                "payment_type": "Electricity",
                "previous_value": 100,
                "current_value": 150,
                "price_per_unit": 2,
                "total_amount": 55,
                "payment_month": "2024-01-01",
            },
        )
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "VALIDATION_ERROR"

    def test_list_and_delete(self, client):
        alpha = create_department(client)
        payment = create_utility_payment(client, alpha["id"])
        create_utility_payment(client, alpha["id"], payment_type="Water")

        data = client.get("/api/v1/utility-payments", params={"payment_type": "Water"}).json()
        assert data["total"] == 1

        assert client.delete(f"/api/v1/utility-payments/{payment['id']}").status_code == 204
        assert client.get(f"/api/v1/utility-payments/{payment['id']}").status_code == 404


class TestLatestReading:

    def test_not_found(self, client):
        alpha = create_department(client)
        resp = client.get(f"/api/v1/utility-payments/latest/{alpha['id']}/Electricity")
        assert resp.status_code == 200
        assert resp.json()["found"] is False

    def test_latest(self, client):
        alpha = create_department(client)
        create_utility_payment(client, alpha["id"], "2024-01-01", 100, 150)
        create_utility_payment(client, alpha["id"], "2024-02-01", 150, 190)

        data = client.get(f"/api/v1/utility-payments/latest/{alpha['id']}/Electricity").json()

        assert data["found"] is True
        assert Decimal(data["current_value"]) == Decimal("190")
        assert Decimal(data["price_per_unit"]) == Decimal("2")


class TestUtilityStatistics:

    def test_monthly_series(self, client):
        alpha = create_department(client)
        create_utility_payment(client, alpha["id"], "2024-01-01", 0, 50)
        create_utility_payment(client, alpha["id"], "2024-01-01", 50, 75)
        create_utility_payment(client, alpha["id"], "2024-02-01", 75, 115)

        data = client.get(
            "/api/v1/utility-payments/statistics",
            params={"payment_type": "Electricity", "department_id": alpha["id"]},
        ).json()

        assert [(p["period"], Decimal(p["value"])) for p in data["expenses"]] == [
            ("2024-01", Decimal("150")),
            ("2024-02", Decimal("80")),
        ]
        assert [Decimal(p["value"]) for p in data["consumption"]] == [Decimal("75"), Decimal("40")]

    def test_payment_type_required(self, client):
        assert client.get("/api/v1/utility-payments/statistics").status_code == 422
