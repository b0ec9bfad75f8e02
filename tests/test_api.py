"""API tests for the scoring endpoints.

Handlers are stateless, so no test doubles are needed.

Covers:
    - Response envelope {"data": ...} and camelCase payloads
    - Priority / effort / collaboration endpoints
    - Ticket scoring with server-side effort
    - Points distribution incl. 400 on empty assignees
    - Rankings limit and filters
    - 422 for malformed payloads
"""

from uuid import uuid4


class TestHealth:

    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers


class TestScoringEndpoints:

    def test_priority_compute(self, client) -> None:
        response = client.post("/priority/compute", json={
            "redFlags": {},
            "impact": {"lostRevenue": True, "coreProcesses": True},
            "urgency": "8-30d",
        })
        assert response.status_code == 200
        assert response.json() == {
            "data": {"redFlag": False, "impact": 4, "urgency": 2, "final": 6, "priority": "P2"}
        }

    def test_priority_empty_body_fields(self, client) -> None:
        response = client.post("/priority/compute", json={})
        assert response.status_code == 200
        assert response.json()["data"]["priority"] == "P3"

    def test_priority_unknown_urgency(self, client) -> None:
        response = client.post("/priority/compute", json={"urgency": "yesterday"})
        assert response.status_code == 200
        assert response.json()["data"]["urgency"] == 0

    def test_priority_malformed_flag(self, client) -> None:
        response = client.post("/priority/compute", json={"redFlags": {"outage": "sort of"}})
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "redFlags.outage" in error["message"]

    def test_effort_compute(self, client) -> None:
        response = client.post("/effort/compute", json={
            "development": {"versionControl": True},
            "operations": {"offHours": True, "uat": True},
        })
        assert response.status_code == 200
        assert response.json() == {"data": {"baseScore": 3}}

    def test_collaboration_compute(self, client) -> None:
        response = client.post("/collaboration/compute", json={"baseScore": 5, "assigneeCount": 3})
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["bonusPerPerson"] == 4
        assert data["totalPool"] == 17
        assert data["pointsPerPerson"] == 5.67
        assert data["level"] == "Good collaboration"

    def test_collaboration_negative_count(self, client) -> None:
        response = client.post("/collaboration/compute", json={"baseScore": 8, "assigneeCount": -2})
        data = response.json()["data"]
        assert data["assigneeCount"] == 0
        assert data["pointsPerPerson"] == 8


class TestTicketScoring:

    def test_score_ticket(self, client) -> None:
        response = client.post("/tickets/score", json={
            "ticket": {"title": "Payments gateway timing out"},
            "priorityInput": {"redFlags": {"paymentsFailing": True}},
            "effortData": {"security": {"accessControl": True}, "data": {"migration": True}},
            "effortScore": 9,
        })
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["priority"] == "P0"
        assert data["finalScore"] == 10
        assert data["redFlag"] is True
        assert data["effortScore"] == 2

    def test_ticket_without_questionnaire(self, client) -> None:
        response = client.post("/tickets/score", json={"ticket": {"title": "Printer jam"}})
        data = response.json()["data"]
        assert data["priority"] == "P3"
        assert data["effortScore"] == 0


class TestPointsAndRankings:

    def test_distribute_points(self, client) -> None:
        alice, bob = str(uuid4()), str(uuid4())
        response = client.post("/points/distribute", json={
            "ticketId": str(uuid4()),
            "effortData": {
                "development": {"versionControl": True, "externalService": True, "internalIntegration": True},
                "security": {"legalCompliance": True, "accessControl": True, "personalData": True},
                "data": {"migration": True, "dataPreparation": True, "encryption": True},
                "operations": {"offHours": True, "training": True, "uat": True},
            },
            "effortScore": 3,
            "assigneeIds": [alice, bob],
        })
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["effortScore"] == 12
        assert data["awards"] == [
            {"userId": alice, "points": 8},
            {"userId": bob, "points": 8},
        ]

    def test_distribute_without_assignees(self, client) -> None:
        response = client.post("/points/distribute", json={"ticketId": str(uuid4()), "assigneeIds": []})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_rankings(self, client) -> None:
        alice, bob = str(uuid4()), str(uuid4())
        response = client.post("/rankings", json={
            "users": [{"id": alice, "name": "Alice"}, {"id": bob, "name": "Bob"}],
            "awards": [
                {"userId": bob, "ticketId": str(uuid4()), "points": 16 / 3, "ticketCreatedAt": "2026-05-03T10:00:00"},
                {"userId": alice, "ticketId": str(uuid4()), "points": 2, "ticketCreatedAt": "2025-12-30T10:00:00"},
            ],
            "year": 2026,
        })
        rows = response.json()["data"]

        assert response.status_code == 200
        assert [r["name"] for r in rows] == ["Bob", "Alice"]
        assert rows[0]["totalPoints"] == 5.33
        assert rows[0]["rank"] == 1
        assert rows[1]["totalPoints"] == 0

    def test_rankings_limit(self, client) -> None:
        users = [{"id": str(uuid4()), "name": f"user-{i}"} for i in range(15)]
        response = client.post("/rankings", json={"users": users})
        assert len(response.json()["data"]) == 10

        response = client.post("/rankings", json={"users": users, "limit": 3})
        assert len(response.json()["data"]) == 3

    def test_rankings_invalid_month(self, client) -> None:
        response = client.post("/rankings", json={"month": 13, "year": 2026})
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "month" in error["message"]
