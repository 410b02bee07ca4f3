"""
Person endpoint tests
"""

import pytest

from services.persons_service import email_domain_pattern


def person_row(person_id, first_name, last_name, email):
    return {
        "Person_id": person_id,
        "first_name": first_name,
        "last_name": last_name,
        "job_title": None,
        "email": email,
        "phone_number": None,
        "role": "Sales",
        "zone_name": "EU",
    }


class TestPersonsByDomain:

    @pytest.mark.asyncio
    async def test_filters_on_email_suffix(self, client, db):
        db.script([
            person_row(2, "Alice", "Martin", "alice@example.com"),
            person_row(1, "Bob", "Durand", "bob@example.com"),
        ])

        response = await client.get("/api/persons/by-domain", params={"domain": "example.com"})

        assert response.status_code == 200
        assert [p["first_name"] for p in response.json()] == ["Alice", "Bob"]
        method, query, args = db.calls[0]
        assert "ORDER BY first_name, last_name" in query
        assert args == ("%@example.com",)

    @pytest.mark.asyncio
    async def test_domain_is_required(self, client, fake_pool):
        response = await client.get("/api/persons/by-domain")

        assert response.status_code == 400
        assert response.json() == {"error": "Domain parameter is required"}
        assert fake_pool.acquired == 0

    @pytest.mark.asyncio
    async def test_empty_result(self, client, db):
        db.script([])

        response = await client.get("/api/persons/by-domain", params={"domain": "nowhere.test"})

        assert response.status_code == 200
        assert response.json() == []

    def test_like_wildcards_are_escaped(self):
        assert email_domain_pattern("ex_ample.com") == "%@ex\\_ample.com"
        assert email_domain_pattern("100%.com") == "%@100\\%.com"


class TestGetPerson:

    @pytest.mark.asyncio
    async def test_returns_person(self, client, db):
        db.script(person_row(4, "Carla", "Rossi", "carla@example.com"))

        response = await client.get("/api/persons/4")

        assert response.status_code == 200
        assert response.json() == person_row(4, "Carla", "Rossi", "carla@example.com")
        assert db.calls[0][2] == (4,)

    @pytest.mark.asyncio
    async def test_missing_person_is_404(self, client, db):
        db.script(None)

        response = await client.get("/api/persons/404")

        assert response.status_code == 404
        assert response.json() == {"error": "Person not found"}
