"""API tests for /recruiters."""

import httpx
import pytest
from sqlalchemy import func, select

from conftest import mock_random_user_client, random_user_payload
from main import app
from talent.models import Company, Job, Recruiter
from talent.services.random_user import get_random_user_client
from talent.services.seed import seed_database


async def count(session_factory, model) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(model))


def embedded_recruiters(body):
    return body["_embedded"]["recruiters"]


@pytest.fixture
def random_user(client):
    """Answer /recruiters/randomUser from a handler set by the test."""

    def install(handler):
        app.dependency_overrides[get_random_user_client] = lambda: mock_random_user_client(handler)

    return install


class TestListRecruiters:
    async def test_entity_projection(self, client, seeded):
        response = await client.get("/recruiters")
        body = response.json()
        recruiters = embedded_recruiters(body)

        assert [r["name"] for r in recruiters] == ["Barak Itzhaki", "Paul Pogba"]
        assert recruiters[0]["id"] == 1
        assert recruiters[0]["_links"]["self"]["href"] == "http://testserver/recruiters/1/info"
        assert recruiters[0]["_links"]["recruiters"]["href"] == "http://testserver/recruiters"
        assert body["_links"]["self"]["href"] == "http://testserver/recruiters"

    async def test_info_projection(self, client, seeded):
        response = await client.get("/recruiters/info")
        pogba = embedded_recruiters(response.json())[1]

        assert "id" not in pogba
        assert pogba["companies"] == [{"name": "Twitter"}]
        assert [job["title"] for job in pogba["jobs"]] == [
            "Java Developer",
            "CPP Developer",
            "Front-end Developer",
        ]
        assert pogba["jobs"][0]["company"] == {"name": "Twitter"}
        assert pogba["_links"]["recruiters"]["href"] == "http://testserver/recruiters/info"

    async def test_single_recruiter(self, client, seeded):
        response = await client.get("/recruiters/1/info")
        body = response.json()
        assert body["email"] == "barakItzhaki@gmail.com"
        assert [job["title"] for job in body["jobs"]] == ["Java Developer", "Devops"]

    async def test_missing_recruiter(self, client, seeded):
        response = await client.get("/recruiters/42/info")
        assert response.status_code == 404
        assert response.json()["message"] == "Error: recruiter id 42 was not found!"
        assert response.json()["details"] == "uri=/recruiters/42/info"

    async def test_by_company_ignores_case(self, client, seeded):
        response = await client.get("/recruiters/bycompany/twit")
        recruiters = embedded_recruiters(response.json())
        assert [r["name"] for r in recruiters] == ["Paul Pogba"]

    async def test_by_company_no_match(self, client, seeded):
        response = await client.get("/recruiters/bycompany/Google")
        assert response.status_code == 200
        assert embedded_recruiters(response.json()) == []


class TestCreateRecruiter:
    async def test_created(self, client, seeded):
        response = await client.post(
            "/recruiters", json={"name": "Zlatan Ibrahimovic", "email": "zlatan@walla.com"}
        )

        assert response.status_code == 201
        assert response.headers["location"] == "http://testserver/recruiters/3/info"
        body = response.json()
        assert body["companies"] == []
        assert body["jobs"] == []

    async def test_duplicate_email_conflicts(self, client, seeded, session_factory):
        response = await client.post(
            "/recruiters", json={"name": "Someone Else", "email": "paulPogba@hotmail.co.il"}
        )

        assert response.status_code == 409
        assert response.json()["message"] == (
            "Recruiter with email paulPogba@hotmail.co.il already exists."
        )
        assert await count(session_factory, Recruiter) == 2

    async def test_invalid_email(self, client, session_factory):
        response = await client.post("/recruiters", json={"name": "Nobody", "email": "nobody"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email address"
        assert await count(session_factory, Recruiter) == 0


class TestCreateRandomRecruiter:
    async def test_created_from_first_result(self, client, random_user):
        random_user(lambda request: httpx.Response(200, json=random_user_payload()))

        response = await client.post("/recruiters/randomUser")

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Jane Doe"
        assert body["email"] == "jane.doe@example.com"
        assert response.headers["location"] == "http://testserver/recruiters/1/info"

    async def test_existing_email_conflicts(self, client, seeded, random_user, session_factory):
        random_user(
            lambda request: httpx.Response(
                200, json=random_user_payload(email="barakItzhaki@gmail.com")
            )
        )

        response = await client.post("/recruiters/randomUser")

        assert response.status_code == 409
        assert await count(session_factory, Recruiter) == 2

    async def test_upstream_failure(self, client, random_user, session_factory):
        random_user(lambda request: httpx.Response(503))

        response = await client.post("/recruiters/randomUser")

        assert response.status_code == 502
        assert response.json()["message"] == "Random user API returned HTTP 503"
        assert response.json()["details"] == "uri=/recruiters/randomUser"
        assert await count(session_factory, Recruiter) == 0

    async def test_upstream_timeout(self, client, random_user):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        random_user(handler)

        response = await client.post("/recruiters/randomUser")
        assert response.status_code == 504


class TestUpdateRecruiter:
    async def test_rename(self, client, seeded):
        response = await client.put("/recruiters/2", json={"name": "Paul Labile Pogba"})

        assert response.status_code == 200
        assert response.json()["name"] == "Paul Labile Pogba"
        assert response.json()["email"] == "paulPogba@hotmail.co.il"

        jobs = (await client.get("/jobs/byrecruiter/Labile")).json()["_embedded"]["jobs"]
        assert len(jobs) == 3

    async def test_unknown_fields_ignored(self, client, seeded):
        response = await client.put("/recruiters/2", json={"age": "30", "name": 7})

        assert response.status_code == 200
        assert response.json()["name"] == "Paul Pogba"

    async def test_email_taken_by_other_recruiter(self, client, seeded):
        response = await client.put("/recruiters/2", json={"email": "barakItzhaki@gmail.com"})

        assert response.status_code == 409
        assert (await client.get("/recruiters/2/info")).json()["email"] == "paulPogba@hotmail.co.il"

    async def test_keeping_own_email_is_allowed(self, client, seeded):
        response = await client.put(
            "/recruiters/2", json={"name": "Pogba", "email": "paulPogba@hotmail.co.il"}
        )
        assert response.status_code == 200

    async def test_invalid_email(self, client, seeded):
        response = await client.put("/recruiters/2", json={"email": "not valid"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email address"

    async def test_overlong_name_rejected(self, client, seeded):
        response = await client.put("/recruiters/2", json={"name": "P" * 256})

        assert response.status_code == 400
        assert response.json()["message"] == "String should have at most 255 characters"
        assert (await client.get("/recruiters/2/info")).json()["name"] == "Paul Pogba"

    async def test_missing_recruiter(self, client, seeded):
        response = await client.put("/recruiters/99", json={"name": "Ghost"})
        assert response.status_code == 404


class TestDeleteRecruiter:
    async def test_deletes_recruiter_and_jobs(self, client, seeded, session_factory):
        response = await client.delete("/recruiters/1")

        assert response.status_code == 204
        assert (await client.get("/recruiters/1/info")).status_code == 404

        jobs = (await client.get("/jobs")).json()["_embedded"]["jobs"]
        assert [job["recruiter"]["name"] for job in jobs] == ["Paul Pogba"] * 3
        assert await count(session_factory, Company) == 2

        async with session_factory() as session:
            facebook = await session.scalar(select(Company).where(Company.name == "Facebook"))
            assert facebook.recruiters == set()
            assert facebook.jobs == []

    async def test_other_recruiters_untouched(self, client, seeded, session_factory):
        await client.delete("/recruiters/1")

        pogba = (await client.get("/recruiters/2/info")).json()
        assert pogba["companies"] == [{"name": "Twitter"}]
        assert len(pogba["jobs"]) == 3
        assert await count(session_factory, Job) == 3

    async def test_missing_recruiter(self, client, seeded):
        response = await client.delete("/recruiters/99")
        assert response.status_code == 404
        assert response.json()["message"] == "Error: recruiter id 99 was not found!"


class TestSeed:
    async def test_seed_runs_once(self, session_factory):
        async with session_factory() as session:
            assert await seed_database(session) is True
        async with session_factory() as session:
            assert await seed_database(session) is False

        assert await count(session_factory, Company) == 2
        assert await count(session_factory, Recruiter) == 2
        assert await count(session_factory, Job) == 5
