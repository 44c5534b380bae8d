"""
Integration Tests for Deals API.

Covers the deal pipeline and the follow-up task created when a deal
enters the proposal stage.
"""

import time

import pytest
from httpx import AsyncClient

DAY_MS = 24 * 60 * 60 * 1000


async def _proposal_tasks(client: AsyncClient, headers: dict, deal_id: str) -> list[dict]:
    response = await client.get("/activities", params={"deal_id": deal_id}, headers=headers)
    assert response.status_code == 200, response.text
    return [row for row in response.json() if row["title"] == "Enviar propuesta"]


class TestDealCrud:

    @pytest.mark.asyncio
    async def test_create_defaults_stage(self, client: AsyncClient, auth_headers, api):
        """Should start new deals in the first pipeline stage."""
        created = api.assert_ok(
            await client.post("/deals", json={"id": "d1", "title": "Big sale", "amount": 1500.5}, headers=auth_headers),
            201,
        )

        assert created["stage"] == "nuevo"
        assert created["amount"] == 1500.5
        assert created["account_id"] is None

    @pytest.mark.asyncio
    async def test_unknown_stage_rejected(self, client: AsyncClient, auth_headers, api):
        response = await client.post("/deals", json={"title": "X", "stage": "limbo"}, headers=auth_headers)

        api.assert_validation_error(response, field="stage")

    @pytest.mark.asyncio
    async def test_unknown_contact_rejected(self, client: AsyncClient, auth_headers, api):
        response = await client.post("/deals", json={"title": "X", "contact_id": "ghost"}, headers=auth_headers)

        api.assert_error(response, 400, "invalid_contact_id")

    @pytest.mark.asyncio
    async def test_member_can_manage_deals(self, client: AsyncClient, member_headers, api):
        """Should let plain members create and update deals."""
        api.assert_ok(await client.post("/deals", json={"id": "d1", "title": "Mine"}, headers=member_headers), 201)
        api.assert_ok(await client.patch("/deals/d1", json={"stage": "calificado"}, headers=member_headers))

        fetched = api.assert_ok(await client.get("/deals/d1", headers=member_headers))
        assert fetched["stage"] == "calificado"


class TestProposalAutomation:

    @pytest.mark.asyncio
    async def test_entering_proposal_creates_task(self, client: AsyncClient, auth_headers, api):
        """Should schedule "Enviar propuesta" one day out when the stage becomes propuesta."""
        await client.post("/deals", json={"id": "d1", "title": "Big sale"}, headers=auth_headers)
        before = int(time.time() * 1000)

        response = await client.patch("/deals/d1", json={"stage": "propuesta"}, headers=auth_headers)
        assert api.assert_ok(response) == {"ok": True}

        tasks = await _proposal_tasks(client, auth_headers, "d1")
        assert len(tasks) == 1
        task = tasks[0]
        assert task["type"] == "task"
        assert task["status"] == "open"
        assert task["deal_id"] == "d1"
        assert before + DAY_MS <= task["due_date"] <= int(time.time() * 1000) + DAY_MS

    @pytest.mark.asyncio
    async def test_staying_in_proposal_does_not_duplicate(self, client: AsyncClient, auth_headers, api):
        """Should only react to a stage change, not to later edits."""
        await client.post("/deals", json={"id": "d1", "title": "Big sale"}, headers=auth_headers)
        await client.patch("/deals/d1", json={"stage": "propuesta"}, headers=auth_headers)
        await client.patch("/deals/d1", json={"stage": "propuesta", "amount": 10}, headers=auth_headers)
        await client.patch("/deals/d1", json={"title": "Bigger sale"}, headers=auth_headers)

        assert len(await _proposal_tasks(client, auth_headers, "d1")) == 1

    @pytest.mark.asyncio
    async def test_created_in_proposal_has_no_task(self, client: AsyncClient, auth_headers, api):
        """Should not fire on create."""
        await client.post(
            "/deals", json={"id": "d1", "title": "Big sale", "stage": "propuesta"}, headers=auth_headers,
        )

        assert await _proposal_tasks(client, auth_headers, "d1") == []

    @pytest.mark.asyncio
    async def test_other_stages_create_nothing(self, client: AsyncClient, auth_headers, api):
        await client.post("/deals", json={"id": "d1", "title": "Big sale"}, headers=auth_headers)
        await client.patch("/deals/d1", json={"stage": "negociacion"}, headers=auth_headers)

        assert await _proposal_tasks(client, auth_headers, "d1") == []

    @pytest.mark.asyncio
    async def test_member_sees_own_proposal_task(self, client: AsyncClient, member_headers, api):
        """The task is created by the member who moved the deal, so it is visible to them."""
        await client.post("/deals", json={"id": "d1", "title": "Mine"}, headers=member_headers)
        await client.patch("/deals/d1", json={"stage": "propuesta"}, headers=member_headers)

        assert len(await _proposal_tasks(client, member_headers, "d1")) == 1
