"""Unit tests for the resource clients."""

import json

import httpx
import pytest

from tenantcrm.client.http import ApiError, IdCollisionError
from tenantcrm.client.resources import AccountsClient, ActivitiesClient, ContactsClient, TenantsClient


def _conflict(code: str) -> httpx.Response:
    return httpx.Response(409, json={"error": code, "message": "Resource already exists"})


class TestResourceRoutes:

    @pytest.mark.asyncio
    async def test_routes(self, make_api) -> None:
        api, transport = make_api(lambda request: httpx.Response(200, json={"ok": True}))
        contacts = ContactsClient(api)

        await contacts.get("c1")
        await contacts.update("c1", {"name": "Ana"})
        await contacts.delete("c1")

        assert [(r.method, r.url.path) for r in transport.requests] == [
            ("GET", "/contacts/c1"),
            ("PATCH", "/contacts/c1"),
            ("DELETE", "/contacts/c1"),
        ]
        assert json.loads(transport.requests[1].content) == {"name": "Ana"}
        await api.close()

    @pytest.mark.asyncio
    async def test_id_is_escaped(self, make_api) -> None:
        api, transport = make_api(lambda request: httpx.Response(200, json={}))

        await ContactsClient(api).get("a/b")

        assert transport.requests[0].url.raw_path == b"/contacts/a%2Fb"
        await api.close()

    @pytest.mark.asyncio
    async def test_list_drops_none_filters(self, make_api) -> None:
        api, transport = make_api(lambda request: httpx.Response(200, json=[{"id": "t1"}]))

        rows = await ActivitiesClient(api).list(deal_id="d1", status=None)

        assert rows == [{"id": "t1"}]
        assert dict(transport.requests[0].url.params) == {"deal_id": "d1"}
        await api.close()


class TestCreate:

    @pytest.mark.asyncio
    async def test_generates_id(self, make_api) -> None:
        api, transport = make_api(lambda request: httpx.Response(201, json=json.loads(request.content)))

        created = await AccountsClient(api).create({"name": "Acme"})

        assert len(created["id"]) == 32
        assert transport.last_json()["name"] == "Acme"
        await api.close()

    @pytest.mark.asyncio
    async def test_retries_generated_id_collision(self, make_api) -> None:
        responses = iter([_conflict("account_exists"), None])

        def handler(request: httpx.Request) -> httpx.Response:
            response = next(responses)
            return response or httpx.Response(201, json=json.loads(request.content))

        api, transport = make_api(handler)

        created = await AccountsClient(api).create({"name": "Acme"})

        assert len(transport.requests) == 2
        first_id = json.loads(transport.requests[0].content)["id"]
        assert created["id"] != first_id
        await api.close()

    @pytest.mark.asyncio
    async def test_gives_up_after_three_collisions(self, make_api) -> None:
        api, transport = make_api(lambda request: _conflict("account_exists"))

        with pytest.raises(IdCollisionError) as exc_info:
            await AccountsClient(api).create({"name": "Acme"})

        assert len(transport.requests) == 3
        assert exc_info.value.code == "account_exists"
        await api.close()

    @pytest.mark.asyncio
    async def test_caller_id_is_not_retried(self, make_api) -> None:
        api, transport = make_api(lambda request: _conflict("account_exists"))

        with pytest.raises(ApiError) as exc_info:
            await AccountsClient(api).create({"id": "a1", "name": "Acme"})

        assert not isinstance(exc_info.value, IdCollisionError)
        assert len(transport.requests) == 1
        await api.close()

    @pytest.mark.asyncio
    async def test_other_conflicts_are_not_retried(self, make_api) -> None:
        api, transport = make_api(lambda request: _conflict("account_has_contacts"))

        with pytest.raises(ApiError):
            await AccountsClient(api).create({"name": "Acme"})

        assert len(transport.requests) == 1
        await api.close()


class TestAccountsPaging:

    ACCOUNTS = [
        {"id": "a1", "name": "Acme", "website": "acme.com", "phone": None, "updated_at": 300},
        {"id": "a2", "name": "Beta", "website": None, "phone": "555-ACME", "updated_at": 200},
        {"id": "a3", "name": "Gamma", "website": None, "phone": None, "updated_at": 200},
        {"id": "a4", "name": "Delta", "website": None, "phone": None, "updated_at": 100},
    ]

    @pytest.fixture
    def accounts(self, make_api) -> AccountsClient:
        api, _ = make_api(lambda request: httpx.Response(200, json=self.ACCOUNTS))
        return AccountsClient(api)

    @pytest.mark.asyncio
    async def test_pages_with_cursor(self, accounts: AccountsClient) -> None:
        first = await accounts.list_paged(limit=2)
        second = await accounts.list_paged(cursor=first.next_cursor, limit=2)

        assert [a["id"] for a in first.items] == ["a1", "a2"]
        assert first.next_cursor == "a2"
        assert [a["id"] for a in second.items] == ["a3", "a4"]
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_search_matches_name_website_phone(self, accounts: AccountsClient) -> None:
        page = await accounts.list_paged(q="  ACME ")

        assert [a["id"] for a in page.items] == ["a1", "a2"]

    @pytest.mark.asyncio
    async def test_unknown_cursor_restarts(self, accounts: AccountsClient) -> None:
        page = await accounts.list_paged(cursor="gone", limit=1)

        assert [a["id"] for a in page.items] == ["a1"]


class TestActivitiesReminders:

    @pytest.mark.asyncio
    async def test_list_open_with_reminder(self, make_api) -> None:
        rows = [
            {"id": "t1", "remind_at_ms": 5000},
            {"id": "t2", "remind_at_ms": None},
            {"id": "t3", "remind_at_ms": 900},
        ]
        api, transport = make_api(lambda request: httpx.Response(200, json=rows))

        result = await ActivitiesClient(api).list_open_with_reminder(1000)

        assert [a["id"] for a in result] == ["t1"]
        assert dict(transport.requests[0].url.params) == {
            "limit": "200",
            "offset": "0",
            "status": "open",
            "remind_after": "1000",
        }
        await api.close()

    @pytest.mark.asyncio
    async def test_list_open_with_reminder_reads_every_page(self, make_api) -> None:
        rows = [{"id": f"t{n:03d}", "remind_at_ms": 5000} for n in range(450)]

        def handler(request: httpx.Request) -> httpx.Response:
            limit = int(request.url.params["limit"])
            offset = int(request.url.params["offset"])
            return httpx.Response(200, json=rows[offset:offset + limit])

        api, transport = make_api(handler)

        result = await ActivitiesClient(api).list_open_with_reminder(1000)

        assert len(result) == 450
        assert [r.url.params["offset"] for r in transport.requests] == ["0", "200", "400"]
        await api.close()


class TestTenantsClient:

    @pytest.mark.asyncio
    async def test_list_and_create(self, make_api) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return httpx.Response(201, json={"id": "ventas", "name": "Ventas", "created_at": 1})
            return httpx.Response(200, json={"items": [], "active_tenant": "demo"})

        api, transport = make_api(handler)
        tenants = TenantsClient(api)

        assert (await tenants.list())["active_tenant"] == "demo"
        assert (await tenants.create("Ventas", id="ventas"))["id"] == "ventas"
        assert transport.last_json() == {"name": "Ventas", "id": "ventas"}
        await api.close()

    @pytest.mark.asyncio
    async def test_membership_routes(self, make_api) -> None:
        api, transport = make_api(lambda request: httpx.Response(200, json={"ok": True}))
        tenants = TenantsClient(api)

        await tenants.invite("luis@example.com", role="admin")
        await tenants.accept_invitation("tok", password="secret1")
        await tenants.change_role("u 1", "member")
        await tenants.remove_member("u2")

        assert [(r.method, r.url.raw_path.decode()) for r in transport.requests] == [
            ("POST", "/tenants/invitations"),
            ("POST", "/invitations/accept"),
            ("PATCH", "/tenants/members/u%201"),
            ("DELETE", "/tenants/members/u2"),
        ]
        assert json.loads(transport.requests[0].content) == {"email": "luis@example.com", "role": "admin"}
        assert json.loads(transport.requests[1].content) == {"token": "tok", "password": "secret1"}
        assert json.loads(transport.requests[2].content) == {"role": "member"}
        await api.close()


class TestListAll:

    @pytest.mark.asyncio
    async def test_stops_after_short_page(self, make_api) -> None:
        rows = [{"id": f"c{n}"} for n in range(5)]

        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            return httpx.Response(200, json=rows[offset:offset + 2])

        api, transport = make_api(handler)

        result = await ContactsClient(api).list_all(page_size=2, account_id="a1")

        assert [c["id"] for c in result] == ["c0", "c1", "c2", "c3", "c4"]
        assert [r.url.params["offset"] for r in transport.requests] == ["0", "2", "4"]
        assert all(r.url.params["account_id"] == "a1" for r in transport.requests)
        await api.close()

    @pytest.mark.asyncio
    async def test_exact_multiple_needs_one_empty_page(self, make_api) -> None:
        rows = [{"id": f"c{n}"} for n in range(4)]

        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            return httpx.Response(200, json=rows[offset:offset + 2])

        api, transport = make_api(handler)

        result = await ContactsClient(api).list_all(page_size=2)

        assert len(result) == 4
        assert len(transport.requests) == 3
        await api.close()
