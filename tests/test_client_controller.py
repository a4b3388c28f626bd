"""
Tests for the client state controller.

Happy paths run against the real app through httpx.ASGITransport; failure
paths use httpx.MockTransport.
"""

from __future__ import annotations

import itertools

import httpx
import pytest

from src.api.dependencies import get_todo_repository
from src.client.api_client import TodoApiClient
from src.client.cli import build_parser, run_command
from src.client.controller import TodoController
from src.client.state import TodoState
from src.core.exceptions import ErrorCode, TodoClientError
from src.main import app
from src.models.domain.todo import TodoResponse


@pytest.fixture
def make_api(repository):
    """Factory for API clients routed to the app backed by the in-memory store."""
    async def override_repository():
        yield repository

    app.dependency_overrides[get_todo_repository] = override_repository

    def factory() -> TodoApiClient:
        return TodoApiClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))

    try:
        yield factory
    finally:
        app.dependency_overrides.clear()


def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


def failing_api(status_code: int = 500) -> TodoApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": "storage offline"})

    return TodoApiClient(base_url="http://testserver", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_add_appends_server_record_and_clears_draft(make_api):
    async with make_api() as api:
        controller = TodoController(api, id_factory=sequential_ids())
        await controller.load()

        controller.set_draft("buy milk")
        await controller.submit()

        assert controller.state.draft == ""
        assert controller.state.todos == (TodoResponse(id="id-1", todo="buy milk", isCompleted=False),)
        assert [item.id for item in await api.fetch_todos()] == ["id-1"]


@pytest.mark.asyncio
async def test_add_rejects_short_text(make_api):
    async with make_api() as api:
        controller = TodoController(api)
        await controller.load()

        controller.set_draft("hi")
        await controller.add()

        assert controller.state.todos == ()
        assert controller.state.draft == "hi"
        assert await api.fetch_todos() == []


@pytest.mark.asyncio
async def test_edit_then_update_replaces_local_record(make_api):
    async with make_api() as api:
        await api.create_todo("a1", "buy milk", is_completed=True)
        controller = TodoController(api)
        await controller.load()

        controller.start_edit("a1")
        assert controller.view().submit_label == "Update"
        controller.set_draft("buy oat milk")
        await controller.submit()

        assert controller.state.edit_id is None
        assert controller.state.draft == ""
        assert controller.state.todos == (TodoResponse(id="a1", todo="buy oat milk", isCompleted=True),)


@pytest.mark.asyncio
async def test_toggle_complete_persists(make_api):
    async with make_api() as api:
        await api.create_todo("a1", "buy milk")
        controller = TodoController(api)
        await controller.load()

        await controller.toggle_complete("a1")

        assert controller.state.todos[0].isCompleted is True
        assert (await api.fetch_todos())[0].isCompleted is True


@pytest.mark.asyncio
async def test_delete_removes_locally_and_clears_marker(make_api):
    async with make_api() as api:
        await api.create_todo("a1", "buy milk")
        await api.create_todo("b2", "call mom")
        controller = TodoController(api)
        await controller.load()

        await controller.delete("a1")

        assert [item.id for item in controller.state.todos] == ["b2"]
        assert controller.state.deleting_id is None


@pytest.mark.asyncio
async def test_filter_is_local_only(make_api):
    async with make_api() as api:
        await api.create_todo("a1", "buy milk", is_completed=True)
        await api.create_todo("b2", "call mom")
        controller = TodoController(api)
        await controller.load()

        controller.toggle_filter()

        assert [row.id for row in controller.view().rows] == ["b2"]
        assert len(controller.state.todos) == 2
        assert len(await api.fetch_todos()) == 2


@pytest.mark.asyncio
async def test_failed_toggle_is_not_rolled_back():
    initial = TodoState(todos=(TodoResponse(id="a1", todo="buy milk"),))
    async with failing_api() as api:
        controller = TodoController(api, initial_state=initial)

        await controller.toggle_complete("a1")

        assert controller.state.todos[0].isCompleted is True


@pytest.mark.asyncio
async def test_failed_delete_keeps_record_and_clears_marker():
    initial = TodoState(todos=(TodoResponse(id="a1", todo="buy milk"),))
    async with failing_api() as api:
        controller = TodoController(api, initial_state=initial)

        await controller.delete("a1")

        assert [item.id for item in controller.state.todos] == ["a1"]
        assert controller.state.deleting_id is None


@pytest.mark.asyncio
async def test_failed_add_keeps_draft():
    async with failing_api() as api:
        controller = TodoController(api)
        controller.set_draft("buy milk")

        await controller.add()

        assert controller.state.todos == ()
        assert controller.state.draft == "buy milk"


@pytest.mark.asyncio
async def test_failed_load_leaves_state_empty():
    async with failing_api() as api:
        controller = TodoController(api)

        await controller.load()

        assert controller.state == TodoState()


@pytest.mark.asyncio
async def test_api_client_surfaces_server_error_message():
    async with failing_api() as api:
        with pytest.raises(TodoClientError) as exc_info:
            await api.fetch_todos()

    assert exc_info.value.status_code == 500
    assert "storage offline" in exc_info.value.message


@pytest.mark.asyncio
async def test_update_of_missing_id_returns_none(make_api):
    async with make_api() as api:
        assert await api.update_todo("ghost", {"todo": "anything"}) is None


@pytest.mark.asyncio
async def test_cli_add_and_hide_finished(make_api):
    async with make_api() as api:
        await api.create_todo("a1", "already done", is_completed=True)

        args = build_parser().parse_args(["--hide-finished", "add", "water plants"])
        output = await run_command(args, api)

    assert "water plants" in output
    assert "already done" not in output


@pytest.mark.asyncio
async def test_cli_edit_unknown_id_adds_nothing(make_api):
    async with make_api() as api:
        args = build_parser().parse_args(["edit", "ghost", "new text here"])
        output = await run_command(args, api)

        assert await api.fetch_todos() == []
    assert "No Todos to display" in output


def api_answering(status_code: int, body) -> TodoApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return TodoApiClient(base_url="http://testserver", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_error_body_that_is_a_list_is_wrapped():
    async with api_answering(500, ["unexpected", "shape"]) as api:
        with pytest.raises(TodoClientError) as exc_info:
            await api.fetch_todos()

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_malformed_record_is_wrapped():
    async with api_answering(200, [{"id": "a1"}]) as api:
        with pytest.raises(TodoClientError) as exc_info:
            await api.fetch_todos()

    assert exc_info.value.error_code == ErrorCode.INVALID_RESPONSE


@pytest.mark.asyncio
async def test_malformed_update_answer_is_wrapped():
    async with api_answering(200, {"todo": 42}) as api:
        with pytest.raises(TodoClientError) as exc_info:
            await api.update_todo("a1", {"todo": "anything"})

    assert exc_info.value.error_code == ErrorCode.INVALID_RESPONSE


@pytest.mark.asyncio
async def test_controller_logs_malformed_list_and_keeps_state():
    async with api_answering(200, [{"id": "a1"}]) as api:
        controller = TodoController(api)

        await controller.load()

        assert controller.state == TodoState()
