"""Tests for switchyard.cli — entrypoint, ``routes`` and ``call`` commands."""

import json
import logging
import sys
import types

import pytest

from switchyard.cli import main
from switchyard.http.response import Response
from switchyard.routing.router import Router


@pytest.fixture
def _fake_func_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake function module exposing a populated router."""
    router = Router()

    @router.get("/")
    async def index(request, params):
        return Response(body="home")

    @router.get("/users/(userId)")
    async def get_user(request, params):
        return Response(body={"id": params["userId"]}).with_header("X-Kind", "user")

    @router.post("/users")
    def create_user(request, params):
        return {"status": 201, "body": "created"}

    @router.get("/nodes/(nodeId)")
    async def get_node(request, params):
        return Response(status=404, body={"error": "unknown node"})

    mod = types.ModuleType("_fake_switchyard_func")
    mod.router = router  # type: ignore[attr-defined]
    mod.empty = Router()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_switchyard_func", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_call_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_call_missing_method(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "_fake_switchyard_func"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "switchyard" in captured.out


@pytest.mark.usefixtures("_fake_func_module")
class TestRoutesCommand:
    def test_lists_routes_in_dispatch_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_switchyard_func:router"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].split() == ["METHOD", "PATTERN", "HANDLER"]
        assert set(lines[1]) == {"-"}
        assert lines[2].split()[:2] == ["GET", "/"]
        assert lines[3].split()[:2] == ["GET", "/users/(userId)"]
        assert lines[4].split()[:2] == ["POST", "/users"]
        assert "get_user" in lines[3]

    def test_empty_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_switchyard_func:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_unresolvable_router(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_switchyard_func:missing"])
        assert exc_info.value.code == 2
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("_fake_func_module")
class TestCallCommand:
    def test_matched_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "_fake_switchyard_func", "GET", "users/42"])
        envelope = json.loads(capsys.readouterr().out)

        assert envelope == {"status": 200, "headers": {"X-Kind": "user"}, "body": {"id": "42"}}

    def test_absent_path_hits_root(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "_fake_switchyard_func", "GET"])
        envelope = json.loads(capsys.readouterr().out)

        assert envelope == {"status": 200, "body": "home"}

    def test_plain_dict_response(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "_fake_switchyard_func", "POST", "users"])
        envelope = json.loads(capsys.readouterr().out)

        assert envelope == {"status": 201, "body": "created"}

    def test_not_found_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "_fake_switchyard_func", "DELETE", "users/42"])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out) == {"status": 404, "body": None}

    def test_handler_404_still_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["call", "_fake_switchyard_func", "GET", "nodes/gamma"])
        envelope = json.loads(capsys.readouterr().out)

        assert envelope == {"status": 404, "body": {"error": "unknown node"}}

    def test_unresolvable_router(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "nonexistent_module_xyz", "GET"])
        assert exc_info.value.code == 2

    def test_verbose_logs_dispatch(self, caplog: pytest.LogCaptureFixture) -> None:
        try:
            with caplog.at_level(logging.DEBUG, logger="switchyard"):
                main(["-v", "call", "_fake_switchyard_func", "GET", "users/42"])
        finally:
            logging.getLogger("switchyard").setLevel(logging.NOTSET)

        messages = [record.getMessage() for record in caplog.records]
        assert "Dispatching GET 'users/42' (matched=True)" in messages
        assert any("matched GET /users/(userId)" in m for m in messages)
