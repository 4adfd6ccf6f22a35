"""Tests for CLIRunner command routing and error handling."""

import logging
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from template_gallery import __version__
from template_gallery.cli import runner
from template_gallery.exceptions import InstallationError


@pytest.fixture(autouse=True)
def patch_sys_exit(monkeypatch):
    called = {}

    def fake_exit(code=0):
        called["code"] = code
        raise SystemExit(code)

    monkeypatch.setattr(sys, "exit", fake_exit)
    return called


@pytest.fixture
def cli_runner(config_manager):
    r = runner.CLIRunner(config_manager)
    r.container.cleanup = AsyncMock()
    for handler in r.command_handlers.values():
        handler.execute = AsyncMock()
    return r


def test_all_commands_have_handlers(cli_runner):
    assert set(cli_runner.command_handlers) == {
        "packages",
        "templates",
        "install",
        "uninstall",
        "update",
    }


@pytest.mark.asyncio
async def test_version_flag_prints_version(cli_runner, capsys):
    await cli_runner.run(["--version"])

    captured = capsys.readouterr()
    assert __version__ in captured.out.splitlines()
    cli_runner.container.cleanup.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_command_exits(cli_runner):
    with pytest.raises(SystemExit) as e:
        await cli_runner.run([])

    assert e.value.code == 1
    cli_runner.container.cleanup.assert_awaited_once()


@pytest.mark.asyncio
async def test_routes_to_handler(cli_runner):
    await cli_runner.run(["install", "Foo.Templates"])

    handler = cli_runner.command_handlers["install"]
    handler.execute.assert_awaited_once()
    args = handler.execute.await_args.args[0]
    assert args.package_ids == ["Foo.Templates"]


@pytest.mark.asyncio
async def test_unknown_command_exits(cli_runner):
    args = SimpleNamespace(command="doesnotexist", verbose=False)

    with pytest.raises(SystemExit) as e:
        await cli_runner._execute_command(args)

    assert e.value.code == 1


@pytest.mark.asyncio
async def test_domain_error_is_logged_and_exits(cli_runner, caplog):
    cli_runner.command_handlers["install"].execute.side_effect = (
        InstallationError("Package not found", target="Missing")
    )

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as e:
        await cli_runner.run(["install", "Missing"])

    assert e.value.code == 1
    expected = "Installation failed for 'Missing': Package not found"
    assert expected in caplog.text
    cli_runner.container.cleanup.assert_awaited_once()


@pytest.mark.asyncio
async def test_unexpected_error_exits(cli_runner, caplog):
    cli_runner.command_handlers["packages"].execute.side_effect = (
        RuntimeError("boom")
    )

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as e:
        await cli_runner.run(["packages"])

    assert e.value.code == 1
    assert "Unexpected error: boom" in caplog.text


@pytest.mark.asyncio
async def test_verbose_restores_console_level(cli_runner, mocker):
    set_level = mocker.patch.object(
        runner, "set_console_level", return_value=20
    )
    restore_level = mocker.patch.object(runner, "restore_console_level")

    await cli_runner.run(["packages", "--verbose"])

    set_level.assert_called_once_with("DEBUG")
    restore_level.assert_called_once_with(20)
