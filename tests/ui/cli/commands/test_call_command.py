"""Tests for the ``call`` CLI command."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

from pytest_mock import MockerFixture
from rich.console import Console
from rich.table import Table

from audioscrobbler.client import LastFMClient
from audioscrobbler.config.config import Config
from audioscrobbler.ui.cli.args.options import CallArgs
from audioscrobbler.ui.cli.commands.call import CallCommand
from conftest import FakeTransport

TOP_TAGS = """<lfm status="ok"><toptags artist="Cher">
  <tag><name>pop</name><count>100</count></tag>
  <tag><name>dance</name><count>52</count></tag>
</toptags></lfm>"""


def _args(**overrides: object) -> CallArgs:
    values: dict[str, object] = {
        "command": "call",
        "config_path": None,
        "method": "artist.getTopTags",
        "arguments": ["Cher"],
        "params": {"autocorrect": "1"},
        "raw": False,
    }
    values.update(overrides)
    return CallArgs(**values)  # pyright: ignore[reportArgumentType]


def test_execute_renders_table(mocker: MockerFixture, config: Config) -> None:
    transport = FakeTransport("<lfm status='ok'><toptags><tag><name>pop</name></tag><tag><name>dance</name></tag></toptags></lfm>")
    client = LastFMClient(config, transport)
    console_mock: MagicMock = mocker.create_autospec(Console, instance=True)

    exit_code = CallCommand(_args(), lambda: client, console=console_mock).execute()

    assert exit_code == 0
    assert transport.requests[0][1]["autocorrect"] == "1"
    rendered = console_mock.print.call_args[0][0]
    assert isinstance(rendered, Table)
    assert rendered.row_count == 2
    assert [column.header for column in rendered.columns] == ["toptags_tag_name"]


def test_execute_raw_prints_each_record(mocker: MockerFixture, config: Config) -> None:
    client = LastFMClient(config, FakeTransport(TOP_TAGS))
    console_mock: MagicMock = mocker.create_autospec(Console, instance=True)

    exit_code = CallCommand(
        _args(method="track.getTopTags", arguments=["Cher", "Believe"], params={}, raw=True),
        lambda: client,
        console=console_mock,
    ).execute()

    assert exit_code == 0
    printed = [call.args[0] for call in console_mock.print.call_args_list]
    assert printed == [("pop", "100"), ("dance", "52")]


def test_execute_unknown_method(mocker: MockerFixture, config: Config) -> None:
    transport = FakeTransport()
    console_mock: MagicMock = mocker.create_autospec(Console, instance=True)

    exit_code = CallCommand(
        _args(method="artist.nope"),
        lambda: LastFMClient(config, transport),
        console=console_mock,
    ).execute()

    assert exit_code == 2
    assert transport.requests == []


def test_execute_without_records(mocker: MockerFixture, config: Config) -> None:
    console_mock: MagicMock = mocker.create_autospec(Console, instance=True)
    client = LastFMClient(config, FakeTransport("<lfm status='ok'/>"))

    exit_code = CallCommand(
        _args(method="track.love", arguments=["Believe", "Cher"], params={}),
        lambda: client,
        console=console_mock,
    ).execute()

    assert exit_code == 0
    assert "No records" in console_mock.print.call_args[0][0]


BRACKETED = "<lfm status='ok'><toptags><tag><name>[unknown]</name></tag><tag><name>AC[/DC]</name></tag></toptags></lfm>"


def _text_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


def test_table_shows_bracketed_values_literally(config: Config) -> None:
    console = _text_console()
    client = LastFMClient(config, FakeTransport(BRACKETED))

    exit_code = CallCommand(_args(), lambda: client, console=console).execute()

    output = console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert exit_code == 0
    assert "[unknown]" in output
    assert "AC[/DC]" in output


def test_raw_shows_bracketed_values_literally(config: Config) -> None:
    console = _text_console()
    client = LastFMClient(config, FakeTransport(BRACKETED))

    exit_code = CallCommand(_args(raw=True), lambda: client, console=console).execute()

    output = console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert exit_code == 0
    assert output.splitlines() == ["[unknown]", "AC[/DC]"]
