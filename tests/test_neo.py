"""Tests for typed tmux records."""

from __future__ import annotations

import dataclasses
import typing as t

import pytest

from appear import exc
from appear.client import Client
from appear.formats import parse_line
from appear.neo import Obj, TmuxProperty, nonzero, to_int
from appear.pane import Pane
from appear.session import Session
from appear.window import Window

if t.TYPE_CHECKING:
    from appear.server import Server


class FormatStringFixture(t.NamedTuple):
    """Test fixture for Obj.format_string()."""

    test_id: str
    cls: type[Obj]
    expected: str


FORMAT_STRING_FIXTURES: list[FormatStringFixture] = [
    FormatStringFixture(
        test_id="pane",
        cls=Pane,
        expected=(
            " pid:#{pane_pid} session:#{session_name} window:#{window_index}"
            " pane:#{pane_index} active:#{pane_active}"
            " command_name:#{pane_current_command}"
            " current_path:#{pane_current_path} id:#{pane_id}"
        ),
    ),
    FormatStringFixture(
        test_id="session",
        cls=Session,
        expected=(
            " session:#{session_name} id:#{session_id}"
            " attached:#{session_attached} width:#{session_width}"
            " height:#{session_height}"
        ),
    ),
    FormatStringFixture(
        test_id="window",
        cls=Window,
        expected=(
            " session:#{session_name} window:#{window_index} id:#{window_id}"
            " active:#{window_active}"
        ),
    ),
    FormatStringFixture(
        test_id="client",
        cls=Client,
        expected=(
            " tty:#{client_tty} term:#{client_termname} session:#{client_session}"
        ),
    ),
]


@pytest.mark.parametrize(
    list(FormatStringFixture._fields),
    FORMAT_STRING_FIXTURES,
    ids=[test.test_id for test in FORMAT_STRING_FIXTURES],
)
def test_format_string(test_id: str, cls: type[Obj], expected: str) -> None:
    """Templates request exactly the declared fields, in declaration order."""
    assert cls.format_string() == expected


def test_properties_table() -> None:
    """The property table carries name, tmux field and coercion."""
    props = {p.name: p for p in Pane.properties()}
    assert props["pid"] == TmuxProperty("pid", "pane_pid", to_int)
    assert props["active"] == TmuxProperty("active", "pane_active", nonzero)
    assert props["session"] == TmuxProperty("session", "session_name", None)
    assert "server" not in props


class ActiveFixture(t.NamedTuple):
    """Test fixture for boolean coercion."""

    test_id: str
    raw: str
    expected: bool


ACTIVE_FIXTURES: list[ActiveFixture] = [
    ActiveFixture(test_id="one", raw="1", expected=True),
    ActiveFixture(test_id="zero", raw="0", expected=False),
    ActiveFixture(test_id="any_nonzero", raw="2", expected=True),
]


@pytest.mark.parametrize(
    list(ActiveFixture._fields),
    ACTIVE_FIXTURES,
    ids=[test.test_id for test in ACTIVE_FIXTURES],
)
def test_nonzero_coercion(
    test_id: str,
    raw: str,
    expected: bool,
    fake_server: Server,
) -> None:
    """``pane_active`` is true for any non-zero number."""
    pane = Pane.parse(parse_line(f"active:{raw}"), fake_server)
    assert pane.active is expected


def test_parse_coerces_declared_fields(fake_server: Server) -> None:
    """Coerced fields hold typed values, the rest raw strings."""
    line = (
        " pid:4242 session:main window:1 pane:2 active:0 command_name:vim"
        " current_path:/home/me/src:old id:%7"
    )
    pane = Pane.parse(parse_line(line), fake_server)
    assert pane.pid == 4242
    assert pane.session == "main"
    assert pane.window == 1
    assert pane.pane == 2
    assert pane.active is False
    assert pane.command_name == "vim"
    assert pane.current_path == "/home/me/src:old"
    assert pane.id == "%7"
    assert pane.server is fake_server


def test_parse_missing_and_empty_fields_are_none(fake_server: Server) -> None:
    """Absent or empty values are not errors and are never coerced."""
    session = Session.parse(parse_line("session:main id:$1 width:"), fake_server)
    assert session.session == "main"
    assert session.attached is None
    assert session.width is None
    assert session.height is None


def test_parse_ignores_unknown_keys(fake_server: Server) -> None:
    """Keys outside the property table are dropped."""
    window = Window.parse(parse_line("id:@1 bogus:yes"), fake_server)
    assert window.id == "@1"
    assert not hasattr(window, "bogus")


def test_parse_mismatch_on_bad_number(fake_server: Server) -> None:
    """A non-numeric value for a numeric field fails loudly."""
    with pytest.raises(exc.ParseMismatch) as exc_info:
        Pane.parse(parse_line("pid:abc id:%1"), fake_server)
    assert exc_info.value.field == "pid"
    assert exc_info.value.value == "abc"
    assert exc_info.value.record_type == "Pane"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_parse_mismatch_on_bad_flag(fake_server: Server) -> None:
    """A non-numeric boolean fails as well."""
    with pytest.raises(exc.ParseMismatch, match=r"Window\.active"):
        Window.parse(parse_line("active:yes"), fake_server)


def test_records_are_immutable(fake_server: Server) -> None:
    """Records cannot be changed after construction."""
    pane = Pane.parse(parse_line("id:%1"), fake_server)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pane.id = "%2"  # type: ignore[misc]


def test_equality_ignores_server(fake_server: Server) -> None:
    """Two records with the same values are equal whatever produced them."""
    raw = parse_line("session:main window:1 id:@1 active:1")
    unbound = Window.parse(raw, server=None)  # type: ignore[arg-type]
    assert Window.parse(raw, fake_server) == unbound


class TargetFixture(t.NamedTuple):
    """Test fixture for record targets."""

    test_id: str
    cls: type[Obj]
    line: str
    expected: str


TARGET_FIXTURES: list[TargetFixture] = [
    TargetFixture(
        test_id="pane_uses_id",
        cls=Pane,
        line="session:main window:1 pane:0 id:%5",
        expected="%5",
    ),
    TargetFixture(
        test_id="window_uses_id",
        cls=Window,
        line="session:main window:3 id:@4",
        expected="@4",
    ),
    TargetFixture(
        test_id="session_uses_id",
        cls=Session,
        line="session:main id:$2",
        expected="$2",
    ),
    TargetFixture(
        test_id="client_uses_tty",
        cls=Client,
        line="tty:/dev/pts/1 session:main",
        expected="/dev/pts/1",
    ),
]


@pytest.mark.parametrize(
    list(TargetFixture._fields),
    TARGET_FIXTURES,
    ids=[test.test_id for test in TARGET_FIXTURES],
)
def test_target(
    test_id: str,
    cls: type[Obj],
    line: str,
    expected: str,
    fake_server: Server,
) -> None:
    """Targets use stable ids, never positions or names."""
    assert cls.parse(parse_line(line), fake_server).target == expected
