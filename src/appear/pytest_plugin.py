"""appear pytest plugin."""

from __future__ import annotations

import contextlib
import getpass
import logging
import shutil
import typing as t

import pytest

from appear import exc
from appear.server import Server
from appear.test import TEST_SESSION_PREFIX, TEST_SOCKET_PREFIX, FakeRunner, namer

if t.TYPE_CHECKING:
    import pathlib

    from appear.session import Session

logger = logging.getLogger(__name__)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Return a :class:`appear.test.FakeRunner` with no canned output.

    Fill ``fake_runner.outputs`` with what each tmux subcommand should print.
    """
    return FakeRunner()


@pytest.fixture
def fake_server(fake_runner: FakeRunner) -> Server:
    """Return a :class:`appear.Server` running commands through ``fake_runner``."""
    return Server(runner=fake_runner)


@pytest.fixture(scope="session")
def home_path(tmp_path_factory: pytest.TempPathFactory) -> pathlib.Path:
    """Temporary `/home/` path."""
    return tmp_path_factory.mktemp("home")


@pytest.fixture(scope="session")
def home_user_name() -> str:
    """Return default username to set for :func:`user_path` fixture."""
    return getpass.getuser()


@pytest.fixture(scope="session")
def user_path(home_path: pathlib.Path, home_user_name: str) -> pathlib.Path:
    """Ensure and return temporary user directory.

    Note: You will need to set the home directory, see :ref:`set_home`.
    """
    p = home_path / home_user_name
    p.mkdir()
    return p


@pytest.fixture
def set_home(
    monkeypatch: pytest.MonkeyPatch,
    user_path: pathlib.Path,
) -> None:
    """Point ``HOME`` at :func:`user_path`, so tmux reads no personal config."""
    monkeypatch.setenv("HOME", str(user_path))


@pytest.fixture
def server(
    request: pytest.FixtureRequest,
    set_home: None,
) -> Server:
    """Return a :class:`appear.Server` bound to a private, temporary tmux socket.

    The tmux server behind it is killed when the test finishes. Tests using it
    are skipped when tmux is not installed.
    """
    if shutil.which("tmux") is None:
        pytest.skip("tmux is not installed")

    server = Server(socket_name=f"{TEST_SOCKET_PREFIX}{next(namer)}")

    def fin() -> None:
        with contextlib.suppress(exc.AppearException):
            server.runner.run(server.command("kill-server").to_list())

    request.addfinalizer(fin)

    return server


@pytest.fixture
def session_params() -> dict[str, t.Any]:
    """Return extra ``new-session`` flags for the :func:`session` fixture."""
    return {"x": 800, "y": 600}


@pytest.fixture
def session(
    session_params: dict[str, t.Any],
    server: Server,
) -> Session:
    """Return a new, detached :class:`appear.Session` on :func:`server`."""
    session_name = f"{TEST_SESSION_PREFIX}{next(namer)}"
    session = server.new_session(d=True, s=session_name, **session_params)
    logger.debug(f"created test session {session!r}")
    assert session.session == session_name
    return session
