"""Conftest.py (root-level).

We keep this in root pytest fixtures in pytest's doctest plugin to be available, as well
as avoiding conftest.py from being included in the wheel. The fixtures themselves
live in :mod:`appear.pytest_plugin`, loaded through its ``pytest11`` entry point.
"""

from __future__ import annotations

import typing as t

import pytest
from _pytest.doctest import DoctestItem

from appear.pane import Pane
from appear.server import Server
from appear.session import Session
from appear.test import FakeRunner
from appear.window import Window

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def add_doctest_fixtures(
    request: pytest.FixtureRequest,
    doctest_namespace: dict[str, t.Any],
) -> None:
    """Configure doctest fixtures for pytest-doctest."""
    if isinstance(request._pyfuncitem, DoctestItem):
        doctest_namespace["Server"] = Server
        doctest_namespace["Session"] = Session
        doctest_namespace["Window"] = Window
        doctest_namespace["Pane"] = Pane
        doctest_namespace["FakeRunner"] = FakeRunner
