"""appear, a typed tmux control layer for revealing panes."""

from .__about__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __package_name__,
    __title__,
    __version__,
)
from .client import Client
from .pane import Pane
from .server import Server
from .session import Session
from .window import Window

__all__ = (
    "Client",
    "Pane",
    "Server",
    "Session",
    "Window",
    "__author__",
    "__copyright__",
    "__description__",
    "__license__",
    "__package_name__",
    "__title__",
    "__version__",
)
