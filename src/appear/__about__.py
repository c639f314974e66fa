"""Metadata package for appear."""

from __future__ import annotations

__title__ = "appear"
__package_name__ = "appear"
__version__ = "0.1.0"
__description__ = "Find where a file or process is shown in tmux, and reveal it"
__author__ = "appear contributors"
__license__ = "MIT"
__copyright__ = "Copyright 2026- appear contributors"
