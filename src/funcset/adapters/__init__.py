"""Adapters layer - infrastructure and framework integrations.

Connects the exported functions to the outside world.

Contents:
    * :mod:`.cli` - rich-click console host for the exported functions
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
