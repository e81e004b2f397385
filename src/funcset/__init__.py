"""Public package surface exposing the exported functions, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: The exported function set and its registry
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    ELIGIBLE_AGE,
    U64_MAX,
    add,
    age_comparator,
    greet,
)
from .domain.enums import OverflowPolicy
from .domain.exports import EXPORTS, get_export

__all__ = [
    "ELIGIBLE_AGE",
    "EXPORTS",
    "OverflowPolicy",
    "U64_MAX",
    "add",
    "age_comparator",
    "get_config",
    "get_export",
    "greet",
    "print_info",
]
