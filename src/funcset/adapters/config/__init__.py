"""Configuration adapter - loading, display, overrides, and the functions section.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.functions` - ``[functions]`` section model and loader
"""

from __future__ import annotations

from .display import display_config
from .functions import FunctionsConfig, load_functions_config_from_dict
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "FunctionsConfig",
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "load_functions_config_from_dict",
]
