"""Port contract tests for the in-memory adapters and the composition root.

Production adapters are covered by the CLI integration tests; pyright checks
structural conformance statically.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import pytest
from lib_layered_config import Config

from funcset.adapters.memory import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_functions_config_from_dict_in_memory,
)
from funcset.composition import AppServices, build_production, build_testing
from funcset.domain.enums import OutputFormat, OverflowPolicy
from funcset.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    config = get_config_in_memory(profile="test")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_default_config_path_in_memory_is_synthetic() -> None:
    path = get_default_config_path_in_memory()

    assert isinstance(path, Path)
    assert path.name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_display_config_in_memory_accepts_protocol_arguments() -> None:
    assert display_config_in_memory(Config({}, {}), output_format=OutputFormat.JSON, section="functions") is None


@pytest.mark.os_agnostic
def test_init_logging_in_memory_is_a_no_op() -> None:
    assert init_logging_in_memory(Config({}, {})) is None


@pytest.mark.os_agnostic
def test_load_functions_config_in_memory_validates_like_production() -> None:
    parsed = load_functions_config_from_dict_in_memory({"functions": {"overflow_policy": "saturate"}})

    assert parsed.overflow_policy is OverflowPolicy.SATURATE
    with pytest.raises(ConfigurationError):
        load_functions_config_from_dict_in_memory({"functions": {"overflow_policy": "clamp"}})


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_factories_populate_every_service(factory: object) -> None:
    services = factory()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    for field in fields(AppServices):
        assert callable(getattr(services, field.name)), field.name


@pytest.mark.os_agnostic
def test_build_testing_wires_in_memory_adapters() -> None:
    services = build_testing()

    assert services.get_config is get_config_in_memory
    assert services.init_logging is init_logging_in_memory


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_production()

    with pytest.raises(AttributeError):
        services.get_config = get_config_in_memory  # type: ignore[misc]
