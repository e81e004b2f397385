"""Functions configuration model and loader.

Provides the FunctionsConfig Pydantic model for the ``[functions]`` section
and the loader that turns a raw configuration dictionary into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from funcset.domain.enums import OverflowPolicy
from funcset.domain.errors import ConfigurationError


class FunctionsConfig(BaseModel):
    """Validated, immutable settings for the exported functions.

    Example:
        >>> FunctionsConfig().overflow_policy
        <OverflowPolicy.WRAP: 'wrap'>
        >>> FunctionsConfig(overflow_policy="SATURATE").overflow_policy
        <OverflowPolicy.SATURATE: 'saturate'>
    """

    model_config = ConfigDict(frozen=True)

    overflow_policy: OverflowPolicy = OverflowPolicy.WRAP

    @field_validator("overflow_policy", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        """Accept case-insensitive names and treat blank values as unset.

        Environment variables and ``.env`` files often arrive in upper case or
        as empty strings.

        Examples:
            >>> FunctionsConfig._normalise_policy(" Fail ")
            'fail'
            >>> FunctionsConfig._normalise_policy("")
            'wrap'
        """
        if isinstance(v, str):
            stripped = v.strip().lower()
            return stripped or OverflowPolicy.WRAP.value
        return v


def load_functions_config_from_dict(config_dict: Mapping[str, Any]) -> FunctionsConfig:
    """Build FunctionsConfig from the full configuration dictionary.

    Args:
        config_dict: Merged configuration (``Config.as_dict()``); only the
            ``functions`` section is read.

    Returns:
        Validated FunctionsConfig, with defaults for missing keys.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_functions_config_from_dict({}).overflow_policy.value
        'wrap'
        >>> load_functions_config_from_dict({"functions": {"overflow_policy": "fail"}}).overflow_policy.value
        'fail'
    """
    section = config_dict.get("functions", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[functions] must be a table, got {type(section).__name__}")
    try:
        return FunctionsConfig.model_validate(dict(section))
    except ValidationError as exc:
        allowed = ", ".join(policy.value for policy in OverflowPolicy)
        raise ConfigurationError(f"Invalid [functions] configuration (overflow_policy: {allowed}): {exc}") from exc


__all__ = [
    "FunctionsConfig",
    "load_functions_config_from_dict",
]
