"""Warp route config validation and chain extraction."""

import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from ._exceptions import ConfigurationError, WarpConfigError
from .types import TokenType, WarpRouteConfig, WarpRouteMultiCollateralConfig

AnyWarpConfig = WarpRouteConfig | WarpRouteMultiCollateralConfig

_BYTES32_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")

_BASE_TOKEN_TAGS = {TokenType.native.value, TokenType.collateral.value}
_UNION_TAG_ERRORS = {"union_tag_invalid", "union_tag_not_found"}


class ValidationResult(BaseModel):
    """
    Outcome of validating a warp route config.

    Holds either the parsed config or the path and reason of the first
    failing field. Use unwrap() to get the config or raise.
    """

    config: AnyWarpConfig | None = None
    path: str | None = None
    message: str | None = None

    model_config = {"frozen": True}

    @property
    def success(self) -> bool:
        return self.config is not None

    def unwrap(self) -> AnyWarpConfig:
        """
        Return the validated config.

        Raises:
            WarpConfigError: If validation failed
        """
        if self.config is None:
            raise WarpConfigError(self.path or "", self.message or "")
        return self.config


def _error_path(error: Mapping[str, Any]) -> str:
    """Dotted path of the config key an error refers to."""
    loc = list(error["loc"])
    if error["type"] in _UNION_TAG_ERRORS:
        loc.append("type")
    elif loc[:1] == ["base"] and len(loc) > 1 and loc[1] in _BASE_TOKEN_TAGS:
        # pydantic inserts the union tag after base / bases.<n>; it is not a config key
        del loc[1]
    elif loc[:1] == ["bases"] and len(loc) > 2 and loc[2] in _BASE_TOKEN_TAGS:
        del loc[2]
    return ".".join(str(part) for part in loc)


def _validate(model: type[AnyWarpConfig], data: Mapping[str, Any] | AnyWarpConfig) -> ValidationResult:
    try:
        config = model.model_validate(data)
    except ValidationError as e:
        first_issue = e.errors()[0]
        return ValidationResult(path=_error_path(first_issue), message=first_issue["msg"])
    return ValidationResult(config=config)


def validate_warp_route_config(data: Mapping[str, Any] | WarpRouteConfig) -> ValidationResult:
    """Validate a single-collateral config (one base, one or more synthetics)."""
    return _validate(WarpRouteConfig, data)


def validate_warp_route_multi_collateral_config(
    data: Mapping[str, Any] | WarpRouteMultiCollateralConfig,
) -> ValidationResult:
    """Validate a multi-collateral config (one or more bases, one synthetic)."""
    return _validate(WarpRouteMultiCollateralConfig, data)


def get_warp_config_chains(config: WarpRouteConfig) -> list[str]:
    """Chains touched by a single-collateral config, base first."""
    return [token.chain_name for token in [config.base, *config.synthetics]]


def get_warp_multi_collateral_config_chains(config: WarpRouteMultiCollateralConfig) -> list[str]:
    """Chains touched by a multi-collateral config, synthetic last."""
    return [token.chain_name for token in [*config.bases, config.synthetic]]


def assert_bytes32(value: str) -> str:
    """
    Check that a value is a 0x-prefixed 32 byte hex string (e.g. a private key).

    Raises:
        ConfigurationError: If the value is malformed
    """
    if not _BYTES32_RE.match(value):
        raise ConfigurationError("Expected a 0x-prefixed 32 byte hex string")
    return value


def load_warp_config(path: str | Path) -> dict[str, Any]:
    """Read a raw warp route config from a JSON file. Validation is left to the caller."""
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as e:
        raise ConfigurationError(f"Warp config not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Warp config {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Warp config {path} must contain a JSON object")
    return data
