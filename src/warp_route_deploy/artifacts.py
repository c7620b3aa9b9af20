"""JSON artifact reading and merge-on-write."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .constants import WARP_TOKEN_ADDRESSES_FILE
from .types import DeployedRouter, RouterConfig, WarpRouteArtifact

logger = logging.getLogger(__name__)


def read_json(directory: str | Path, filename: str) -> Any:
    return json.loads((Path(directory) / filename).read_text())


def try_read_json(directory: str | Path, filename: str) -> Any | None:
    """Like read_json, but None when the file does not exist."""
    try:
        return read_json(directory, filename)
    except FileNotFoundError:
        return None


def write_json(directory: str | Path, filename: str, obj: Any) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(json.dumps(obj, indent=2) + "\n")
    return path


def merge_json(directory: str | Path, filename: str, obj: Mapping[str, Any]) -> Path:
    """
    Shallow-merge obj into the JSON object stored at directory/filename.

    Existing top-level keys are kept, keys present in obj are replaced.
    There is no protection against concurrent writers.
    """
    existing = try_read_json(directory, filename) or {}
    return write_json(directory, filename, {**existing, **obj})


def write_token_deployment_artifacts(
    contracts: Mapping[str, DeployedRouter],
    config_map: Mapping[str, RouterConfig],
    directory: str | Path,
) -> dict[str, dict[str, str]]:
    """
    Record {router, tokenType} for each deployed chain in warp-token-addresses.json.

    Returns:
        The entries that were merged into the file
    """
    logger.info("Writing token deployment addresses to %s", Path(directory) / WARP_TOKEN_ADDRESSES_FILE)
    artifacts = {
        chain_name: WarpRouteArtifact(
            router=contract.router,
            token_type=config_map[chain_name].type,
        ).model_dump(mode="json", by_alias=True)
        for chain_name, contract in contracts.items()
    }
    merge_json(directory, WARP_TOKEN_ADDRESSES_FILE, artifacts)
    return artifacts
