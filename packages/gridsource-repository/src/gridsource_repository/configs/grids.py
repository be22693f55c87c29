import pathlib
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gridsource_repository.common.settings import settings


class RepositorySourceConfig(BaseModel):
    """Source configuration of a repository-backed grid."""

    repository_list_method: str = Field(
        default="",
        validation_alias="repositoryListMethod",
        description="Repository list method, e.g. 'shop.repositories:ProductRepository.get_list'.",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class GridConfig(BaseModel):
    """Configuration for a single grid."""
    name: str
    source: RepositorySourceConfig = Field(default_factory=RepositorySourceConfig)


class GridFileConfig(BaseModel):
    """File-level schema for grids.yaml."""
    version: int = Field(1, description="Schema version")
    grids: List[GridConfig] = Field(default_factory=list)


def load_grid_configs(path: Optional[pathlib.Path] = None) -> Dict[str, GridConfig]:
    """
    Load grid configurations from a YAML file.

    Args:
        path: Path to the YAML file. Defaults to the configured grid config path.

    Returns:
        A dictionary mapping grid names to GridConfig objects.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file cannot be parsed or is structurally invalid.
    """
    target_path = path or pathlib.Path(settings.grid_config_path)
    if not target_path.exists():
        raise FileNotFoundError(f"Grid config not found: {target_path}")

    try:
        raw = yaml.safe_load(target_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML from {target_path}: {e}") from e

    try:
        file_config = GridFileConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Grid Configuration Invalid: {e}") from e

    return {grid.name: grid for grid in file_config.grids}
