from .grids import GridConfig, GridFileConfig, RepositorySourceConfig, load_grid_configs

__all__ = [
    "GridConfig",
    "GridFileConfig",
    "RepositorySourceConfig",
    "load_grid_configs",
]
