"""JSON configuration files for frame generation.

Example:
    >>> from frames.application.config import load_config
    >>> config = load_config(Path("frame.json"))
    >>> config.frame.to_input().to_parameters()
"""

from frames.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from frames.application.config.merger import merge_config_with_cli
from frames.application.config.schema import (
    SUPPORTED_VERSIONS,
    FrameConfig,
    FrameConfiguration,
    MeshConfig,
    OutputConfig,
)

__all__ = [
    "ConfigError",
    "FrameConfig",
    "FrameConfiguration",
    "MeshConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
