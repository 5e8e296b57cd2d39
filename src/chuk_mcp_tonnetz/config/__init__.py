"""
Configuration loading - YAML project files over pydantic defaults.
"""

from chuk_mcp_tonnetz.config.loader import DEFAULT_CONFIG_NAME, ConfigLoader

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ConfigLoader",
]
