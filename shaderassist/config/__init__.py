from shaderassist.config.loader import DEFAULT_CONFIG_NAME, load_config, parse_ini
from shaderassist.config.models import (
    CompilerChoice,
    ConfigError,
    ConfigNotFoundError,
    ShaderAssistConfig,
    resolve_executable,
    resolve_path,
)

__all__ = [
    "CompilerChoice",
    "ConfigError",
    "ConfigNotFoundError",
    "DEFAULT_CONFIG_NAME",
    "ShaderAssistConfig",
    "load_config",
    "parse_ini",
    "resolve_executable",
    "resolve_path",
]
