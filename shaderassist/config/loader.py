"""key=value config loading for shaderassist.ini."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from shaderassist.config.models import (
    CompilerChoice,
    ConfigError,
    ConfigNotFoundError,
    ShaderAssistConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "shaderassist.ini"

# ini key -> model field, for keys copied through as plain strings
_STRING_KEYS = {
    "glsl_lang_validator_path": "glslang_validator_path",
    "glsl_c_path": "glslc_path",
    "shader_source_path": "shader_source_path",
    "spirv_output_path": "spirv_output_path",
    "spirv_ext": "spirv_ext",
    "vs_ext": "vs_ext",
    "fs_ext": "fs_ext",
    "gs_ext": "gs_ext",
    "cs_ext": "cs_ext",
}


def parse_ini(text: str) -> dict[str, str]:
    """Split ``key=value`` lines into a dict.

    Lines starting with ``#`` and blank lines are ignored. A line without
    ``=`` is kept as a key with an empty value. Later keys win.
    """
    pairs: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        pairs[key.strip()] = value.strip()
    return pairs


def config_from_pairs(pairs: dict[str, str], source: str = "config") -> ShaderAssistConfig:
    """Build a validated config from parsed ini pairs."""
    values: dict[str, object] = {
        field: pairs.get(key, "") for key, field in _STRING_KEYS.items()
    }
    values["compile_on_startup"] = pairs.get("compile_on_startup") == "true"
    values["compiler"] = (
        CompilerChoice.glslc
        if pairs.get("use_google_spirv") == "true"
        else CompilerChoice.glslang_validator
    )
    if pairs.get("compile_timeout"):
        values["compile_timeout"] = pairs["compile_timeout"]
    if pairs.get("log_level"):
        values["log_level"] = pairs["log_level"]

    unknown = set(pairs) - set(_STRING_KEYS) - {
        "compile_on_startup", "use_google_spirv", "compile_timeout", "log_level",
    }
    for key in sorted(unknown):
        logger.debug("Ignoring unknown config key %r", key)

    try:
        return ShaderAssistConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {source}: {e}") from e


def load_config(cli_path: str | Path | None = None) -> ShaderAssistConfig:
    """Load the config from ``cli_path`` or ./shaderassist.ini."""
    path = Path(cli_path) if cli_path else Path(DEFAULT_CONFIG_NAME)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigNotFoundError(f"Failed to read config file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid config in {path}: not valid UTF-8 ({e})") from e

    return config_from_pairs(parse_ini(text), source=str(path))


# Default template for `shaderassist config init`
DEFAULT_CONFIG_TEMPLATE = """\
# shaderassist.ini

# compile every shader once when ShaderAssist starts
compile_on_startup=false
# use Google's glslc instead of glslangValidator (adds #include support)
use_google_spirv=false

# compiler executables
glsl_lang_validator_path=glslangValidator
glsl_c_path=glslc

# folder checked for modified shader sources (use / for absolute paths)
shader_source_path=
# output folder for compiled SPIR-V (use / for absolute paths)
spirv_output_path=spirv
spirv_ext=.spv

# shader stage extensions
vs_ext=.vert
fs_ext=.frag
gs_ext=.geom
cs_ext=.comp

# optional: seconds before a compiler process is killed (empty = no limit)
compile_timeout=
# debug | info | warn | error
log_level=info
"""
