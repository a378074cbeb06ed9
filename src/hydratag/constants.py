# topmark:header:start
#
#   project      : HydraTag
#   file         : constants.py
#   file_relpath : src/hydratag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HydraTag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HYDRATAG_VERSION: str = get_version("hydratag")

# Config discovery
DEFAULT_TOML_CONFIG_PACKAGE: str = "hydratag.config"
DEFAULT_TOML_CONFIG_NAME: str = "hydratag-default.toml"
HYDRATAG_TOML_NAME: str = "hydratag.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "hydratag"

LOG_LEVEL_ENV_VAR: str = "HYDRATAG_LOG_LEVEL"

# Placeholder markup contract (consumed by the client-side hydration runtime)
PLACEHOLDER_ELEMENT: str = "div"
INIT_CLASS_TOKEN: str = "_Component_Init"
INIT_NAME_ATTRIBUTE: str = "data-component-init-name"
INIT_ARGS_ATTRIBUTE: str = "data-component-args"
EMPTY_ARGS_PAYLOAD: str = "[]"

# Attribute prefixes recognized on component tags
EXPRESSION_PREFIX: str = ":"
ARGUMENT_PREFIX: str = "$"
DATA_ARGUMENT_PREFIX: str = "data-"
CLASS_ATTRIBUTE: str = "class"

DEFAULT_MAX_DEPTH: int = 64
