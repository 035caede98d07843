# docmark:header:start
#
#   project      : DocMark
#   file         : constants.py
#   file_relpath : src/docmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCMARK_VERSION: str = get_version("docmark")

# Name of the bundled default config inside the package `docmark.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "docmark.config"
DEFAULT_TOML_CONFIG_NAME: str = "docmark-default.toml"

# Project-local config file names, in same-directory precedence order (last wins).
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DOCMARK_TOML_NAME: str = "docmark.toml"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "DOCMARK_LOG_LEVEL"

# Requested wrap widths are never allowed below this floor.
MIN_WRAP_WIDTH: int = 40

LINE_PREFIX: str = "//"
DOC_PREFIX: str = "///"
