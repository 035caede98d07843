# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Configuration layer for DocMark.

Exposes the immutable [`Config`][docmark.config.model.Config] snapshot and its
[`MutableConfig`][docmark.config.model.MutableConfig] builder. TOML I/O lives in
``docmark.config.io`` and logging setup in ``docmark.config.logging``.
"""

from __future__ import annotations

from docmark.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]


def default_config() -> Config:
    """Return the configuration built from the bundled defaults only."""
    return MutableConfig.from_defaults().freeze()
