# docmark:header:start
#
#   project      : DocMark
#   file         : model.py
#   file_relpath : src/docmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot handed to the engine facade.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest to highest precedence):
    1. Built-in defaults (``docmark-default.toml`` resource).
    2. Project configs discovered upward, root-most first; within a directory
       ``pyproject.toml`` is merged before ``docmark.toml``.
    3. Extra config files passed explicitly (``--config``), in the given order.
    4. CLI or API overrides (`MutableConfig.apply_cli_args`).

Problems found while loading (unreadable files, wrongly typed values, widths
below the floor) never raise; they are recorded as diagnostics on the
resulting `Config`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docmark.config.io import (
    extract_docmark_table,
    get_typed_value,
    load_defaults_dict,
    load_toml_dict,
)
from docmark.config.logging import get_logger
from docmark.constants import DOCMARK_TOML_NAME, MIN_WRAP_WIDTH, PYPROJECT_TOML_NAME
from docmark.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from docmark.config.io import TomlTable
    from docmark.config.logging import DocmarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DocmarkLogger = get_logger(__name__)

# Typed keys accepted in a DocMark table, with their fallback values for drafts
# that were not seeded from the bundled defaults.
BOOL_KEYS: dict[str, bool] = {
    "enabled": True,
    "bold_mark_lines": True,
    "render_mark_separators": True,
    "color_inline_code_in_comments": True,
    "wrap_count_from_comment_start": False,
    "avoid_punctuation_breaks": False,
}
INT_KEYS: dict[str, int] = {"wrap_width": 100}
STR_KEYS: dict[str, str] = {"inline_code_color": "#CE9178"}

# Discovery-only key; accepted but not stored.
ROOT_KEY: str = "root"

CLI_OVERRIDE_STR: str = "<CLI overrides>"
DEFAULTS_SOURCE_STR: str = "<defaults>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DocMark.

    Attributes:
        enabled (bool): Produce spans at all.
        bold_mark_lines (bool): Emit ``mark-bold`` spans for MARK lines.
        render_mark_separators (bool): Emit ``mark-separator`` spans.
        color_inline_code_in_comments (bool): Emit inline code spans in plain ``//`` comments.
        inline_code_color (str): Color hint for renderers; not interpreted by the engine.
        wrap_width (int): Reflow width, never below ``MIN_WRAP_WIDTH``.
        wrap_count_from_comment_start (bool): Ignore indentation when measuring widths.
        avoid_punctuation_breaks (bool): Never join a sentence-ending line with the next.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings or errors encountered while
            loading, merging or sanitizing config.
    """

    enabled: bool
    bold_mark_lines: bool
    render_mark_separators: bool
    color_inline_code_in_comments: bool
    inline_code_color: str
    wrap_width: int
    wrap_count_from_comment_start: bool
    avoid_punctuation_breaks: bool

    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: A ``{"docmark": {...}}`` mapping of every setting.
        """
        return {
            "docmark": {
                "enabled": self.enabled,
                "bold_mark_lines": self.bold_mark_lines,
                "render_mark_separators": self.render_mark_separators,
                "color_inline_code_in_comments": self.color_inline_code_in_comments,
                "inline_code_color": self.inline_code_color,
                "wrap_width": self.wrap_width,
                "wrap_count_from_comment_start": self.wrap_count_from_comment_start,
                "avoid_punctuation_breaks": self.avoid_punctuation_breaks,
            }
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            enabled=self.enabled,
            bold_mark_lines=self.bold_mark_lines,
            render_mark_separators=self.render_mark_separators,
            color_inline_code_in_comments=self.color_inline_code_in_comments,
            inline_code_color=self.inline_code_color,
            wrap_width=self.wrap_width,
            wrap_count_from_comment_start=self.wrap_count_from_comment_start,
            avoid_punctuation_breaks=self.avoid_punctuation_breaks,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every setting is tri-state: ``None`` means "not set by this layer", so a
    later layer only overrides what it actually declares. `freeze` resolves
    unset values to their fallbacks.
    """

    enabled: bool | None = None
    bold_mark_lines: bool | None = None
    render_mark_separators: bool | None = None
    color_inline_code_in_comments: bool | None = None
    inline_code_color: str | None = None
    wrap_width: int | None = None
    wrap_count_from_comment_start: bool | None = None
    avoid_punctuation_breaks: bool | None = None

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Sanitize this builder and freeze it into an immutable Config."""
        self.sanitize()

        def _bool(key: str) -> bool:
            value: bool | None = getattr(self, key)
            return BOOL_KEYS[key] if value is None else value

        return Config(
            enabled=_bool("enabled"),
            bold_mark_lines=_bool("bold_mark_lines"),
            render_mark_separators=_bool("render_mark_separators"),
            color_inline_code_in_comments=_bool("color_inline_code_in_comments"),
            inline_code_color=(
                self.inline_code_color
                if self.inline_code_color is not None
                else STR_KEYS["inline_code_color"]
            ),
            wrap_width=self.wrap_width if self.wrap_width is not None else INT_KEYS["wrap_width"],
            wrap_count_from_comment_start=_bool("wrap_count_from_comment_start"),
            avoid_punctuation_breaks=_bool("avoid_punctuation_breaks"),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def sanitize(self) -> None:
        """Normalize the draft in place.

        Current rules:
            - ``wrap_width`` below ``MIN_WRAP_WIDTH`` is raised to the floor and
              reported as a warning.
        """
        if self.wrap_width is not None and self.wrap_width < MIN_WRAP_WIDTH:
            msg: str = (
                f"wrap_width={self.wrap_width} is below the minimum of {MIN_WRAP_WIDTH}; "
                f"using {MIN_WRAP_WIDTH}"
            )
            logger.warning(msg)
            self.diagnostics.add_warning(msg)
            self.wrap_width = MIN_WRAP_WIDTH

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the default configuration from the bundled docmark-default.toml file.

        Returns:
            MutableConfig: A `MutableConfig` instance populated with default values.

        Raises:
            RuntimeError: If the bundled resource is missing or invalid, or has no
                ``[docmark]`` table.
        """
        data: TomlTable = load_defaults_dict()
        table: Any = data.get("docmark")
        if not isinstance(table, dict):
            raise RuntimeError("Bundled default config has no [docmark] table")
        draft: MutableConfig = cls.from_toml_dict(table, source=DEFAULTS_SOURCE_STR)
        draft.config_files = [DEFAULTS_SOURCE_STR]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``docmark.toml`` (``[docmark]`` table, or flat keys) and
        ``pyproject.toml`` (``[tool.docmark]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml``
                has no DocMark section. Unreadable or malformed files yield an
                empty draft carrying an error diagnostic.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        diagnostics = DiagnosticLog()
        data: TomlTable = load_toml_dict(path, diagnostics)
        if diagnostics.has_error():
            draft = cls(diagnostics=diagnostics)
            draft.config_files = [path]
            return draft

        table: TomlTable | None = extract_docmark_table(data, path)
        if table is None:
            logger.debug("No [tool.docmark] section in %s", path)
            return None

        draft = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        logger.trace("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Create a draft config from a DocMark TOML table.

        Values of the wrong type and unknown keys are ignored with a warning
        diagnostic.

        Args:
            data (TomlTable): The DocMark table (keys at top level).
            source (str): Human-readable origin, used in diagnostics.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls()
        diags: DiagnosticLog = draft.diagnostics

        for key in BOOL_KEYS:
            setattr(draft, key, get_typed_value(data, key, bool, source=source, diagnostics=diags))
        for key in INT_KEYS:
            setattr(draft, key, get_typed_value(data, key, int, source=source, diagnostics=diags))
        for key in STR_KEYS:
            setattr(draft, key, get_typed_value(data, key, str, source=source, diagnostics=diags))

        known: set[str] = {*BOOL_KEYS, *INT_KEYS, *STR_KEYS, ROOT_KEY}
        for key in data:
            if key not in known:
                msg: str = f"Unknown configuration key {key!r} in {source}"
                logger.warning(msg)
                diags.add_warning(msg)

        return draft

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Layered discovery semantics:
          * We traverse from the anchor directory up to the filesystem root and
            collect config files in **root-most to nearest** order.
          * In a given directory, ``pyproject.toml`` (with ``[tool.docmark]``) is
            listed before ``docmark.toml`` so that the later merge gives
            same-directory precedence to ``docmark.toml``.
          * If a discovered config sets ``root = true``, traversal stops after
            collecting the current directory's files.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, DOCMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_docmark_table(load_toml_dict(p), p)
                if table is None:
                    # pyproject.toml without a DocMark section is not a config file.
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if table.get(ROOT_KEY) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):  # root-most first
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        extra_files: Iterable[Path] | None = None,
        use_project: bool = True,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            start (Path | None): Discovery anchor; the CWD when omitted. If it is a
                file, its parent directory is used.
            extra_files (Iterable[Path] | None): Explicit config files merged
                **after** discovery, in their given order.
            use_project (bool): If False, skip project discovery (``--no-config``).

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if use_project:
            anchor: Path = start if start is not None else Path.cwd()
            for cfg_path in cls.discover_config_files(anchor):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_files or ():
            extra_path = Path(extra)
            mc = cls.from_toml_file(extra_path)
            if mc is None:
                msg: str = f"No [tool.docmark] section in {extra_path}"
                logger.warning(msg)
                draft.diagnostics.add_warning(msg)
                continue
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose explicitly set values win.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def pick(key: str) -> Any:
            value: Any = getattr(other, key)
            return value if value is not None else getattr(self, key)

        merged = MutableConfig(
            **{key: pick(key) for key in (*BOOL_KEYS, *INT_KEYS, *STR_KEYS)},
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-None value override the draft, so options
        the user did not pass keep whatever came from discovery.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        applied: bool = False
        for key in (*BOOL_KEYS, *INT_KEYS, *STR_KEYS):
            value: Any = args.get(key)
            if value is None:
                continue
            setattr(self, key, value)
            applied = True
        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self
