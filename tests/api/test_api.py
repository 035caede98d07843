# docmark:header:start
#
#   project      : DocMark
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Public API: configuration handling and function families."""

from __future__ import annotations

import inspect

from docmark import api
from docmark.config import MutableConfig
from tests.conftest import make_config

LONG_LINE = "// " + " ".join(["word"] * 30)


def test_api_all_contains_expected_symbols() -> None:
    """__all__ exposes the stable surface."""
    expected: set[str] = {
        "classify",
        "compute_convert_edits",
        "compute_wrap_edits",
        "compute_title_case_edits",
        "get_version",
        "resolve_config",
    }
    missing = expected - set(api.__all__)
    assert not missing, f"Missing from api.__all__: {sorted(missing)}"


def test_api_symbols_are_callable_or_types() -> None:
    """Every exported symbol is either callable or a type/class."""
    for name in api.__all__:
        obj = getattr(api, name)
        assert callable(obj) or inspect.isclass(obj)


def test_resolve_config_variants() -> None:
    """None means defaults, mappings layer over defaults, Config passes through."""
    assert api.resolve_config().wrap_width == 100
    assert api.resolve_config({"wrap_width": 72}).wrap_width == 72
    cfg = make_config(enabled=False)
    assert api.resolve_config(cfg) is cfg


def test_resolve_config_reports_bad_values() -> None:
    """Bad mapping values become diagnostics, not exceptions."""
    cfg = api.resolve_config({"wrap_width": "wide", "bogus": 1})
    assert cfg.wrap_width == 100
    assert len(cfg.diagnostics) == 2


def test_classify_honors_config() -> None:
    """Span toggles come from the config."""
    lines = ["// MARK: - Section"]
    assert api.classify(lines)
    assert api.classify(lines, {"enabled": False}) == []
    kinds = {s.kind for s in api.classify(lines, {"render_mark_separators": False})}
    assert kinds == {api.SpanKind.MARK_BOLD}


def test_wrap_width_from_config_and_argument() -> None:
    """An explicit width wins over the configured one."""
    from_config = api.compute_wrap_edits([LONG_LINE], config={"wrap_width": 60})
    explicit = api.compute_wrap_edits([LONG_LINE], 60, config={"wrap_width": 120})
    assert from_config == explicit
    assert all(len(line) <= 60 for line in from_config[0].text.split("\n"))
    assert api.compute_wrap_edits([LONG_LINE], config={"wrap_width": 200}) == []


def test_wrap_policy_overrides() -> None:
    """Keyword policy flags override the configuration."""
    lines = ["// First sentence.", "// Second one"]
    cfg = MutableConfig.from_defaults()
    cfg.avoid_punctuation_breaks = True
    frozen = cfg.freeze()
    assert api.compute_wrap_edits(lines, config=frozen) == []
    assert api.compute_wrap_edits(lines, config=frozen, avoid_punctuation_breaks=False)


def test_convert_and_title_case() -> None:
    """The edit families are exposed unchanged."""
    assert api.compute_convert_edits(["// x"]) == [api.InsertEdit(0, 2, "/")]
    assert api.compute_title_case_edits(["// MARK: foo"]) == [api.ReplaceEdit(0, 0, "// MARK: Foo")]


def test_get_version() -> None:
    """The version is a non-empty string."""
    assert api.get_version()
