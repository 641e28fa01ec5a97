"""Unit tests for YAML/environment option loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathenhance.config import DEFAULT_TIMEOUT_MS, OptionsLoader, PathEnhancerOptions


def test_options_defaults() -> None:
    """Options should default to quiet, validating, 5 second probes."""

    options = PathEnhancerOptions()

    assert options.debug is False
    assert options.logger is None
    assert options.timeout_ms == DEFAULT_TIMEOUT_MS == 5000
    assert options.validate_paths is True


def test_options_validate_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="`timeout_ms` must be a positive integer"):
        PathEnhancerOptions(timeout_ms=0).validate()


def test_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should accept native and textual values."""

    config_path = tmp_path / "pathenhance.yml"
    config_path.write_text(
        """
debug: " yes "
timeout_ms: "1500"
validate_paths: false
""".strip(),
        encoding="utf-8",
    )

    options = OptionsLoader.from_yaml(config_path)

    assert options == PathEnhancerOptions(debug=True, timeout_ms=1500, validate_paths=False)


def test_from_yaml_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert OptionsLoader.from_yaml(config_path) == PathEnhancerOptions()


def test_from_yaml_rejects_unknown_keys_and_non_mappings(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unsupported payloads."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("timeout: 10\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"unsupported key\(s\): timeout"):
        OptionsLoader.from_yaml(unknown_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- debug\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must contain a top-level mapping"):
        OptionsLoader.from_yaml(list_path)


def test_from_yaml_rejects_invalid_typed_values(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yml"
    config_path.write_text("validate_paths: maybe\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`validate_paths` must be a boolean"):
        OptionsLoader.from_yaml(config_path)


def test_from_yaml_reports_syntax_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.yml"
    config_path.write_text("debug: [unterminated\n", encoding="utf-8")

    with pytest.raises(ValueError, match="could not be parsed"):
        OptionsLoader.from_yaml(config_path)


def test_from_env_reads_prefixed_variables_and_ignores_blanks() -> None:
    """Environment loader should parse `PATHENHANCE_*` keys and skip blank values."""

    options = OptionsLoader.from_env(
        {
            "PATHENHANCE_DEBUG": " true ",
            "PATHENHANCE_TIMEOUT_MS": " 250 ",
            "PATHENHANCE_VALIDATE_PATHS": "   ",
        }
    )

    assert options == PathEnhancerOptions(debug=True, timeout_ms=250, validate_paths=True)


def test_from_env_rejects_invalid_timeout() -> None:
    with pytest.raises(ValueError, match="`PATHENHANCE_TIMEOUT_MS` must be a positive integer"):
        OptionsLoader.from_env({"PATHENHANCE_TIMEOUT_MS": "-1"})
