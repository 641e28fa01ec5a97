"""Configuration model and loaders for pathenhance.

Responsibilities:
- Define enhancer options as an immutable dataclass.
- Provide loader entry points for YAML- and environment-based options.

Key types:
- `PathEnhancerOptions`: options for one `PathEnhancer`.
- `OptionsLoader`: static construction helpers for `PathEnhancerOptions`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .logger import Logger
from .parsing import normalize_optional_string, parse_boolean_token, parse_positive_int

DEFAULT_TIMEOUT_MS = 5000


@dataclass(frozen=True, slots=True)
class PathEnhancerOptions:
    """Options for PATH resolution.

    Attributes:
        debug: Enable the default console logger.
        logger: Custom logger; `None` selects a `ConsoleLogger` at enhancer construction.
        timeout_ms: Probe command timeout in milliseconds.
        validate_paths: Drop merged segments that do not exist on disk.
    """

    debug: bool = False
    logger: Logger | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    validate_paths: bool = True

    def validate(self) -> None:
        """Validate option values before use."""

        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ValueError("`timeout_ms` must be a positive integer.")
        if self.timeout_ms <= 0:
            raise ValueError("`timeout_ms` must be a positive integer.")


class OptionsLoader:
    """Factory methods for creating `PathEnhancerOptions` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"debug", "timeout_ms", "validate_paths"})
    ENV_DEBUG = "PATHENHANCE_DEBUG"
    ENV_TIMEOUT_MS = "PATHENHANCE_TIMEOUT_MS"
    ENV_VALIDATE_PATHS = "PATHENHANCE_VALIDATE_PATHS"

    @staticmethod
    def from_yaml(path: Path) -> PathEnhancerOptions:
        """Create validated options from a YAML file."""

        payload = OptionsLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return OptionsLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PathEnhancerOptions:
        """Create validated options from `PATHENHANCE_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        debug_token = normalize_optional_string(env_map.get(OptionsLoader.ENV_DEBUG))
        timeout_token = normalize_optional_string(env_map.get(OptionsLoader.ENV_TIMEOUT_MS))
        validate_token = normalize_optional_string(
            env_map.get(OptionsLoader.ENV_VALIDATE_PATHS)
        )

        options = PathEnhancerOptions(
            debug=(
                parse_boolean_token(debug_token, OptionsLoader.ENV_DEBUG)
                if debug_token is not None
                else False
            ),
            timeout_ms=(
                parse_positive_int(timeout_token, OptionsLoader.ENV_TIMEOUT_MS)
                if timeout_token is not None
                else DEFAULT_TIMEOUT_MS
            ),
            validate_paths=(
                parse_boolean_token(validate_token, OptionsLoader.ENV_VALIDATE_PATHS)
                if validate_token is not None
                else True
            ),
        )
        options.validate()
        return options

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str) -> PathEnhancerOptions:
        """Create validated options from an already-parsed mapping."""

        unknown = sorted(set(payload).difference(OptionsLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        debug = False
        if payload.get("debug") is not None:
            debug = parse_boolean_token(payload["debug"], "debug")
        timeout_ms = DEFAULT_TIMEOUT_MS
        if payload.get("timeout_ms") is not None:
            timeout_ms = parse_positive_int(payload["timeout_ms"], "timeout_ms")
        validate_paths = True
        if payload.get("validate_paths") is not None:
            validate_paths = parse_boolean_token(payload["validate_paths"], "validate_paths")

        options = PathEnhancerOptions(
            debug=debug,
            timeout_ms=timeout_ms,
            validate_paths=validate_paths,
        )
        options.validate()
        return options

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload
