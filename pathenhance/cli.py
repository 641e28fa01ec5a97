"""Command-line interface for pathenhance.

Responsibilities:
- Expose user-facing commands for PATH resolution and diagnostics.
- Convert CLI options into `PathEnhancerOptions` and run the enhancer.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_path_info,
    echo_shell_configs,
    exit_with_command_error,
    render_export_line,
)
from .config import OptionsLoader, PathEnhancerOptions
from .enhancer import PathEnhancer
from .errors import PathEnhanceError

app = typer.Typer(
    name="pathenhance",
    no_args_is_help=True,
    help="Resolve the full executable search path for GUI-launched processes.",
)

ConfigFileOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML options file (overrides PATHENHANCE_* env)."),
]
DebugOption = Annotated[
    bool | None,
    typer.Option("--debug/--no-debug", help="Print resolution diagnostics to stderr."),
]
TimeoutOption = Annotated[
    int | None,
    typer.Option("--timeout-ms", help="Timeout for the shell probe command in milliseconds."),
]
ValidateOption = Annotated[
    bool | None,
    typer.Option(
        "--validate/--no-validate",
        help="Drop directories that do not exist on disk.",
    ),
]


def _load_base_options(config_file: Path | None) -> PathEnhancerOptions:
    """Load options from YAML when requested, else from the environment."""

    if config_file is None:
        try:
            return OptionsLoader.from_env(os.environ)
        except ValueError as exc:
            raise PathEnhanceError(
                stage="config",
                detail=f"Invalid PATHENHANCE_* environment value: {exc}",
                hint="Fix or unset the offending environment variable.",
            ) from exc

    try:
        return OptionsLoader.from_yaml(config_file)
    except FileNotFoundError as exc:
        raise PathEnhanceError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PathEnhanceError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PathEnhanceError(
            stage="config",
            detail=f"Failed to read config file `{config_file}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_options(
    config_file: Path | None,
    debug: bool | None,
    timeout_ms: int | None,
    validate: bool | None,
) -> PathEnhancerOptions:
    """Apply explicit CLI overrides on top of file or environment options."""

    base = _load_base_options(config_file)
    options = PathEnhancerOptions(
        debug=debug if debug is not None else base.debug,
        timeout_ms=timeout_ms if timeout_ms is not None else base.timeout_ms,
        validate_paths=validate if validate is not None else base.validate_paths,
    )
    try:
        options.validate()
    except ValueError as exc:
        raise PathEnhanceError(
            stage="config",
            detail=str(exc),
            hint="Pass a positive value to `--timeout-ms`.",
        ) from exc
    return options


def _build_enhancer(
    config_file: Path | None,
    debug: bool | None,
    timeout_ms: int | None,
    validate: bool | None,
) -> PathEnhancer:
    return PathEnhancer(_resolve_options(config_file, debug, timeout_ms, validate))


@app.command("show")
def show_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
    timeout_ms: TimeoutOption = None,
    validate: ValidateOption = None,
) -> None:
    """Print the enhanced PATH."""

    try:
        enhancer = _build_enhancer(config_file, debug, timeout_ms, validate)
    except PathEnhanceError as exc:
        exit_with_command_error("show", exc)
    typer.echo(enhancer.get_enhanced_system_path())


@app.command("system")
def system_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
    timeout_ms: TimeoutOption = None,
) -> None:
    """Print the PATH reported by a spawned shell."""

    try:
        enhancer = _build_enhancer(config_file, debug, timeout_ms, None)
        system_path = enhancer.get_system_path()
        if system_path is None:
            raise PathEnhanceError(
                stage="probe",
                detail="The shell probe did not return a PATH.",
                hint="Rerun with `--debug` to see why the probe command failed.",
            )
    except PathEnhanceError as exc:
        exit_with_command_error("system", exc)
    typer.echo(system_path)


@app.command("shell-config")
def shell_config_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
) -> None:
    """Print the PATH directories declared in shell startup files."""

    try:
        enhancer = _build_enhancer(config_file, debug, None, None)
        shell_path = enhancer.get_path_from_shell_config()
        if shell_path is None:
            raise PathEnhanceError(
                stage="shell-config",
                detail="No PATH definitions were found in shell startup files.",
                hint="Run `pathenhance configs` to see which files were inspected.",
            )
    except PathEnhanceError as exc:
        exit_with_command_error("shell-config", exc)
    typer.echo(shell_path)


@app.command("inspect")
def inspect_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
    timeout_ms: TimeoutOption = None,
    validate: ValidateOption = None,
) -> None:
    """Print the enhanced PATH one segment per line with existence markers."""

    try:
        enhancer = _build_enhancer(config_file, debug, timeout_ms, validate)
    except PathEnhanceError as exc:
        exit_with_command_error("inspect", exc)
    echo_path_info(enhancer.inspect_path())


@app.command("configs")
def configs_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
) -> None:
    """List candidate shell startup files."""

    try:
        enhancer = _build_enhancer(config_file, debug, None, None)
    except PathEnhanceError as exc:
        exit_with_command_error("configs", exc)
    echo_shell_configs(enhancer.describe_shell_configs())


@app.command("export")
def export_command(
    config_file: ConfigFileOption = None,
    debug: DebugOption = None,
    timeout_ms: TimeoutOption = None,
    validate: ValidateOption = None,
) -> None:
    """Print a shell statement that sets PATH to the enhanced value."""

    try:
        enhancer = _build_enhancer(config_file, debug, timeout_ms, validate)
    except PathEnhanceError as exc:
        exit_with_command_error("export", exc)
    typer.echo(
        render_export_line(enhancer.get_enhanced_system_path(), enhancer.host.is_windows)
    )


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
