"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PathEnhanceError
from .models import PathInfo, ShellConfigInfo


def exit_with_command_error(command_name: str, exc: PathEnhanceError) -> NoReturn:
    """Print the failing stage and hint, then exit with code 1."""

    typer.secho(
        f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
        fg=typer.colors.RED,
        err=True,
    )
    if exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_path_info(info: PathInfo) -> None:
    """Print one segment per line, marking segments missing on disk."""

    invalid = set(info.invalid_paths)
    for segment in info.paths:
        marker = "missing" if segment in invalid else "ok"
        typer.echo(f"[{marker}] {segment}")
    typer.echo(
        f"Segments: {len(info.paths)} (valid: {info.valid_path_count}, "
        f"missing: {len(info.invalid_paths)})"
    )
    typer.echo(f"Source: {info.source}")


def echo_shell_configs(infos: list[ShellConfigInfo]) -> None:
    """Print candidate startup files with existence and PATH statement counts."""

    if not infos:
        typer.echo("No shell configuration files apply to this host.")
        return
    for info in infos:
        status = "present" if info.exists else "absent"
        typer.echo(
            f"{info.file_path} shell={info.shell_type} status={status} "
            f"path_definitions={info.path_definitions}"
        )


def render_export_line(path_value: str, windows: bool) -> str:
    """Return a shell statement that sets PATH to `path_value`."""

    if windows:
        return f"set PATH={path_value}"
    escaped = (
        path_value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("`", "\\`")
    )
    return f'export PATH="{escaped}"'
