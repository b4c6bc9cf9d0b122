import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from statepack.compare import contains, render_result, render_summary

app = typer.Typer(help="statekit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("statekit")
    except PackageNotFoundError:
        from statekit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show statekit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
            default=str,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _load_json_document(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@app.command()
def compare(
    actual: Path = typer.Argument(..., help="Path to JSON document holding the actual state."),
    expected: Path = typer.Argument(..., help="Path to JSON document holding the expected state."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Check that the actual document contains the expected document's state."""
    try:
        actual_value = _load_json_document(actual)
        expected_value = _load_json_document(expected)
    except (OSError, ValueError) as error:
        message = f"compare failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 2,
                    "message": message,
                    "actual_path": str(actual),
                    "expected_path": str(expected),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=2) from error

    result = contains(actual_value, expected_value)
    exit_code = 0 if result.success else 1

    if json_output:
        _echo_json(
            {
                "status": "pass" if result.success else "fail",
                "exit_code": exit_code,
                "actual_path": str(actual),
                "expected_path": str(expected),
                "result": result.to_dict(),
            }
        )
    elif result.success:
        _echo(render_summary(result))
    else:
        _echo(render_summary(result), force=True)
        _echo(render_result(result), force=True)

    if exit_code:
        raise typer.Exit(code=exit_code)


def main() -> None:
    app()
