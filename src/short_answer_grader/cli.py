from __future__ import annotations

import json
from pathlib import Path

import typer
import yaml

from .config import GraderConfig, load_config
from .grader import Grader

app = typer.Typer(help="Short answer grader CLI.", no_args_is_help=True)

# Output renderings the grade command knows how to emit.
OUTPUT_FORMATS = {"json", "list"}


@app.command("grade")
def grade_command(
    reference: str = typer.Argument(..., help="The known-correct answer."),
    candidate: str = typer.Argument(..., help="The submitted answer."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    dictionary: Path | None = typer.Option(
        None,
        "--dictionary",
        "-d",
        help="Word list to try before the configured search path.",
    ),
    typo_max_distance: int | None = typer.Option(
        None,
        "--typo-max-distance",
        help="Largest edit distance still reported as a typo.",
    ),
    output_format: str = typer.Option(
        "json", "--format", "-f", help="Output format: 'json' or 'list'."
    ),
) -> None:
    """Grade CANDIDATE against REFERENCE and print the verdict."""
    normalized_format = output_format.lower().strip()
    if normalized_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format '{output_format}'. Choose from: "
            + ", ".join(sorted(OUTPUT_FORMATS)),
            param_hint="--format",
        )
    cfg = load_config(config)
    _apply_overrides(cfg, dictionary, typo_max_distance)
    try:
        grader = Grader.from_config(cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    result = grader.grade(reference, candidate)
    if normalized_format == "list":
        typer.echo(str(result))
    else:
        typer.echo(json.dumps(result.to_dict(), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = GraderConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: GraderConfig,
    dictionary: Path | None,
    typo_max_distance: int | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if dictionary:
        # Config stores string paths so cast Path objects accordingly.
        config.dictionary_path = str(dictionary)
    if typo_max_distance is not None:
        config.typo_max_distance = typo_max_distance


if __name__ == "__main__":
    main()
