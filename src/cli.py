"""Command line access to the archive codec and the translator (works on local files, no engine access)."""

from pathlib import Path

import typer

from src.core.config import get_settings
from src.core.exceptions import ReplayError
from src.core.logging import configure_logging
from src.replay.archive import read_archive, write_archive
from src.replay.translator import to_move
from src.replay.view_models import ViewGame

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    log_level: str = typer.Option("", help="overrides REPLAY_LOG_LEVEL"),
) -> None:
    configure_logging(log_level or get_settings().log_level)


@app.command("pack")
def pack(
    source: Path = typer.Argument(..., help="replay record as JSON (engine format)"),
    target: Path = typer.Argument(..., help="archive to write"),
) -> None:
    """Compress a replay record into a single-member archive."""
    try:
        record = ViewGame.model_validate_json(source.read_bytes())
    except (ValueError, OSError) as exc:
        typer.echo(f"cannot read replay record {source}: {exc}", err=True)
        raise typer.Exit(code=1)
    try:
        write_archive(target, record, get_settings().archive_compresslevel)
    except (ReplayError, OSError) as exc:
        typer.echo(f"cannot write archive {target}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{record.game.id}: {len(record.frames)} frames -> {target}")


@app.command("unpack")
def unpack(
    source: Path = typer.Argument(..., help="archive to read"),
) -> None:
    """Print the replay record stored in an archive."""
    try:
        record = read_archive(source)
    except (ReplayError, OSError) as exc:
        typer.echo(f"{source}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(record.to_json())


@app.command("move")
def move(
    source: Path = typer.Argument(..., help="archive to read"),
    turn: int = typer.Option(..., "--turn", help="turn number (starting at 0)"),
    snake_id: str = typer.Option(
        ..., "--snake", help="ID of the snake receiving the request"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="check the frame's recorded turn"
    ),
) -> None:
    """Print the request body the snake received on that turn."""
    try:
        record = read_archive(source)
        state = to_move(
            record,
            turn,
            snake_id,
            strict_turns=strict or get_settings().strict_turns,
        )
    except (ReplayError, OSError) as exc:
        typer.echo(f"{source}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(state.to_json())


if __name__ == "__main__":
    app()
