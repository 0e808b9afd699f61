"""
Storyloom command line
Play, check and list world documents from the terminal.
"""
import sys
import logging
from pathlib import Path
from datetime import datetime

import click
from pydantic import ValidationError

from storyloom.config import EngineSettings, load_settings
from storyloom.engine.integrity import check_world
from storyloom.engine.session import GameSession
from storyloom.engine.world import WorldLoader
from storyloom.models.world import WorldModel

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> Path:
    """Configure logging to both console and file.

    Returns:
        Path to the log file
    """
    logs_dir = Path(log_dir or "logs")
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"storyloom_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - only errors unless debugging, so the game text stays readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


def load_world(world: str, settings: EngineSettings, validate: bool = True) -> WorldModel:
    """Load a world by path or id, trying the configured worlds dir first"""
    if settings.worlds_dir is not None:
        try:
            return WorldLoader(settings.worlds_dir).load(world, validate=validate)
        except FileNotFoundError:
            logger.debug(f"World '{world}' not in {settings.worlds_dir}, trying bundled worlds")
    return WorldLoader().load(world, validate=validate)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--log-dir', type=click.Path(file_okay=False, path_type=Path),
              default=None, help='Directory for log files')
@click.pass_context
def main(ctx: click.Context, debug: bool, log_dir: Path | None):
    """Storyloom text adventure engine."""
    settings = load_settings(log_dir=log_dir)
    log_file = setup_logging(debug=debug, log_dir=settings.log_dir)

    logger.info("=" * 60)
    logger.info("Storyloom starting")
    logger.info(f"Debug mode: {debug}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    ctx.obj = settings


@main.command()
@click.argument('world')
@click.option('--seed', type=int, default=None, help='Random seed for a reproducible game')
@click.option('--tick-every', type=int, default=None,
              help='Advance time automatically every N commands')
@click.pass_obj
def play(settings: EngineSettings, world: str, seed: int | None, tick_every: int | None):
    """Play WORLD (a file path or bundled world id)."""
    overrides = {"seed": seed, "tick_every": tick_every}
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    try:
        model = load_world(world, settings)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    session = GameSession(model, settings)
    for entry in session.log:
        click.echo(entry.content)
    click.echo("(type 'help' for commands, 'tick' to let time pass, 'quit' to leave)")

    while True:
        try:
            command = click.prompt(">", default="", show_default=False)
        except click.Abort:
            break

        command = command.strip()
        if not command:
            continue
        if command.lower() in ("quit", "exit"):
            break

        start = len(session.log)
        evolution = None
        if command.lower() == "tick":
            session.tick()
            evolution = session.evolve()
        else:
            session.submit(command)

        # clear replaces the log, so only its last line is new
        new_entries = session.log[-1:] if command.lower() == "clear" else session.log[start:]
        for entry in new_entries:
            if entry.type != "command":
                click.echo(entry.content)
        printed = {entry.content for entry in new_entries}
        if evolution is not None and evolution.applied and evolution.narrative_update not in printed:
            # narrative enhancements are folded into an earlier log entry
            click.echo(evolution.narrative_update)

    click.echo("Farewell.")
    logger.info("Storyloom session ended")


@main.command()
@click.argument('world')
@click.pass_obj
def check(settings: EngineSettings, world: str):
    """Check WORLD for integrity errors and warnings."""
    try:
        model = load_world(world, settings, validate=False)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        click.echo(f"World '{world}' does not match the schema:\n{e}")
        sys.exit(1)

    report = check_world(model)

    if report.errors:
        click.echo(f"ERRORS ({len(report.errors)}):")
        for error in report.errors:
            click.echo(f"  - {error}")

    if report.warnings:
        click.echo(f"WARNINGS ({len(report.warnings)}):")
        for warning in report.warnings:
            click.echo(f"  - {warning}")

    if report.is_valid:
        click.echo(f"World '{world}' is valid")
    else:
        click.echo(f"World '{world}' has {len(report.errors)} error(s)")
        sys.exit(1)


@main.command()
@click.pass_obj
def worlds(settings: EngineSettings):
    """List available worlds."""
    loaders = [WorldLoader()]
    if settings.worlds_dir is not None:
        loaders.insert(0, WorldLoader(settings.worlds_dir))

    found = [info for loader in loaders for info in loader.list_worlds()]
    if not found:
        click.echo("No worlds found")
        return
    for info in found:
        click.echo(f"{info['id']}: {info['name']}")


if __name__ == "__main__":
    main()
