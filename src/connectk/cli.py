"""
Command-line interface for the Connect-K engine.

Commands:
- repl: Play a game by feeding moves and commands line by line
- show: Print the board for a state string
- check: Validate a state string and print its canonical form
- config-init: Write the default configuration file
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer

from .errors import ConnectKError
from .game import GameResult, GameSession, Player, parse_move
from .utils import Config, Logger, MoveRecord, console, get_default_config, print_board, print_config

app = typer.Typer(
    name="connectk",
    help="Connect-K rules engine - play, inspect and validate games",
    no_args_is_help=True,
)

REPL_HELP = """\
<column>      drop a stone for the player to move
/pov N        submit moves as player N (1 = X, 2 = O, 0 = whoever is to move)
/print        show the board
/state        show the state string
/options      show the options string
/moves        list legal columns
/result       show the game result
/load STATE   load a state string
/reset        clear the board
/help         show this help
/exit         leave"""


def _load_config(config_path: Optional[Path]) -> Config:
    if config_path and config_path.exists():
        return Config.load(str(config_path))
    return get_default_config()


def _describe(session: GameSession) -> str:
    result = session.result()
    if result is GameResult.DRAW:
        return "draw"
    if result.is_over():
        return f"{result.winner.symbol} wins"
    return f"ongoing, {session.to_move().symbol} to move"


def _echo(text: str) -> None:
    console.print(text, markup=False, highlight=False)


def _open_session(
    options: Optional[str],
    state: Optional[str],
    config: Config,
    logger: Logger,
) -> GameSession:
    try:
        return GameSession(
            options=options or config.options,
            state=state,
            max_width=config.max_width,
            max_height=config.max_height,
        )
    except ConnectKError as e:
        logger.log_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def repl(
    options: Optional[str] = typer.Option(
        None, "--options", "-o", help="Options string, e.g. 7x6@4"
    ),
    state: Optional[str] = typer.Option(
        None, "--state", "-s", help="State string to resume from"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Write a JSONL move log to this directory"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print requested output"),
    input_file: typer.FileText = typer.Option(
        "-", "--input", "-i", help="Read commands from this file instead of stdin"
    ),
) -> None:
    """Play a game, one move or command per line."""
    config = _load_config(config_path)
    if log_dir is not None:
        config.log_dir = str(log_dir)
    if quiet:
        config.verbose = False
    config.ensure_dirs()

    logger = Logger(log_dir=config.log_dir, verbose=config.verbose)
    session = _open_session(options, state, config, logger)
    logger.log_info(f"Game {session.export_options()} - {_describe(session)}")

    pov: Optional[Player] = None
    move_number = session.board.stone_count

    for raw in input_file:
        line = raw.strip()
        if not line:
            continue

        if line.startswith("/"):
            parts = line.split(maxsplit=1)
            command = parts[0]
            arg = parts[1] if len(parts) > 1 else None

            if command in ("/exit", "/quit"):
                break
            elif command == "/help":
                _echo(REPL_HELP)
            elif command == "/print":
                _echo(session.render())
            elif command == "/state":
                _echo(session.export_state())
            elif command == "/options":
                _echo(session.export_options())
            elif command == "/moves":
                _echo(" ".join(str(c) for c in session.legal_moves()))
            elif command == "/result":
                _echo(_describe(session))
            elif command == "/pov":
                try:
                    player_id = int(arg) if arg is not None else 0
                    pov = None if player_id == 0 else Player.from_id(player_id)
                except ValueError:
                    logger.log_error(f'"{arg}" is not a valid player')
            elif command == "/load":
                if arg is None:
                    logger.log_error("/load needs a state string")
                    continue
                try:
                    session.import_state(arg)
                except ConnectKError as e:
                    logger.log_error(str(e))
                    continue
                move_number = session.board.stone_count
                logger.log_info(f"Loaded - {_describe(session)}")
            elif command == "/reset":
                session.import_state(None)
                move_number = 0
            else:
                logger.log_error(f"unknown command {command}, try /help")
            continue

        try:
            column = parse_move(line)
            mover = session.board.active_player
            session.make_move(column, pov)
        except ConnectKError as e:
            logger.log_error(str(e))
            continue

        move_number += 1
        logger.log_move(MoveRecord(
            move_number=move_number,
            player=mover.symbol,
            column=column,
            state=session.export_state(),
            result=session.result().value,
        ))
        if session.result().is_over():
            logger.log_success(f"Game over: {_describe(session)}")


@app.command()
def show(
    state: str = typer.Argument(..., help="State string"),
    options: Optional[str] = typer.Option(
        None, "--options", "-o", help="Options string, e.g. 7x6@4"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Print the board described by a state string."""
    config = _load_config(config_path)
    logger = Logger(verbose=config.verbose)
    session = _open_session(options, state, config, logger)

    print_board(session.render(), title=session.export_options())
    _echo(_describe(session))


@app.command()
def check(
    state: str = typer.Argument(..., help="State string"),
    options: Optional[str] = typer.Option(
        None, "--options", "-o", help="Options string, e.g. 7x6@4"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Validate a state string; exits with status 1 if it is rejected."""
    config = _load_config(config_path)
    logger = Logger(verbose=config.verbose)
    session = _open_session(options, state, config, logger)

    _echo(session.export_state())
    _echo(_describe(session))


@app.command("config-init")
def config_init(
    path: Path = typer.Argument(Path("connectk.yaml"), help="Where to write the config"),
) -> None:
    """Write the default configuration to a YAML file."""
    config = get_default_config()
    path.parent.mkdir(parents=True, exist_ok=True)
    config.save(str(path))
    print_config(config)
    console.print(f"[green]Saved config to {path}[/]")


if __name__ == "__main__":
    app()
