"""Labyrinth Adventures CLI entry point.

Provides subcommands for playing in the Textual explorer and for printing a
freshly generated dungeon. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import just_fix_windows_console
from dotenv import load_dotenv

just_fix_windows_console()


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def _add_dungeon_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=None, help="Cells per row (default: env LABYRINTH_WIDTH or 10)")
    p.add_argument("--height", type=int, default=None, help="Rows per floor (default: env LABYRINTH_HEIGHT or 10)")
    p.add_argument("--floors", type=int, default=None, help="Number of floors (default: env LABYRINTH_FLOORS or 3)")
    p.add_argument(
        "--radius",
        dest="view_radius",
        type=int,
        default=None,
        help="Manhattan view radius (default: env LABYRINTH_VIEW_RADIUS or 3)",
    )
    p.add_argument(
        "--secret-chance",
        dest="secret_door_chance",
        type=float,
        default=None,
        help="Chance a standing interior wall hides a door (default: env LABYRINTH_SECRET_CHANCE or 0.10)",
    )
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: env LABYRINTH_SEED or random)")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Labyrinth Adventures

    Explore a procedurally generated, multi-floor maze under fog of war.
    Configuration can be provided via CLI flags or environment variables.
    If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          LABYRINTH_WIDTH          Cells per row (default: 10)
          LABYRINTH_HEIGHT         Rows per floor (default: 10)
          LABYRINTH_FLOORS         Number of floors (default: 3)
          LABYRINTH_VIEW_RADIUS    Manhattan view radius (default: 3)
          LABYRINTH_SECRET_CHANCE  Secret door probability per wall (default: 0.10)
          LABYRINTH_SEED           RNG seed (default: random)
          LABYRINTH_LOG_LEVEL      debug|info|warn|error (default: warn)

        Examples:
          # Play with the defaults
          python run.py play

          # A single-floor 20x12 maze with no secret doors
          python run.py play --width 20 --height 12 --floors 1 --secret-chance 0

          # Print every floor of seed 42 fully revealed
          python run.py render --seed 42

        Controls:
          W/A/S/D or arrows   Move
          F                   Search for secret doors
          E                   Use stairs (down wins when both are present)
          Esc / Q             Quit
        """
    )

    parser = argparse.ArgumentParser(
        prog="Labyrinth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Labyrinth Adventures {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    play_parser = subparsers.add_parser(
        "play",
        help="Explore a dungeon in the terminal UI",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a dungeon and explore it interactively.",
    )
    _add_dungeon_flags(play_parser)
    play_parser.set_defaults(command="play")

    render_parser = subparsers.add_parser(
        "render",
        help="Print a generated dungeon with every cell revealed",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a dungeon and print each floor (or its JSON dump).",
    )
    _add_dungeon_flags(render_parser)
    render_parser.add_argument("--json", action="store_true", help="Print the dungeon as JSON instead")
    render_parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print the compact wall dump (marks hidden doors with S)",
    )
    render_parser.set_defaults(command="render")

    # If no subcommand provided, default to play
    if len(argv) == 0:
        argv = ["play"]

    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace):
    from labyrinth.dungeon import DungeonConfig

    overrides = {
        name: getattr(args, name, None)
        for name in ("width", "height", "floors", "view_radius", "secret_door_chance", "seed")
    }
    return DungeonConfig.from_env(**overrides).validate()


def _banner(config) -> str:
    color = _color_enabled()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    title = f"{Fore.CYAN}{Style.BRIGHT}Labyrinth Adventures{Style.RESET_ALL}" if color else "Labyrinth Adventures"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Size:'):12} {value(f'{config.width}x{config.height}')}",
        f"  {label('Floors:'):12} {value(config.floors)}",
        f"  {label('Radius:'):12} {value(config.view_radius)}",
        f"  {label('Secrets:'):12} {value(config.secret_door_chance)}",
        f"  {label('Seed:'):12} {value(config.seed if config.seed is not None else 'random')}",
        divider,
        "",
    ]
    return "\n".join(lines)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    from labyrinth.dungeon import ConfigurationError, Dungeon
    from labyrinth.logging_utils import log

    try:
        config = _build_config(args)
    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    mode = (getattr(args, "command", None) or "play").lower()

    if mode == "render":
        from labyrinth.render import render_full

        d = Dungeon(config)
        if args.json:
            print(json.dumps(d.to_json(), indent=2))
        elif args.ascii:
            print(d.to_ascii())
        else:
            for i, m in enumerate(d.floors):
                print("\n".join(render_full(m, None, i, d.floor_count)))
                print()
        return 0

    def handle_sigint(sig, frame):
        print("\n[INFO] Leaving the labyrinth...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    print(_banner(config))
    log.info(event="startup", mode=mode, width=config.width, height=config.height, floors=config.floors)

    from labyrinth.tui import run_tui

    run_tui(config)
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
