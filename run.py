"""Cavern CLI entry point.

Provides subcommands for generating a dungeon (text map or JSON summary) and
for walking through one interactively. Accepts configuration via flags and
``CAVERN_*`` environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from cavern import __version__
from cavern.dungeon import Dungeon, DungeonConfig, DungeonError, parse_coord, parse_size
from cavern.dungeon.api_helpers import attempt_move, describe_node_and_exits, render_ascii
from cavern.logging_utils import log
from cavern.player import Player

_color_init()


def _color_enabled() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - closed/replaced stdout
        return False


def _add_dungeon_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--size", default=None, help="Dungeon size as ROWSxCOLUMNS (default: env CAVERN_ROWS/COLUMNS or 6x8)")
    parser.add_argument("--start", default=None, help="Start position as ROW,COL (default: random)")
    parser.add_argument("--end", default=None, help="End position as ROW,COL (default: random)")
    parser.add_argument("--treasure", type=int, default=None, help="Percentage of caves holding treasure (0-100)")
    parser.add_argument(
        "--interconnectivity", type=int, default=None, help="Extra tunnels added beyond the spanning tree"
    )
    parser.add_argument("--warp", action="store_true", default=None, help="Allow wraparound tunnels at the borders")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible dungeons")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Cavern dungeon generator

    Generate a grid dungeon whose tunnels form a random minimum spanning tree
    plus optional extra tunnels, then print it or walk through it. Flags take
    precedence over CAVERN_* environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          CAVERN_ROWS / CAVERN_COLUMNS    Dungeon size (default: 6x8)
          CAVERN_TREASURE_PERCENTAGE      Treasure percentage (default: 20)
          CAVERN_INTERCONNECTIVITY        Extra tunnels (default: 0)
          CAVERN_WARP_ALLOWED             1 to enable wraparound tunnels
          CAVERN_SEED                     Random seed
          CAVERN_LOG_LEVEL                debug|info|warn|error (default: info)

        Examples:
          # Print a random 6x8 dungeon
          python run.py generate

          # Reproducible 5x5 dungeon with three extra tunnels, as JSON
          python run.py generate --size 5x5 --interconnectivity 3 --seed 42 --json

          # Walk through a wrapping dungeon
          python run.py play --size 4x6 --warp
        """
    )

    parser = argparse.ArgumentParser(
        prog="Cavern",
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
        version=f"Cavern Dungeon Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a dungeon and print its text map (or a JSON summary with --json)",
    )
    _add_dungeon_options(gen_parser)
    gen_parser.add_argument("--json", action="store_true", help="Print the structured summary as JSON")
    gen_parser.set_defaults(command="generate")

    play_parser = subparsers.add_parser(
        "play",
        help="Walk through a generated dungeon",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Walk from the start cave to the end cave.

            Commands:
              n / s / e / w     Move north, south, east or west
              take              Pick up treasure in the current cave
              look              Describe the current cave
              map               Print the map
              quit              Leave the dungeon
            """
        ),
    )
    _add_dungeon_options(play_parser)
    play_parser.set_defaults(command="play")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DungeonConfig:
    rows = cols = None
    if getattr(args, "size", None):
        rows, cols = parse_size(args.size)
    return DungeonConfig.from_env(
        rows=rows,
        cols=cols,
        start=parse_coord(args.start) if getattr(args, "start", None) else None,
        end=parse_coord(args.end) if getattr(args, "end", None) else None,
        treasure_percentage=getattr(args, "treasure", None),
        interconnectivity=getattr(args, "interconnectivity", None),
        warp_allowed=getattr(args, "warp", None),
        seed=getattr(args, "seed", None),
    )


def _banner(dungeon: Dungeon) -> str:
    color = _color_enabled()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    title = f"{Fore.CYAN}{Style.BRIGHT}Cavern Dungeon{Style.RESET_ALL}" if color else "Cavern Dungeon"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    metrics = dungeon.metrics
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Size:'):12} {value(f'{dungeon.rows}x{dungeon.cols}')}",
        f"  {label('Seed:'):12} {value(dungeon.seed)}",
        f"  {label('Start:'):12} {value(dungeon.get_start_position())}",
        f"  {label('End:'):12} {value(dungeon.get_end_position())}",
        f"  {label('Tunnels:'):12} {value(len(dungeon.get_edges()))}",
        f"  {label('Treasure:'):12} {value(len(dungeon.get_treasure_nodes()))}",
    ]
    if metrics:
        lines.append(f"  {label('Build ms:'):12} {value(metrics.get('runtime_ms'))}")
    lines.extend([divider, ""])
    return "\n".join(lines)


def play(dungeon: Dungeon, input_fn=input, out=print) -> int:
    out(describe_node_and_exits(dungeon, dungeon.get_player_location())[0])
    while not dungeon.has_player_won():
        try:
            raw = input_fn("> ")
        except EOFError:
            break
        cmd = raw.strip().lower()
        if cmd in ("q", "quit", "exit"):
            break
        if cmd == "take":
            taken = dungeon.player.pick_up_treasure()
            out(f"You pick up {len(taken)} treasure(s)." if taken else "There is nothing here.")
            continue
        if cmd == "map":
            out(render_ascii(dungeon))
            continue
        if cmd == "look":
            out(describe_node_and_exits(dungeon, dungeon.get_player_location())[0])
            continue
        location, moved = attempt_move(dungeon, cmd)
        if not moved:
            out("You can't go that way.")
            continue
        out(describe_node_and_exits(dungeon, location)[0])
    if dungeon.has_player_won():
        out(f"You reached the end with {len(dungeon.player.treasures)} treasure(s).")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    try:
        config = build_config(args)
        dungeon = Dungeon.generate(config, player=Player())
    except DungeonError as exc:
        print(f"[ERROR] {exc.message}", file=sys.stderr)
        return 2
    log.debug(event="cli_dungeon_ready", mode=mode, seed=dungeon.seed)

    if mode == "play":
        return play(dungeon)
    if getattr(args, "json", False):
        print(json.dumps(dungeon.summary(), indent=2, default=str))
        return 0
    print(_banner(dungeon))
    print(render_ascii(dungeon))
    return 0


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
