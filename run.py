"""mazegame CLI entry point.

Generates perfect mazes, prints the path between two cells, or runs the JSON
HTTP API consumed by the game client. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from pathlib import Path
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False
if _COLOR_ENABLED:  # pragma: no cover
    _color_init()


def _load_version() -> str:
    try:
        return Path(__file__).with_name("VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def _coord(text: str) -> tuple[int, int]:
    parts = text.split(",")
    try:
        if len(parts) != 2:
            raise ValueError(text)
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got '{text}'") from None


def _add_maze_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=None, help="Maze width in cells (default: env MAZE_WIDTH or 10)")
    p.add_argument("--height", type=int, default=None, help="Maze height in cells (default: env MAZE_HEIGHT or 10)")
    p.add_argument(
        "--preset",
        choices=["small", "medium", "large", "huge"],
        default=None,
        help="Square size preset: small=5, medium=10, large=15, huge=20",
    )
    p.add_argument("--seed", default=None, help="Integer or text seed (default: env MAZE_SEED or random)")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Game core

    Generate perfect mazes (randomized Prim growth), query the unique path
    between two cells, or serve both over a small JSON API. Configuration can
    be provided via CLI flags or environment variables. If both are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_WIDTH      Default maze width (default: 10)
          MAZE_HEIGHT     Default maze height (default: 10)
          MAZE_PRESET     small | medium | large | huge
          MAZE_SEED       Default seed (integer or text)
          MAZE_LOG_LEVEL  debug | info | warn | error (default: info)
          HOST / PORT     Bind address for the API server (default: 127.0.0.1:5000)

        Examples:
          # Print a random 10x10 maze
          python run.py generate

          # Reproducible 15x15 maze
          python run.py generate --preset large --seed 42

          # Path from the top-left to the bottom-right corner, drawn on the maze
          python run.py path --width 8 --height 6 --seed 7 --draw

          # Serve the JSON API
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegame",
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
        version=f"Maze Game {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a perfect maze and print it as text",
    )
    _add_maze_options(gen_parser)
    gen_parser.add_argument("--coords", action="store_true", help="Also print the cell coordinate table")
    gen_parser.add_argument("--json", action="store_true", help="Print the passage layout as JSON instead")
    gen_parser.set_defaults(command="generate")

    path_parser = subparsers.add_parser(
        "path",
        help="Print the path between two cells",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze and print the unique path between two cells",
    )
    _add_maze_options(path_parser)
    path_parser.add_argument("--start", type=_coord, default=None, help="Start cell x,y (default: 0,0)")
    path_parser.add_argument("--end", type=_coord, default=None, help="End cell x,y (default: bottom-right corner)")
    path_parser.add_argument("--draw", action="store_true", help="Draw the path on the maze")
    path_parser.set_defaults(command="path")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the JSON HTTP API",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask maze API",
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 127.0.0.1)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def _build_config(args):
    from mazegame.core import MazeConfig

    if args.preset:
        base = MazeConfig.from_preset(args.preset)
        width = args.width if args.width is not None else base.width
        height = args.height if args.height is not None else base.height
    else:
        width, height = args.width, args.height
    return MazeConfig.from_env(width=width, height=height, seed=args.seed)


def _banner(mode: str, host: str, port: int) -> str:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Maze API Bootup{Style.RESET_ALL}" if _COLOR_ENABLED else "Maze API Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        divider,
        "",
    ]
    return "\n".join(lines)


def _error(message: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {message}", file=sys.stderr)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    from mazegame.core import MazeError, build_maze, find_path, grid_to_dict, path_coords
    from mazegame.core import path_directions, render_ascii, render_coordinates
    from mazegame.logging_utils import log

    mode = (getattr(args, "command", None) or "generate").lower()

    if mode == "server":
        host = args.host or os.getenv("HOST", "127.0.0.1")
        port = int(args.port or os.getenv("PORT", "5000"))
        debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")

        def handle_sigint(sig, frame):
            print("\n[INFO] Shutting down server...")
            sys.exit(0)

        signal.signal(signal.SIGINT, handle_sigint)
        print(_banner(mode, host, port))
        log.info(event="listen", host=host, port=port, debug=debug)
        from mazegame.server import start_server

        start_server(host=host, port=port, debug=debug)
        return 0

    try:
        config = _build_config(args)
        grid, gen = build_maze(config)
        log.debug(event="cli_generate", width=grid.width, height=grid.height, seed=gen.seed)
        if mode == "path":
            start = args.start or (0, 0)
            end = args.end or (grid.width - 1, grid.height - 1)
            path = find_path(grid, start, end)
            print(f"Seed: {gen.seed}  Size: {grid.width}x{grid.height}")
            if args.draw:
                print(render_ascii(grid, path=path))
            print(" -> ".join(f"{x},{y}" for x, y in path_coords(path)))
            print(f"Steps: {len(path) - 1}  Moves: {''.join(d.letter for d in path_directions(path)) or '-'}")
            return 0
        if args.json:
            payload = grid_to_dict(grid)
            payload["seed"] = gen.seed
            print(json.dumps(payload))
            return 0
        print(f"Seed: {gen.seed}  Size: {grid.width}x{grid.height}")
        print(render_ascii(grid))
        if args.coords:
            print(render_coordinates(grid))
        return 0
    except MazeError as e:
        _error(e.message)
        return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
