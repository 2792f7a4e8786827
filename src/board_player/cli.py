# Area: Runner
"""
board_player.cli — Command-line interface
==========================================

Usage:
    board-player [options] [X|O] [<strength>]

    python -m board_player O                 # play O, listen on 23412
    python -m board_player X -p 23413 -p localhost:23412 --start
    python -m board_player -s 0 -10 -vv X    # random player, 10 moves

Help and usage errors exit with status 1.
"""

import argparse
import re
import sys
from typing import Any, Dict, List, Optional

from ._network.domain import DEFAULT_PORT
from ._search.registry import DEFAULT_STRATEGY, strategy_names
from .config import build_config, load_env_overrides, split_endpoint
from .errors import ConfigurationError, TransportError, UnknownStrategyError
from .runner import PlayerRunner

VERSION = "0.2"

HEADER = (
    f"Computer player V {VERSION}\n"
    "Search for a move on receiving a position in which we are expected to draw.\n"
)

# "-12" is the move budget, not a negative number
_MOVE_BUDGET = re.compile(r"^-(\d+)$")


class PlayerArgumentParser(argparse.ArgumentParser):
    """argparse with the player's exit status: 1 for help and usage errors."""

    def error(self, message: str) -> None:
        print(f"ERROR - {message}", file=sys.stderr)
        self.print_help_text(header=False)
        self.exit(1)

    def print_help_text(self, header: bool = True) -> None:
        if header:
            print(HEADER)
        print(self.format_help())
        print(format_strategy_list())


def format_strategy_list() -> str:
    lines = [" Available search strategies for option '-s':"]
    for i, name in enumerate(strategy_names()):
        default = " (default)" if i == DEFAULT_STRATEGY else ""
        lines.append(f"  {i:2d} : Strategy '{name}'{default}")
    return "\n".join(lines) + "\n"


def build_parser() -> PlayerArgumentParser:
    parser = PlayerArgumentParser(
        prog="board-player",
        usage="%(prog)s [options] [X|O] [<strength>]",
        add_help=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "  X                Play side X\n"
            "  O                Play side O (default)\n"
            "  <strength>       Search depth, depending on strategy\n"
            "  -<integer>       Maximal number of moves before terminating\n"
        ),
    )
    parser.add_argument("-h", "--help", action="store_true",
                        help="Print this help text")
    parser.add_argument("-v", dest="verbose", action="count", default=0,
                        help="Be verbose / more verbose (-vv)")
    parser.add_argument("-s", dest="strategy", type=int, default=DEFAULT_STRATEGY,
                        metavar="<strategy>",
                        help="Number of strategy to use for computer (see below)")
    parser.add_argument("-n", dest="change_eval", action="store_false",
                        help="Do not change evaluation function after own moves")
    parser.add_argument("--moves", dest="max_moves", type=int, default=None,
                        help=argparse.SUPPRESS)
    parser.add_argument("-p", dest="endpoints", action="append", default=[],
                        metavar="[host:][port]",
                        help=f"Connection to broadcast channel (default: {DEFAULT_PORT})")
    parser.add_argument("--start", action="store_true",
                        help="Open the game with an empty board")
    parser.add_argument("--size", dest="board_size", type=int, default=None,
                        help="Board size for --start (default: 5)")
    parser.add_argument("--time-limit", dest="time_limit_ms", type=int, default=None,
                        metavar="MS", help="Thinking time per side for --start (0: none)")
    parser.add_argument("--log-file", dest="log_file", default=None,
                        help="JSON log file ('' to disable)")
    parser.add_argument("words", nargs="*", metavar="X|O|<strength>",
                        help=argparse.SUPPRESS)
    return parser


def normalize_argv(argv: List[str]) -> List[str]:
    """Rewrite '-<integer>' budget flags to '--moves=<integer>'."""
    out = []
    for arg in argv:
        match = _MOVE_BUDGET.match(arg)
        out.append(f"--moves={match.group(1)}" if match else arg)
    return out


def args_to_values(
    args: argparse.Namespace,
    parser: PlayerArgumentParser,
    values: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge parsed arguments over env/default values."""
    values = dict(values or {})
    values["verbose"] = args.verbose
    values["strategy"] = args.strategy
    values["change_eval"] = args.change_eval
    values["start"] = args.start
    for key in ("max_moves", "board_size", "time_limit_ms", "log_file"):
        value = getattr(args, key)
        if value is not None:
            values[key] = value

    for endpoint in args.endpoints:
        # A bare number is the local port; anything else names the remote peer
        if endpoint[:1].isdigit() and endpoint[:1] != "0":
            try:
                values["lport"] = int(endpoint)
            except ValueError:
                parser.error(f"Invalid port {endpoint}")
            continue
        host, port = split_endpoint(endpoint, values.get("rport", DEFAULT_PORT))
        values["host"] = host
        values["rport"] = port

    for word in args.words:
        if word[:1] == "X":
            values["color"] = "X"
        elif word[:1] == "O":
            values["color"] = "O"
        elif word.isdigit() and int(word) > 0:
            values["max_depth"] = int(word)
        else:
            parser.error(f"Unknown option {word}")
    return values


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_intermixed_args(normalize_argv(argv))

    if args.help:
        parser.print_help_text()
        return 1

    try:
        values = args_to_values(args, parser, load_env_overrides())
        config = build_config(values)
        runner = PlayerRunner(config)
    except ConfigurationError as e:
        print(e.format_error_log(), file=sys.stderr)
        parser.print_help_text(header=False)
        return 1
    except UnknownStrategyError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        parser.print_help_text(header=False)
        return 1

    try:
        runner.run()
    except TransportError as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1
    return 0
