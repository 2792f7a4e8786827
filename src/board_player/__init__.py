"""
board_player — Computer player for a broadcast board game
==========================================================

(1) Connects to a game broadcast channel,
(2) waits for a position in which this player is to move,
(3) searches a move and broadcasts the resulting position,
    then goes back to (2).

Quick Start:
    from board_player import PlayerConfig, PlayerRunner
    runner = PlayerRunner(PlayerConfig(color="X", host="localhost"))
    runner.run()

Other games:
    from board_player import GamePosition
    class MyBoard(GamePosition): ...   # codec, classification, moves, heuristic()
    runner = PlayerRunner(config, board=MyBoard())

Command line:
    board-player [options] [X|O] [<strength>]
"""

from .board import BoardState, Color, GamePosition, Move, MoveType
from .config import PlayerConfig, build_config
from .context import PlayerContext
from .errors import (
    BoardPlayerError,
    ConfigurationError,
    TransportError,
    UnknownStrategyError,
)
from .hex_board import HexBoard
from .runner import PlayerRunner
from ._protocol.turn_sync import PlayerDomain
from ._search import (
    Evaluator,
    SearchCallbacks,
    SearchStrategy,
    create_strategy,
    register_strategy,
    strategy_names,
)

__all__ = [
    # Main classes
    "PlayerRunner",
    "PlayerConfig",
    "PlayerContext",
    "PlayerDomain",
    "build_config",
    # Board
    "BoardState",
    "Color",
    "GamePosition",
    "HexBoard",
    "Move",
    "MoveType",
    # Search
    "Evaluator",
    "SearchCallbacks",
    "SearchStrategy",
    "create_strategy",
    "register_strategy",
    "strategy_names",
    # Errors
    "BoardPlayerError",
    "ConfigurationError",
    "TransportError",
    "UnknownStrategyError",
]
__version__ = "0.2.0"
