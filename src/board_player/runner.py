# Area: Runner
"""
board_player.runner — Game loop driver
=======================================

PlayerRunner wires one position, one evaluator, one search strategy
and one PlayerDomain into a PlayerContext, optionally connects to a
remote peer, and then blocks in the network loop until shutdown.
"""

from __future__ import annotations
import logging
import signal
from typing import Optional

from ._network.loop import NetworkLoop
from ._protocol.turn_sync import PlayerDomain
from ._search.callbacks import SearchCallbacks
from ._search.evaluator import Evaluator
from ._search.registry import create_strategy
from ._shared import get_protocol_logger, setup_verbosity
from .board import GamePosition
from .config import PlayerConfig
from .context import PlayerContext
from .errors import TransportError
from .hex_board import HexBoard

logger = logging.getLogger("board_player.runner")


class PlayerRunner:
    """
    Main entry point.

    Usage
    -----
        from board_player import PlayerConfig, PlayerRunner

        config = PlayerConfig(color="X", max_moves=10, host="localhost")
        runner = PlayerRunner(config)
        runner.run()
    """

    def __init__(
        self,
        config: PlayerConfig,
        board: Optional[GamePosition] = None,
        loop: Optional[NetworkLoop] = None,
        configure_logging: bool = True,
    ):
        self.config = config

        if configure_logging:
            setup_verbosity(config.verbose, log_file_path=config.log_file)

        self._protocol_logger = get_protocol_logger()
        self._protocol_logger.set_enabled(config.verbose > 0)
        self._protocol_logger.set_color(config.color)

        # Build move engine
        strategy = create_strategy(config.strategy)
        strategy.set_max_depth(config.max_depth)
        evaluator = Evaluator()
        strategy.set_evaluator(evaluator)
        strategy.register_callbacks(SearchCallbacks(config.verbose))

        board = board or HexBoard(config.board_size, config.time_limit_ms)
        board.set_search_strategy(strategy)

        self.ctx = PlayerContext(
            board=board,
            strategy=strategy,
            evaluator=evaluator,
            loop=loop or NetworkLoop(),
            color=config.player_color,
            max_moves=config.max_moves,
            change_eval=config.change_eval,
        )
        self.domain = PlayerDomain(
            self.ctx, port=config.lport, protocol_logger=self._protocol_logger
        )

    @property
    def loop(self) -> NetworkLoop:
        return self.ctx.loop

    def setup(self) -> None:
        """Listen, connect to the remote peer if any, and open the game if asked."""
        print(
            f"Using strategy '{self.ctx.strategy.name}' "
            f"(depth {self.config.max_depth}) ..."
        )
        self.loop.install(self.domain)

        if self.config.host:
            try:
                self.domain.add_connection(self.config.host, self.config.rport)
            except TransportError as e:
                logger.warning(f"{e}; waiting for peers to connect instead")
                self._protocol_logger.log_error(str(e))

        if self.config.start:
            # The board is still in its start position here
            self.domain.start_game(self.ctx.board.get_state())

    def run(self) -> None:
        """Start the player. Blocks until shutdown is requested."""
        signal.signal(signal.SIGINT, lambda s, f: self.loop.exit())

        self._log_startup()
        self.setup()
        self.loop.run()
        logger.info("Player stopped.")

    def _log_startup(self) -> None:
        logger.info("=" * 60)
        logger.info("  Board Player — Starting")
        logger.info(f"  Color:    {self.config.color}")
        logger.info(f"  Strategy: {self.ctx.strategy.name} (depth {self.ctx.strategy.depth})")
        logger.info(f"  Listen:   port {self.config.lport}")
        logger.info(f"  Remote:   {self.config.remote or 'none'}")
        budget = "unbounded" if self.config.max_moves < 0 else self.config.max_moves
        logger.info(f"  Moves:    {budget}")
        logger.info("=" * 60)
