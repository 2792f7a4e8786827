# Area: Protocol Tests
"""A game other than Hex, played through the runner and every strategy."""

import pytest
from unittest.mock import Mock, patch

from board_player.board import BoardState, Color, GamePosition, Move
from board_player.config import PlayerConfig
from board_player.runner import PlayerRunner
from board_player._network.connection import Connection
from board_player._network.loop import NetworkLoop
from board_player._search import AlphaBetaStrategy, Evaluator, strategy_names
from board_player._search.evaluator import WIN_SCORE
from board_player._shared import get_protocol_logger


class CountdownBoard(GamePosition):
    """
    Players alternately take 1..max_take tokens; taking the last one wins.

    State text is "<tokens> <next>", e.g. "3 O".
    """

    def __init__(self, tokens=3, max_take=1):
        super().__init__()
        self.tokens = tokens
        self.max_take = max_take
        self.next_color = Color.COLOR1
        self._decoded = None

    def set_state(self, text):
        fields = text.split()
        if not fields:
            self._decoded = BoardState.EMPTY
            return
        try:
            tokens, next_color = int(fields[0]), Color.from_symbol(fields[1])
        except (ValueError, IndexError):
            self._decoded = BoardState.INVALID
            return
        self.tokens, self.next_color, self._decoded = tokens, next_color, None

    def get_state(self):
        return f"{self.tokens} {self.next_color.symbol}"

    def valid_state(self):
        if self._decoded is not None:
            return self._decoded
        if self.tokens == 0:
            # The side that took the last token is the one not to move
            if self.next_color == Color.COLOR2:
                return BoardState.WIN1
            return BoardState.WIN2
        if self.next_color == Color.COLOR1:
            return BoardState.VALID1
        return BoardState.VALID2

    def act_color(self):
        if self._decoded is not None:
            return Color.NONE
        return self.next_color

    def moves(self):
        if self.valid_state() not in (BoardState.VALID1, BoardState.VALID2):
            return []
        return [Move.place(0, take - 1)
                for take in range(1, min(self.max_take, self.tokens) + 1)]

    def move_order_key(self, move):
        # Larger takes first
        return -move.col

    def play_move(self, move, msecs=0):
        if move.is_none():
            return
        self.tokens -= move.col + 1
        self.next_color = self.next_color.opponent()

    def clone(self):
        other = CountdownBoard(self.tokens, self.max_take)
        other.next_color = self.next_color
        other._decoded = self._decoded
        return other


@pytest.fixture(autouse=True)
def reset_protocol_logger():
    yield
    logger = get_protocol_logger()
    logger.set_enabled(False)
    logger.set_color("?")


def create_countdown_player(strategy, board=None):
    """Run a CountdownBoard through PlayerRunner with one recording peer."""
    runner = PlayerRunner(
        PlayerConfig(lport=0, strategy=strategy),
        board=board or CountdownBoard(),
        loop=Mock(spec=NetworkLoop),
        configure_logging=False,
    )
    domain = runner.domain
    peer = Mock(spec=Connection)
    peer.peer = "peer"
    sent = []
    peer.send_string.side_effect = lambda text: sent.append(text) or True
    domain.connections.append(peer)
    return domain, sent


STRATEGY_KEYS = list(range(len(strategy_names())))


class TestCountdownThroughDomain:
    """Every registry strategy must play a non-Hex position."""

    @pytest.mark.parametrize("strategy", STRATEGY_KEYS)
    def test_own_turn_takes_a_token(self, strategy):
        domain, sent = create_countdown_player(strategy)

        domain.received("pos 3 O")

        assert sent == ["pos 2 X\n"]
        assert not domain.ctx.loop.exit.called

    @pytest.mark.parametrize("strategy", STRATEGY_KEYS)
    def test_taking_last_token_wins(self, strategy, capsys):
        domain, sent = create_countdown_player(strategy)

        domain.received("pos 1 O")

        assert sent == ["pos 0 X\n"]
        assert "O won" in capsys.readouterr().out
        assert domain.ctx.loop.exit.called

    @pytest.mark.parametrize("strategy", STRATEGY_KEYS)
    def test_other_sides_turn_is_ignored(self, strategy):
        domain, sent = create_countdown_player(strategy)

        domain.received("pos 3 X")

        assert sent == []

    def test_alpha_beta_finds_forced_win(self):
        """Test that from 4 tokens the winning take of 1 is found."""
        domain, sent = create_countdown_player(2, board=CountdownBoard(max_take=2))

        domain.received("pos 4 O")

        assert sent == ["pos 3 X\n"]


class TestGenericSearchHooks:
    """Tests for the GamePosition defaults the search relies on."""

    def test_winner_follows_classification(self):
        board = CountdownBoard()
        board.set_state("0 X")
        assert board.winner() == Color.COLOR1
        board.set_state("0 O")
        assert board.winner() == Color.COLOR2
        board.set_state("2 O")
        assert board.winner() == Color.NONE

    def test_default_hooks(self):
        board = CountdownBoard()
        assert board.heuristic(Color.COLOR1) == 0.0
        assert GamePosition.move_order_key(board, Move.place(0, 0)) == 0.0
        assert board.render() == "3 O"

    def test_alpha_beta_orders_by_position_key(self):
        board = CountdownBoard(tokens=5, max_take=3)
        ordered = AlphaBetaStrategy._ordered_moves(board)
        assert ordered == [Move.place(0, 2), Move.place(0, 1), Move.place(0, 0)]

    def test_evaluator_scores_won_position(self):
        board = CountdownBoard()
        board.set_state("0 X")
        evaluator = Evaluator(seed=1)
        assert evaluator.evaluate(board, Color.COLOR1) == WIN_SCORE
        assert evaluator.evaluate(board, Color.COLOR2) == -WIN_SCORE

    def test_evaluator_uses_position_heuristic(self):
        board = CountdownBoard()
        with patch.object(board, "heuristic", return_value=1.5) as heuristic:
            assert Evaluator(seed=1).evaluate(board, Color.COLOR2) == 1.5
        heuristic.assert_called_once_with(Color.COLOR2)
