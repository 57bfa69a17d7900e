import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from .finish import check_for_finish
from .position import Player, Position
from .results import FinishState, PlayResult

logger = logging.getLogger(__name__)


def _check_player(player) -> Player:
    if not isinstance(player, Player):
        raise TypeError(f"player must be a Player, got {player!r}")
    return player


class Board(ABC):
    """
    Capability shared by both board levels: a finish state that is set once
    and never cleared, computed by the shared line check over 9 slots.
    """

    def __init__(self):
        self._state: Optional[FinishState] = None

    @property
    def state(self) -> Optional[FinishState]:
        return self._state

    def is_finished(self) -> bool:
        return self._state is not None

    @abstractmethod
    def _slots(self) -> Sequence:
        """The 9 slots the finish check runs over, row-major."""

    @staticmethod
    @abstractmethod
    def _mark_of(slot) -> Optional[Player]:
        ...

    @staticmethod
    @abstractmethod
    def _is_empty(slot) -> bool:
        ...

    def check_for_finish(self) -> Optional[FinishState]:
        return check_for_finish(self._slots(), self._mark_of, self._is_empty)


class SmallBoard(Board):
    """A single 3x3 Tic-Tac-Toe board."""

    def __init__(self):
        super().__init__()
        self._cells: List[Optional[Player]] = [None] * 9

    def clone(self) -> 'SmallBoard':
        new_board = SmallBoard.__new__(SmallBoard)
        new_board._state = self._state
        new_board._cells = self._cells[:]
        return new_board

    @property
    def cells(self) -> Tuple[Optional[Player], ...]:
        return tuple(self._cells)

    def cell(self, position) -> Optional[Player]:
        return self._cells[Position(position)]

    def is_empty(self) -> bool:
        return all(c is None for c in self._cells)

    def _slots(self):
        return self._cells

    @staticmethod
    def _mark_of(slot):
        return slot

    @staticmethod
    def _is_empty(slot):
        return slot is None

    def play(self, player: Player, position) -> PlayResult:
        player = _check_player(player)

        if self._state is not None:
            return PlayResult.board_is_filled()

        pos = Position.coerce(position)
        if pos is None:
            return PlayResult.index_error()

        if self._cells[pos] is not None:
            return PlayResult.position_taken()

        self._cells[pos] = player

        finish = self.check_for_finish()
        if finish is not None:
            self._state = finish
            return PlayResult.board_finish(finish)

        return PlayResult.played()

    def __repr__(self):
        return f"SmallBoard(state={self._state!r}, cells={self._cells!r})"


class LargeBoard(Board):
    """
    Nine small boards plus the large-board overlay.

    next_required_board is the small board the next mover must play in, or
    None when any open board may be chosen.
    """

    def __init__(self):
        super().__init__()
        self._boards: List[SmallBoard] = [SmallBoard() for _ in range(9)]
        self._next_required_board: Optional[Position] = None
        self._last_move: Optional[Tuple[Position, Position]] = None
        self._move_count = 0

    def clone(self) -> 'LargeBoard':
        new_board = LargeBoard.__new__(LargeBoard)
        new_board._state = self._state
        new_board._boards = [b.clone() for b in self._boards]
        new_board._next_required_board = self._next_required_board
        new_board._last_move = self._last_move
        new_board._move_count = self._move_count
        return new_board

    @property
    def next_required_board(self) -> Optional[Position]:
        return self._next_required_board

    @property
    def last_move(self) -> Optional[Tuple[Position, Position]]:
        return self._last_move

    @property
    def move_count(self) -> int:
        return self._move_count

    def small_board_state(self, position) -> Optional[FinishState]:
        return self._boards[Position(position)].state

    def small_board_states(self) -> Tuple[Optional[FinishState], ...]:
        return tuple(b.state for b in self._boards)

    def cells(self, position) -> Tuple[Optional[Player], ...]:
        return self._boards[Position(position)].cells

    def _slots(self):
        return self._boards

    @staticmethod
    def _mark_of(slot):
        return None if slot.state is None else slot.state.winner

    @staticmethod
    def _is_empty(slot):
        return slot.state is None

    def play(self, player: Player, large_position, small_position) -> PlayResult:
        player = _check_player(player)

        if self._state is not None:
            logger.debug("Rejected %s move: game already finished (%r)", player, self._state)
            return PlayResult.board_is_filled()

        large = Position.coerce(large_position)
        if large is None:
            logger.debug("Rejected %s move: bad large position %r", player, large_position)
            return PlayResult.index_error()

        if self._next_required_board is not None and self._next_required_board != large:
            logger.debug("Rejected %s move in %s: required board is %s",
                         player, large.name, self._next_required_board.name)
            return PlayResult.wrong_board()

        result = self._boards[large].play(player, small_position)
        if result.is_rejection:
            logger.debug("Rejected %s move at %s/%r: %s",
                         player, large.name, small_position, result.outcome.name)
            return result

        # The small board accepted the move, so small_position is valid
        small = Position.coerce(small_position)
        self._last_move = (large, small)
        self._move_count += 1

        if result.finish is not None:
            logger.debug("Small board %s finished: %r", large.name, result.finish)
            game_finish = self.check_for_finish()
            if game_finish is not None:
                self._state = game_finish
                self._next_required_board = None
                logger.debug("Game finished after %d moves: %r", self._move_count, game_finish)
                return PlayResult.game_finish(game_finish)

        if self._boards[small].is_finished():
            self._next_required_board = None
        else:
            self._next_required_board = small

        return result

    def __repr__(self):
        return (f"LargeBoard(state={self._state!r}, "
                f"next_required_board={self._next_required_board!r}, "
                f"move_count={self._move_count})")
