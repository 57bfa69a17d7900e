"""
Result vocabulary shared by the small and large boards.

FinishState is the terminal classification of a board (win or draw).
PlayResult is what every play() call returns; rule violations are reported
here rather than raised.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .position import Player


@dataclass(frozen=True)
class FinishState:
    """Win(player) when winner is set, Draw when it is None."""
    winner: Optional[Player]

    @classmethod
    def win(cls, player: Player) -> 'FinishState':
        return cls(Player(player))

    @classmethod
    def draw(cls) -> 'FinishState':
        return cls(None)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def to_code(self) -> int:
        """1 / 2 for a win by X / O, 3 for a draw (0 is reserved for open)."""
        return 3 if self.winner is None else int(self.winner)

    def __repr__(self):
        if self.winner is None:
            return "Draw"
        return f"Win({self.winner.name})"


class PlayOutcome(Enum):
    PLAYED = 'played'
    BOARD_FINISH = 'board_finish'
    GAME_FINISH = 'game_finish'
    POSITION_TAKEN = 'position_taken'
    BOARD_IS_FILLED = 'board_is_filled'
    WRONG_BOARD = 'wrong_board'
    INDEX_ERROR = 'index_error'


_SUCCESS = (PlayOutcome.PLAYED, PlayOutcome.BOARD_FINISH, PlayOutcome.GAME_FINISH)


@dataclass(frozen=True)
class PlayResult:
    outcome: PlayOutcome
    finish: Optional[FinishState] = None

    @classmethod
    def played(cls) -> 'PlayResult':
        return cls(PlayOutcome.PLAYED)

    @classmethod
    def board_finish(cls, finish: FinishState) -> 'PlayResult':
        return cls(PlayOutcome.BOARD_FINISH, finish)

    @classmethod
    def game_finish(cls, finish: FinishState) -> 'PlayResult':
        return cls(PlayOutcome.GAME_FINISH, finish)

    @classmethod
    def position_taken(cls) -> 'PlayResult':
        return cls(PlayOutcome.POSITION_TAKEN)

    @classmethod
    def board_is_filled(cls) -> 'PlayResult':
        return cls(PlayOutcome.BOARD_IS_FILLED)

    @classmethod
    def wrong_board(cls) -> 'PlayResult':
        return cls(PlayOutcome.WRONG_BOARD)

    @classmethod
    def index_error(cls) -> 'PlayResult':
        return cls(PlayOutcome.INDEX_ERROR)

    @property
    def is_success(self) -> bool:
        return self.outcome in _SUCCESS

    @property
    def is_rejection(self) -> bool:
        return not self.is_success

    def __repr__(self):
        if self.finish is None:
            return f"PlayResult.{self.outcome.name}"
        return f"PlayResult.{self.outcome.name}({self.finish!r})"
