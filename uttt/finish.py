"""
Finish detection, shared by both board levels.

A small board feeds its cells in directly. The large board feeds in its
small boards, where a board won by P counts as P's mark and a drawn board
is neither a mark nor empty.
"""
from typing import Callable, Optional, Sequence, TypeVar

from .position import Player, WINNING_LINES
from .results import FinishState

T = TypeVar('T')


def _line_complete(marks: Sequence[Optional[Player]], player: Player) -> bool:
    for line in WINNING_LINES:
        if all(marks[i] == player for i in line):
            return True
    return False


def check_for_finish(
    slots: Sequence[T],
    mark_of: Callable[[T], Optional[Player]],
    is_empty: Callable[[T], bool],
) -> Optional[FinishState]:
    """
    Classify 9 slots as Win(X), Win(O), Draw, or None (still open).

    Args:
        slots: 9 slot values in row-major order
        mark_of: slot -> owning Player, or None if the slot carries no mark
        is_empty: slot -> True if the slot can still be filled

    X is tested before O. Draw only when no line is complete and no slot
    is empty.
    """
    if len(slots) != 9:
        raise ValueError(f"Expected 9 slots, got {len(slots)}")

    marks = [mark_of(s) for s in slots]

    if _line_complete(marks, Player.X):
        return FinishState.win(Player.X)
    if _line_complete(marks, Player.O):
        return FinishState.win(Player.O)

    if not any(is_empty(s) for s in slots):
        return FinishState.draw()
    return None


def check_cells(cells: Sequence[Optional[Player]]) -> Optional[FinishState]:
    """Finish check for a plain 3x3 grid of Optional[Player] cells."""
    return check_for_finish(cells, lambda c: c, lambda c: c is None)


def check_finish_states(states: Sequence[Optional[FinishState]]) -> Optional[FinishState]:
    """Finish check over 9 board finish states (None = board still open)."""
    return check_for_finish(
        states,
        lambda s: None if s is None else s.winner,
        lambda s: s is None,
    )
