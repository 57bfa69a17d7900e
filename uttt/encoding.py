"""
Array export and text rendering for front ends.

Layout matches the 9x9 grid a player sees: global row = br * 3 + r,
global col = bc * 3 + c, where (br, bc) is the small board and (r, c) the
cell inside it.
"""
import numpy as np

from .board import LargeBoard
from .config import Config, RenderConfig
from .position import Player, Position


def to_array(board: LargeBoard) -> np.ndarray:
    """(9, 9) int8 array. empty: 0, X: 1, O: 2"""
    arr = np.zeros((9, 9), dtype=np.int8)
    for large in Position:
        sr, sc = large.row * 3, large.col * 3
        for small, owner in zip(Position, board.cells(large)):
            if owner is not None:
                arr[sr + small.row, sc + small.col] = int(owner)
    return arr


def completed_array(board: LargeBoard) -> np.ndarray:
    """(3, 3) int8 array of small-board states. open: 0, X: 1, O: 2, draw: 3"""
    codes = [0 if s is None else s.to_code() for s in board.small_board_states()]
    return np.array(codes, dtype=np.int8).reshape(3, 3)


def render(board: LargeBoard, config=None) -> str:
    """
    Text view of the whole game, small boards separated by box lines.
    config is a RenderConfig, a Config (its .render is used), or None.

        X . . | . . . | . . .
        . . . | . . . | . . .
        . . . | . . . | . . .
        ------+-------+------
        ...
    """
    if config is None:
        config = RenderConfig()
    elif isinstance(config, Config):
        config = config.render
    if not config.row_separator:
        raise ValueError("row_separator must not be empty")

    arr = to_array(board)
    symbols = {0: config.empty_symbol, int(Player.X): config.x_symbol, int(Player.O): config.o_symbol}
    # pad symbols to a common width so every column lines up
    width = max(len(s) for s in symbols.values())
    symbols = {k: s.ljust(width) for k, s in symbols.items()}

    # "+" sits under each column separator, whatever its length
    block = 3 * width + 2
    spans = (block + 1, len(config.col_separator), block + 2, len(config.col_separator), block + 1)
    seg = config.row_separator
    divider = "".join(
        "+" * n if i % 2 else (seg * n)[:n]
        for i, n in enumerate(spans)
    )

    lines = []
    for r in range(9):
        if r in (3, 6):
            lines.append(divider)
        chunks = []
        for bc in range(3):
            chunks.append(" ".join(symbols[int(v)] for v in arr[r, bc * 3:bc * 3 + 3]))
        lines.append(f" {config.col_separator} ".join(chunks))
    return "\n".join(lines)
