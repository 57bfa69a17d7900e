from .position import Player, Position, WINNING_LINES
from .results import FinishState, PlayOutcome, PlayResult
from .finish import check_for_finish, check_cells, check_finish_states
from .board import Board, SmallBoard, LargeBoard
from .config import Config, RenderConfig, LoggingConfig, configure_logging
from .encoding import to_array, completed_array, render

__all__ = [
    'Player', 'Position', 'WINNING_LINES',
    'FinishState', 'PlayOutcome', 'PlayResult',
    'check_for_finish', 'check_cells', 'check_finish_states',
    'Board', 'SmallBoard', 'LargeBoard',
    'Config', 'RenderConfig', 'LoggingConfig', 'configure_logging',
    'to_array', 'completed_array', 'render',
]
