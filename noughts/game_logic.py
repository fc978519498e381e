"""
tic-tac-toe rules: board snapshots, win/draw checks, move legality
"""
from enum import Enum


class Mark(str, Enum):
    """
    player symbol in a cell
    """
    X = 'X'
    O = 'O'

    def other(self):
        # opposite mark
        return Mark.O if self is Mark.X else Mark.X


class Mode(Enum):
    HUMAN_VS_HUMAN = "human"
    HUMAN_VS_OPPONENT = "opponent"


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


EMPTY = ''                       # blank cell
BOARD_SIZE = 3                   # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, then cols, then diags; scan order matters for detect_winner
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def new_board():
    """
    nine empty cells, row-major
    """
    return [EMPTY] * CELL_COUNT


def detect_winner(board):
    """
    first complete line in LINES order, or None
    """
    for a, b, c in LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Mark(board[a])
    return None


def is_draw(board) -> bool:
    """
    full board and nobody won
    """
    return all(cell != EMPTY for cell in board) and detect_winner(board) is None


def is_legal_move(board, index, status) -> bool:
    """
    game still running, index on the board, cell blank
    """
    if status is not Status.IN_PROGRESS:
        return False
    # bools are ints too, don't let True/False through as 1/0
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    if not 0 <= index < CELL_COUNT:
        return False
    return board[index] == EMPTY


def apply_move(board, index, mark):
    """
    copy of board with mark placed at index; input left untouched
    no legality check here, callers go through is_legal_move first
    """
    updated = list(board)
    updated[index] = mark
    return updated


def empty_cells(board):
    # ascending indices of blank cells
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def evaluate(board):
    """
    returns (Status, winner) for a snapshot
    """
    winner = detect_winner(board)
    if winner is not None:
        return Status.WON, winner
    if is_draw(board):
        return Status.DRAW, None
    return Status.IN_PROGRESS, None


def index_to_cell(index):
    # row-major index -> (row, col)
    return divmod(index, BOARD_SIZE)


def cell_to_index(row, col):
    return row * BOARD_SIZE + col
