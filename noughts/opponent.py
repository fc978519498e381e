"""
rule-based computer opponent

priority: win now, block, center, random corner, random side.
only looks one ply ahead so a fork can beat it.
"""
import logging
import random

from .game_logic import EMPTY, apply_move, detect_winner, empty_cells

log = logging.getLogger(__name__)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)

_default_rng = random.Random()


def _completing_move(board, mark):
    # first blank (ascending) that gives mark three in a row
    for index in empty_cells(board):
        if detect_winner(apply_move(board, index, mark)) == mark:
            return index
    return None


def select_opponent_move(board, opponent_mark, human_mark, rng=None):
    """
    pick the opponent's reply for a board snapshot

    rng: anything with .choice(), defaults to a module-level random.Random.
    returns an index 0-8, or None if the board is full.
    """
    rng = rng or _default_rng

    index = _completing_move(board, opponent_mark)
    if index is not None:
        log.debug("opponent takes win at %d", index)
        return index

    index = _completing_move(board, human_mark)
    if index is not None:
        log.debug("opponent blocks at %d", index)
        return index

    if board[CENTER] == EMPTY:
        return CENTER

    for group in (CORNERS, SIDES):
        free = [i for i in group if board[i] == EMPTY]
        if free:
            return rng.choice(free)

    return None
