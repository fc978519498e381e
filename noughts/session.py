"""
game session state and the controller that drives it
"""
import logging
from dataclasses import dataclass, replace
from functools import partial
from typing import Optional, Tuple

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from . import config
from .game_logic import (
    Mark, Mode, Status,
    apply_move, evaluate, is_legal_move, new_board,
)
from .opponent import select_opponent_move

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSession:
    """
    immutable snapshot of one game; the controller swaps in a new one per change
    """
    board: Tuple[str, ...]
    active_mark: Mark = config.STARTING_MARK
    mode: Mode = config.DEFAULT_MODE
    status: Status = Status.IN_PROGRESS
    winner: Optional[Mark] = None
    opponent_pending: bool = False
    generation: int = 0          # bumped on reset, stale replies compare against it

    @classmethod
    def fresh(cls, mode, generation=0):
        return cls(board=tuple(new_board()), mode=mode, generation=generation)

    @property
    def outcome(self):
        return self.status, self.winner


class GameController(QObject):
    """
    owns the session, validates commands, schedules the computer's reply

    the view only calls submit_move/reset/toggle_mode and listens to signals
    """
    board_changed = Signal(list)     # new 9-cell board
    turn_changed = Signal(object)    # Mark now to move
    outcome_changed = Signal(object) # (Status, winner)
    pending_changed = Signal(bool)   # computer thinking on/off
    mode_changed = Signal(object)    # Mode
    state_changed = Signal()         # after every accepted command or reply

    def __init__(self, mode=config.DEFAULT_MODE, reply_delay_ms=config.REPLY_DELAY_MS,
                 rng=None, parent=None):
        super().__init__(parent)
        self.human_mark = config.HUMAN_MARK
        self.opponent_mark = config.OPPONENT_MARK
        self.reply_delay_ms = reply_delay_ms
        self._rng = rng                  # None -> opponent module default
        self._session = GameSession.fresh(mode)

    # --- queries -------------------------------------------------------------

    @property
    def session(self):
        return self._session

    @property
    def board(self):
        return list(self._session.board)

    @property
    def status(self):
        return self._session.status

    @property
    def winner(self):
        return self._session.winner

    @property
    def outcome(self):
        return self._session.outcome

    @property
    def active_mark(self):
        return self._session.active_mark

    @property
    def mode(self):
        return self._session.mode

    @property
    def opponent_pending(self):
        return self._session.opponent_pending

    @property
    def generation(self):
        return self._session.generation

    @property
    def game_over(self):
        return self._session.status is not Status.IN_PROGRESS

    def accepting_input(self):
        """
        true when a human click would be considered at all
        """
        s = self._session
        if s.status is not Status.IN_PROGRESS or s.opponent_pending:
            return False
        if s.mode is Mode.HUMAN_VS_OPPONENT:
            return s.active_mark == self.human_mark
        return True

    def status_text(self):
        s = self._session
        if s.status is Status.WON:
            return f"Winner: {s.winner.value}"
        if s.status is Status.DRAW:
            return "Game is a draw!"
        if s.opponent_pending:
            return "Computer is thinking..."
        return f"Next player: {s.active_mark.value}"

    # --- commands ------------------------------------------------------------

    @Slot(int)
    def submit_move(self, index):
        """
        place the active mark at index for a human player
        returns True if the move was taken, False if it was ignored
        """
        s = self._session
        if not self.accepting_input():
            log.debug("move %r ignored: not accepting input (%s, pending=%s)",
                      index, s.status.value, s.opponent_pending)
            return False
        if not is_legal_move(s.board, index, s.status):
            log.debug("move %r ignored: illegal", index)
            return False

        mover = s.active_mark
        board = tuple(apply_move(s.board, index, mover))
        status, winner = evaluate(board)
        log.info("%s plays %d", mover.value, index)

        if status is not Status.IN_PROGRESS:
            # terminal: turn stays where it was
            self._replace(replace(s, board=board, status=status, winner=winner))
            self._log_outcome()
            return True

        if s.mode is Mode.HUMAN_VS_OPPONENT:
            self._replace(replace(s, board=board, active_mark=self.opponent_mark,
                                  opponent_pending=True))
            self._schedule_opponent_reply()
        else:
            self._replace(replace(s, board=board, active_mark=mover.other()))
        return True

    @Slot()
    def reset(self):
        """
        fresh board, X to move, any pending computer reply invalidated
        """
        self._start_new_session(self._session.mode)

    @Slot()
    def toggle_mode(self):
        s = self._session
        mode = (Mode.HUMAN_VS_HUMAN if s.mode is Mode.HUMAN_VS_OPPONENT
                else Mode.HUMAN_VS_OPPONENT)
        log.info("mode -> %s", mode.value)
        self._start_new_session(mode)

    # --- internals -----------------------------------------------------------

    def _start_new_session(self, mode):
        s = self._session
        if s.opponent_pending:
            log.debug("dropping pending reply for generation %d", s.generation)
        self._replace(GameSession.fresh(mode, generation=s.generation + 1))

    def _schedule_opponent_reply(self):
        s = self._session
        QTimer.singleShot(
            self.reply_delay_ms,
            partial(self._play_opponent_reply, s.generation, s.board)
        )

    def _play_opponent_reply(self, generation, board):
        s = self._session
        if generation != s.generation or not s.opponent_pending:
            log.debug("stale reply for generation %d discarded", generation)
            return

        index = select_opponent_move(board, self.opponent_mark, self.human_mark,
                                     rng=self._rng)
        # reply only gets scheduled for a running game, so a blank cell exists
        assert index is not None, "opponent asked to move on a full board"

        new = tuple(apply_move(board, index, self.opponent_mark))
        status, winner = evaluate(new)
        log.info("%s plays %d", self.opponent_mark.value, index)
        self._replace(replace(s, board=new, status=status, winner=winner,
                              active_mark=self.human_mark, opponent_pending=False))
        if status is not Status.IN_PROGRESS:
            self._log_outcome()

    def _log_outcome(self):
        s = self._session
        if s.status is Status.WON:
            log.info("game over: %s wins", s.winner.value)
        else:
            log.info("game over: draw")

    def _replace(self, session):
        # swap snapshots, then tell listeners what actually changed
        old = self._session
        self._session = session
        if old.board != session.board:
            self.board_changed.emit(list(session.board))
        if old.active_mark != session.active_mark:
            self.turn_changed.emit(session.active_mark)
        if old.opponent_pending != session.opponent_pending:
            self.pending_changed.emit(session.opponent_pending)
        if old.outcome != session.outcome:
            self.outcome_changed.emit(session.outcome)
        if old.mode != session.mode:
            self.mode_changed.emit(session.mode)
        self.state_changed.emit()
