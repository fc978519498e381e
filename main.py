import argparse
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from noughts import config
from noughts.game_logic import Mode
from noughts.session import GameController
from noughts.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(30, 34, 44)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(22, 25, 33)
ALT_BASE_COLOR = QColor(30, 34, 44)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(70, 58, 110)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(168, 85, 247)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

MODE_CHOICES = {"opponent": Mode.HUMAN_VS_OPPONENT, "human": Mode.HUMAN_VS_HUMAN}

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-tac-toe against a friend or the computer.")
    parser.add_argument("--mode", choices=sorted(MODE_CHOICES), default=None,
                        help="start against the computer or another human (default: opponent)")
    parser.add_argument("--delay", type=int, default=config.REPLY_DELAY_MS, metavar="MS",
                        help="computer thinking time in milliseconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the computer's corner/side picks")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, metavar="PATH",
                        help="also write logs to a rotating file")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must be >= 0")
    return args

# -----------------------------------------------------------------------------
# MAIN APPLICATION ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    config.setup_logging(args.log_level, args.log_file)

    app = QApplication(sys.argv[:1])
    app.setStyle("Fusion")
    apply_default_palette(app)

    mode = MODE_CHOICES[args.mode] if args.mode else config.DEFAULT_MODE
    rng = random.Random(args.seed) if args.seed is not None else None
    controller = GameController(mode=mode, reply_delay_ms=args.delay, rng=rng)
    window = TicTacToeWindow(controller)
    window.resize(420, 560)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
