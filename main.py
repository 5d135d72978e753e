import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from marubatsu.ui.main_window import MaruBatsuWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Dark palette for the window, status line and menu.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Maru-Batsu (tic-tac-toe)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every move at DEBUG level"
    )
    # leave the rest (e.g. -platform) to Qt
    return parser.parse_known_args(argv)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args, qt_args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=LOG_FORMAT
    )

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = MaruBatsuWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
