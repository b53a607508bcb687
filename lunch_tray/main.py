"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

from lunch_tray.config import DEBUG_LOG_PATH, LOG_LEVEL
from lunch_tray.log import setup_logging
from lunch_tray.lunch_tray_app import LunchTrayApp


def main() -> None:
    setup_logging(level=LOG_LEVEL, log_file=DEBUG_LOG_PATH, console=False)
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
