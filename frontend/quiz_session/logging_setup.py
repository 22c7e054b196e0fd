from __future__ import annotations

import logging

from quiz_session.config import config


def setup_console_logging(level: int | str | None = None) -> None:
    """
    Call once at app start. Streamlit re-executes the entry script on every
    interaction, so repeated calls only adjust the level.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if root.handlers:
        # already configured (avoid duplicates)
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
