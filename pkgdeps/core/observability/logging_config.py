"""
Logging setup for the pkgdeps CLI.

``main.py`` calls ``setup_logging`` once, before any command runs.
Modules log through ``logging.getLogger(__name__)``.

Console output goes to stderr so ``--json`` and ``--plain`` output on
stdout stays parseable. ``PKGDEPS_LOG_FILE`` adds a file handler.
"""

from __future__ import annotations

import logging
import sys

_CONSOLE_FORMATS = {
    logging.DEBUG: "%(levelname)-5s %(name)s:%(lineno)d: %(message)s",
    logging.INFO: "[%(name)s] %(message)s",
}
_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root handlers with a stderr handler and an optional file.

    Args:
        level: Console level name. Unknown names fall back to WARNING.
        log_file: Path to append full-detail records to.
        log_file_level: Level for the file. Defaults to ``level``.
    """
    console_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    fmt = next(
        (f for lvl, f in sorted(_CONSOLE_FORMATS.items()) if console_level <= lvl),
        "%(message)s",
    )
    console.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)


def _parse_level(level: str | None) -> int:
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
