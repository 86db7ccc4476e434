"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger."""

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Avoid stacking handlers when the app factory runs more than once
    if any(getattr(handler, "_ecocampus", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ecocampus = True  # type: ignore[attr-defined]
    root.addHandler(handler)
