import logging
from collections.abc import MutableMapping
from typing import Any

from changelog_action.configs.app_configs import LOG_LEVEL

# Between INFO and WARNING, used for release milestones that should stand out
NOTICE_LEVEL = logging.INFO + 5
logging.addLevelName(NOTICE_LEVEL, "NOTICE")


def get_log_level_from_str(log_level_str: str = LOG_LEVEL) -> int:
    log_level_dict = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "NOTICE": NOTICE_LEVEL,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }

    return log_level_dict.get(log_level_str.upper(), logging.INFO)


class ChangelogLoggingAdapter(logging.LoggerAdapter):
    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        # Prefix the message with the changelog path when one is bound
        changelog_path = (self.extra or {}).get("changelog_path")
        if changelog_path:
            msg = f"[{changelog_path}] {msg}"
        return msg, kwargs

    def notice(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(NOTICE_LEVEL, msg, *args, **kwargs)


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "CRITICAL": "\033[91m",  # Red
        "ERROR": "\033[91m",  # Red
        "WARNING": "\033[93m",  # Yellow
        "NOTICE": "\033[94m",  # Blue
        "INFO": "\033[92m",  # Green
        "DEBUG": "\033[96m",  # Light Cyan
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        levelname = record.levelname
        if levelname in self.COLORS:
            prefix = f"{self.COLORS[levelname]}{levelname}:{self.RESET}"
        else:
            prefix = f"{levelname}:"
        return f"{prefix.ljust(len(prefix) + 9 - len(levelname))}{message}"


def get_standard_formatter() -> ColoredFormatter:
    """Returns a standard colored logging formatter."""
    return ColoredFormatter(
        "%(asctime)s %(filename)20s %(lineno)4s: %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )


def setup_logger(
    name: str = __name__,
    log_level: int = get_log_level_from_str(),
    extra: MutableMapping[str, Any] | None = None,
    propagate: bool = True,
) -> ChangelogLoggingAdapter:
    logger = logging.getLogger(name)

    # If the logger already has handlers, assume it was already configured and return it.
    if logger.handlers:
        return ChangelogLoggingAdapter(logger, extra=extra)

    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(get_standard_formatter())

    logger.addHandler(handler)
    logger.propagate = propagate

    return ChangelogLoggingAdapter(logger, extra=extra)
