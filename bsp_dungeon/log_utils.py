import logging
from typing import Optional

ROOT_LOGGER = "bsp_dungeon"


class TopicFormatter(logging.Formatter):
    """Prefixes every line with the level and the last part of the logger name."""

    def __init__(self, use_color: bool = False):
        super().__init__()
        if use_color:
            self.colors = {
                logging.DEBUG: "\033[38;5;252m",
                logging.INFO: "\033[38;5;111m",
                logging.WARNING: "\033[38;5;229m",
                logging.ERROR: "\033[38;5;210m",
                logging.CRITICAL: "\033[38;5;217m",
            }
            self.reset = "\033[0m"
        else:
            self.colors = {}
            self.reset = ""

    def format(self, record: logging.LogRecord) -> str:
        color = self.colors.get(record.levelno, "")
        reset = self.reset if color else ""
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:11]
        prefix = f"{color}{level_name:<5}{reset}:{topic:<11}: "
        text = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def setup_logging(level: int = logging.INFO, color: bool = False, log_file: Optional[str] = None) -> None:
    """Configures console (and optionally file) logging for the package."""
    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TopicFormatter(use_color=color))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(TopicFormatter(use_color=False))
        root_logger.addHandler(file_handler)
        root_logger.info("Logging to file: %s", log_file)
