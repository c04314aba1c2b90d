import logging
from core.config import settings

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger that prints to the terminal at settings.LOG_LEVEL.
    The console handler is only attached once per logger name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    if not logger.handlers:
        # Console handler (prints to terminal)
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(ch)

    return logger
