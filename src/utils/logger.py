# src/utils/logger.py

import logging
import sys
import os
from datetime import datetime
from typing import Optional

LOGGER_NAME = "TvdbFanart"

class CustomFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels"""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    format_str = "%(asctime)s - %(levelname)s - %(message)s"

    FORMATS = {
        logging.DEBUG: grey + format_str + reset,
        logging.INFO: grey + format_str + reset,
        logging.WARNING: yellow + format_str + reset,
        logging.ERROR: red + format_str + reset,
        logging.CRITICAL: bold_red + format_str + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M:%S")
        return formatter.format(record)

class UnicodeSafeStreamHandler(logging.StreamHandler):
    def emit(self, record):
        try:
            msg = self.format(record)
            stream = self.stream
            # Streams without a binary buffer (pytest capture) get plain text
            buffer = getattr(stream, 'buffer', None)
            if buffer is None:
                stream.write(msg + self.terminator)
            else:
                buffer.write(msg.encode(encoding='utf-8', errors='replace'))
                buffer.write(self.terminator.encode('utf-8'))
            self.flush()
        except Exception:
            self.handleError(record)

def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Return the application logger, or one of its children"""
    if child:
        return logging.getLogger(f"{LOGGER_NAME}.{child}")
    return logging.getLogger(LOGGER_NAME)

def setup_logger(name: str = LOGGER_NAME, logs_dir: Optional[str] = None,
                 verbose: bool = False) -> logging.Logger:
    """
    Set up and return a logger instance with both file and console handlers

    Args:
        name: The name of the logger
        logs_dir: Directory for log files, defaults to 'logs' in the project root
        verbose: Show debug messages on the console too

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    if logs_dir is None:
        logs_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    # File handler - use UTF-8 encoding
    log_file = os.path.join(logs_dir, f'tvdb_fanart_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)

    # Console handler with custom formatter
    console_handler = UnicodeSafeStreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(CustomFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
