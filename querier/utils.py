# querier/utils.py
"""
Utility Functions

Configuration loading, logging setup and the index statistics display.
"""
import json
import logging
import os
import sys
from typing import Dict

from querier.constants import DEFAULT_LOG_LEVEL, DEFAULT_TOP_N, PROMPT

DEFAULT_CONFIG = {
    "log_level": DEFAULT_LOG_LEVEL,
    "log_file": None,
    "prompt": PROMPT,
    "top_n": DEFAULT_TOP_N
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config(config_file) -> Dict:
    """
    Load configuration from a JSON file, falling back to defaults if not found or invalid.

    Args:
        config_file (str): Path to the configuration file

    Returns:
        dict: The loaded configuration merged over the defaults
    """
    if not config_file or not os.path.exists(config_file):
        return dict(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError("top level must be an object")
        # Merge with defaults to ensure all keys exist
        config = {**DEFAULT_CONFIG, **config}
        _validate_config(config)
        return config
    except (OSError, ValueError) as e:
        print(f"Warning: Error loading config file {config_file}: {e}. Using default configuration.",
              file=sys.stderr)
        return dict(DEFAULT_CONFIG)


def _validate_config(config):
    """Reject settings that would only fail later, at logging setup or display time."""
    level = config["log_level"]
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    top_n = config["top_n"]
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
        raise ValueError(f"top_n must be a positive integer, got {top_n!r}")


def configure_logging(level=DEFAULT_LOG_LEVEL, log_file=None):
    """
    Set up the 'querier' logger hierarchy.

    Args:
        level (str): Logging level name
        log_file (str): Optional file that receives a copy of every record
    """
    logger = logging.getLogger('querier')
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def display_index_statistics(index, top_n=DEFAULT_TOP_N, out=None):
    """
    Display vocabulary statistics including count and most frequent words.

    Args:
        index (Index): The loaded index
        top_n (int): Number of most frequent words to list
        out: Stream to print to (stdout by default)
    """
    print(f"The number of unique words is: {index.vocab_size:,}", file=out)
    print(f"The number of documents is: {index.doc_count:,}", file=out)
    print(f"The top {top_n} most frequent words are:", file=out)
    for i, (word, freq) in enumerate(index.get_most_frequent_words(n=top_n), 1):
        print(f"    {i}. {word} ({freq:,})", file=out)
    print("=" * 47, file=out)
