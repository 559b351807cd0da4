"""
Logging utilities for DataSplit.
"""
import datetime
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s'


def default_log_filename(log_dir='logs'):
    """
    Build a unique per-execution log file path, log_TIMESTAMP.log, inside log_dir.
    """
    timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
    log_dir = os.path.abspath(log_dir)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, f'log_{timestamp}.log')


def setup_logging(log_filename=None, console=True, level=logging.INFO, log_dir='logs'):
    """
    Set up logging to file and, optionally, to stderr.

    Args:
        log_filename (str, optional): Log to this file. Defaults to a timestamped file in log_dir.
        console (bool): Also echo records to stderr.
        level (int or str): Root logger level.
        log_dir (str): Directory for the default log file.
    Returns:
        str: Path of the log file in use.
    """
    if log_filename is None:
        log_filename = default_log_filename(log_dir)
    formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    # Remove all handlers first (to avoid duplicate logs)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    file_handler = logging.FileHandler(log_filename, mode='w', encoding='utf-8')
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)
    root_logger.setLevel(level)
    return log_filename


def get_logger(name=None):
    return logging.getLogger(name)
