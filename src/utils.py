import os
import yaml
import logging

LOGGER_NAME = 'mindmap_genius'


def load_config(path='config/config.yaml'):
    """Load YAML configuration from the given path."""
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_config_or_default(path='config/config.yaml'):
    """Like ``load_config`` but return an empty mapping if the file is missing."""
    if not os.path.exists(path):
        return {}
    return load_config(path)


def configure_logger(log_file='logs/error.log', level='ERROR'):
    """Return the application logger writing to the specified file."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.ERROR))
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    if not logger.handlers:
        handler = logging.FileHandler(log_file)
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
