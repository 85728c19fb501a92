import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

from core.mindmap_tree import load_document
from src.utils import configure_logger


def _reset(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_error_logging(tmp_path):
    log_file = tmp_path / 'error.log'
    logger = configure_logger(str(log_file))
    try:
        logger.error('failure')
        logger.handlers[0].flush()
        with open(log_file) as f:
            data = f.read()
        assert 'failure' in data
    finally:
        _reset(logger)


def test_rejected_document_is_logged(tmp_path):
    log_file = tmp_path / 'logs' / 'app.log'
    logger = configure_logger(str(log_file), level='INFO')
    try:
        load_document({"title": "Bad", "nodes": [{"id": "a", "text": "A"}, {"id": "a", "text": "B"}]})
        logger.handlers[0].flush()
        data = log_file.read_text()
        assert 'WARNING' in data
        assert 'duplicate' in data
        assert logger.level == logging.INFO
    finally:
        _reset(logger)
