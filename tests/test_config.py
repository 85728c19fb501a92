import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from src.utils import load_config, load_config_or_default

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def test_load_config():
    config = load_config(os.path.join(ROOT, 'config/config.yaml'))
    assert isinstance(config, dict)
    assert config.get('layout', {}).get('base_radius') == 100
    assert config.get('render', {}).get('label_max_length') == 15


def test_missing_config_gives_empty_mapping(tmp_path):
    assert load_config_or_default(str(tmp_path / 'nope.yaml')) == {}


def test_empty_config_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_config(str(path)) == {}
