import pytest

health = pytest.importorskip('health_check')

from src.utils import load_config


def test_health_check_creates_layout(tmp_path):
    is_healthy, report = health.ensure_app_health(str(tmp_path))
    assert is_healthy
    assert report['issues'] == []
    for name in ('logs', 'exports', 'config'):
        assert (tmp_path / name).is_dir()
    config = load_config(str(tmp_path / 'config' / 'config.yaml'))
    assert config['layout']['ring_spacing'] == 80
    assert any('config.yaml' in w for w in report['warnings'])


def test_existing_config_is_kept(tmp_path):
    (tmp_path / 'config').mkdir()
    (tmp_path / 'config' / 'config.yaml').write_text('layout:\n  base_radius: 7\n')
    is_healthy, report = health.ensure_app_health(str(tmp_path))
    assert report['warnings'] == []
    assert load_config(str(tmp_path / 'config' / 'config.yaml'))['layout']['base_radius'] == 7


def test_missing_module_is_an_issue(tmp_path, monkeypatch):
    monkeypatch.setattr(health.HealthChecker, 'ESSENTIAL_MODULES', ['surely_not_installed_xyz'])
    is_healthy, report = health.HealthChecker(str(tmp_path)).check_all()
    assert not is_healthy
    assert 'surely_not_installed_xyz' in report['issues'][0]


def test_docstrings_are_english():
    import inspect

    docs = [health.__doc__]
    for _, obj in inspect.getmembers(health, inspect.isfunction):
        docs.append(obj.__doc__)
    for _, obj in inspect.getmembers(health.HealthChecker, inspect.isfunction):
        docs.append(obj.__doc__)
    docs.append(health.HealthChecker.__doc__)
    assert all(doc.isascii() for doc in docs if doc)
    assert 'health check' in health.__doc__
