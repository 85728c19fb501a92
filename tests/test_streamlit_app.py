import logging

import pytest

st = pytest.importorskip('streamlit')
app = pytest.importorskip('streamlit_app')


def test_tabs_and_viewer(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    called = {'tabs': 0, 'generator': 0, 'viewer': 0}

    class Dummy:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            pass

    def fake_tabs(labels, *args, **kwargs):
        called['tabs'] += 1
        return [Dummy() for _ in labels]

    def fake_generator(settings):
        called['generator'] += 1

    def fake_viewer(settings):
        called['viewer'] += 1
        assert settings.layout.base_radius == 100

    monkeypatch.setattr(st, 'tabs', fake_tabs, raising=False)
    monkeypatch.setattr(app, 'render_generator', fake_generator)
    monkeypatch.setattr(app, 'render_mindmap_viewer', fake_viewer)

    logger = logging.getLogger('mindmap_genius')
    try:
        app.main()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    assert called == {'tabs': 1, 'generator': 1, 'viewer': 1}
    assert (tmp_path / 'config' / 'config.yaml').exists()


def test_docstrings_are_english():
    docs = [app.__doc__, app.setup_logging.__doc__, app.render_features.__doc__,
            app.render_about.__doc__, app.main.__doc__]
    assert all(doc and doc.isascii() for doc in docs)
    assert 'entry point' in app.__doc__
