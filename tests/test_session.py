import pytest
from PIL import Image

import asciisketch.session as session_module
from asciisketch.engine import RenderConfig
from asciisketch.session import ArtSession


def make_session(**config):
    img = Image.new("RGB", (40, 20), (0, 0, 0))
    return ArtSession(img, RenderConfig(**config))


def test_update_renders_and_publishes():
    session = make_session(output_width=4, edge_threshold=255)
    assert session.art is None
    art = session.update()
    assert art is session.art
    assert art.rows == ("@@@@",)


def test_update_changes_config():
    session = make_session(output_width=4, edge_threshold=255)
    art = session.update(output_width=8)
    assert session.config.output_width == 8
    assert session.config.edge_threshold == 255
    assert art.width == 8


def test_invalid_update_keeps_previous_config():
    session = make_session(output_width=4)
    with pytest.raises(ValueError):
        session.update(density=0.0)
    assert session.config.density == 1.0


def test_regenerate_uses_current_config():
    session = make_session(output_width=6, edge_threshold=255)
    first = session.regenerate()
    second = session.regenerate()
    assert first.rows == second.rows


def test_accepts_path(tmp_path):
    path = tmp_path / "img.png"
    Image.new("RGB", (40, 20), (0, 0, 0)).save(path)
    session = ArtSession(path, RenderConfig(output_width=4, edge_threshold=255))
    assert session.update().rows == ("@@@@",)


def test_stale_render_is_discarded(monkeypatch):
    session = make_session(output_width=4, edge_threshold=255)
    real_render = session_module.render
    calls = []

    def render_with_interruption(image, config):
        calls.append(config.output_width)
        if len(calls) == 1:
            # A newer change arrives while the first render is still running
            assert session.update(output_width=2) is not None
        return real_render(image, config)

    monkeypatch.setattr(session_module, "render", render_with_interruption)
    assert session.update() is None
    assert calls == [4, 2]
    assert session.art.rows == ("@@",)
    assert session.config.output_width == 2
