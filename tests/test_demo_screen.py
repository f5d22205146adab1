import curses
import logging

import pytest

from term3d.camera import Camera
from term3d.demo import CubeDemo, parse_args, build_config, cli
from term3d.errors import DisplayInitError
from term3d.events import Key
from term3d.logging_config import setup_logging
from term3d.screen import CursesScreen, translate_key


class FakeEngine:
    def __init__(self):
        self.camera = Camera()


def test_translate_key():
    assert translate_key(-1) is None
    assert translate_key(27) is Key.ESCAPE
    assert translate_key(ord('w')) is Key.FORWARD
    assert translate_key(ord('q')) is Key.MOVE_UP
    assert translate_key(curses.KEY_LEFT) is Key.LOOK_LEFT
    assert translate_key(curses.KEY_RESIZE) is Key.RESIZE
    assert translate_key(ord('z')) is Key.OTHER


def test_cube_demo_places_camera_and_turns():
    engine = FakeEngine()
    demo = CubeDemo(distance=12.0, turn_rate=2.0)
    demo.start(engine)
    assert engine.camera.position.z == -12.0
    demo.update(engine, 0.5)
    assert engine.camera.yaw == pytest.approx(1.0)


def test_args_to_config(monkeypatch):
    monkeypatch.setenv('TERM', 'xterm')
    args = parse_args(['--no-color', '--outline', '--fps', '30', '--delta-mode', 'frame'])
    config = build_config(args)
    assert config.use_color is False
    assert config.outline is True
    assert config.target_frame_time == pytest.approx(1 / 30)
    assert config.delta_mode == 'frame'


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "term3d.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("term3d.engine").info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding='utf-8')
    setup_logging()
    assert isinstance(logging.getLogger("term3d").handlers[0], logging.NullHandler)


class BrokenWindow:
    """stdscr stand-in whose terminal cannot be configured."""

    def nodelay(self, flag):
        raise curses.error("nodelay() returned ERR")


def test_screen_setup_failure_raises_display_init_error():
    with pytest.raises(DisplayInitError):
        CursesScreen(BrokenWindow())


@pytest.mark.parametrize("exc,message", [
    (DisplayInitError("could not configure terminal: boom"), "could not configure terminal: boom"),
    (curses.error("setupterm: could not find terminal"), "terminal error"),
])
def test_cli_reports_fatal_display_errors(monkeypatch, capsys, exc, message):
    started = []

    def wrapper(func):
        started.append(func)
        raise exc

    monkeypatch.setenv('TERM', 'xterm')
    monkeypatch.setattr(curses, 'wrapper', wrapper)
    assert cli([]) == 1
    assert len(started) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert message in err
