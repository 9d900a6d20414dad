from types import SimpleNamespace

import pytest

from wirefdf.app import Viewer, main
from wirefdf.mapfile import parse_map
from wirefdf.scene import Palette, Projection, setup_scene

PALETTE_COLOURS = {0x860ACD, 0x009292, 0xF2D0EF, 0xCC1A99}


def make_viewer(on_close=None):
    scene = setup_scene(parse_map(["0 0 0", "0 10 0", "0 0 -3"]))
    return Viewer(scene, on_close=on_close)


def test_redraw_frame_is_inside_window():
    viewer = make_viewer()
    frame = viewer.redraw()
    assert frame
    width, height = viewer.scene.map_width, viewer.scene.map_height
    assert all(0 <= x < width and 0 <= y < height for x, y in frame)
    assert set(frame.values()) <= PALETTE_COLOURS


def test_redraw_frame_pixels_come_from_scene():
    viewer = make_viewer()
    frame = viewer.redraw()
    positions = {(x, y) for x, y, _ in viewer.scene.pixels()}
    assert set(frame) <= positions
    assert viewer.frame is frame


def test_redraw_clips_everything_off_window():
    viewer = make_viewer()
    viewer.scene.pos_x = -100000
    assert viewer.redraw() == {}


def test_parallel_key_code_changes_projection_and_frame():
    viewer = make_viewer()
    before = dict(viewer.redraw())
    assert viewer.on_key(35) is True
    assert viewer.scene.projection is Projection.PARALLEL
    assert viewer.frame != before


@pytest.mark.parametrize(
    "keysym, palette",
    [("e", Palette.ELEGANT), ("E", Palette.ELEGANT), ("v", Palette.VIBRANT)],
)
def test_palette_keysyms(keysym, palette):
    viewer = make_viewer()
    viewer.scene.palette = Palette.VIBRANT if palette is Palette.ELEGANT else Palette.ELEGANT
    assert viewer.on_key(SimpleNamespace(keysym=keysym)) is True
    assert viewer.scene.palette is palette


def test_isometric_key_after_parallel():
    viewer = make_viewer()
    viewer.on_key(SimpleNamespace(keysym="p"))
    assert viewer.scene.projection is Projection.PARALLEL
    viewer.on_key(SimpleNamespace(keysym="i"))
    assert viewer.scene.projection is Projection.ISOMETRIC


def test_unknown_key_keeps_state_and_redraws():
    viewer = make_viewer()
    assert viewer.frame == {}
    assert viewer.on_key(SimpleNamespace(keysym="x")) is True
    assert viewer.scene.projection is Projection.ISOMETRIC
    assert viewer.scene.palette is Palette.VIBRANT
    assert viewer.frame


def test_escape_closes_viewer():
    closed = []
    viewer = make_viewer(on_close=lambda: closed.append(True))
    assert viewer.on_key(SimpleNamespace(keysym="Escape")) is False
    assert closed == [True]
    assert viewer.is_open is False


def test_escape_code_closes_without_callback():
    viewer = make_viewer()
    assert viewer.on_key(53) is False
    assert viewer.is_open is False


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "Number of arguments are incorrect!" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Invalid Map" in capsys.readouterr().out


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "Your map is not valid" in capsys.readouterr().out