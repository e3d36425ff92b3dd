import pygame
import pytest

from rockblocks.app import KEY_ESCAPE, EditorApp, main
from rockblocks.defs import WINCX, WINCY, ObjId
from rockblocks.editor import MOUSE_LEFT, load_blocks


def make_app(tmp_path, name="blocks.dat"):
    surface = pygame.Surface((WINCX, WINCY))
    return EditorApp(surface=surface, data_path=tmp_path / name)


def draw_row(app):
    app.held = {MOUSE_LEFT}
    app.step((60, 110))
    app.step((260, 110))
    app.held = set()
    app.step((260, 110))


def test_stroke_places_blocks(tmp_path):
    app = make_app(tmp_path)
    draw_row(app)
    blocks = app.objects.objects(ObjId.BLOCK)
    assert len(blocks) == 4
    assert len({b.info.y for b in blocks}) == 1
    assert len(app.editor.undo_stack) == 1


def test_undo_removes_last_stroke(tmp_path):
    app = make_app(tmp_path)
    draw_row(app)
    app.held = {"lctrl", "Z"}
    app.step((0, 0))
    assert app.objects.objects(ObjId.BLOCK) == []
    assert app.editor.undo_stack == []


def test_save_and_load_keys(tmp_path):
    app = make_app(tmp_path)
    draw_row(app)
    app.held = {"S"}
    app.step((0, 0))
    saved = load_blocks(tmp_path / "blocks.dat")
    assert len(saved) == len(app.objects.objects(ObjId.BLOCK))
    app.held = {"L"}
    app.step((0, 0))
    assert len(app.objects.objects(ObjId.BLOCK)) == 2 * len(saved)


def test_load_failure_sets_status(tmp_path):
    app = make_app(tmp_path, "missing.dat")
    app.held = {"L"}
    assert app.step((0, 0)) is True
    assert app.status.startswith("Save or load failed")


def test_escape_stops(tmp_path):
    app = make_app(tmp_path)
    assert app.step((0, 0)) is True
    app.held = {KEY_ESCAPE}
    assert app.step((0, 0)) is False


def test_scroll_keys_move_view(tmp_path):
    app = make_app(tmp_path)
    app.held = {"right"}
    app.step((0, 0))
    assert app.scroll.x == -app.editor.speed
    app.held = {"up"}
    app.step((0, 0))
    assert app.scroll.y == app.editor.speed


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0