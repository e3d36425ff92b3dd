import pygame
import pytest

from rockblocks.animation import Animation, AnimationStore, FramePoint, TRANSPARENT
from rockblocks.defs import Info
from rockblocks.gameobject import GameObject
from rockblocks.scroll import Scroll


def target_at(x, y, cx, cy):
    obj = GameObject()
    obj.set_pos(x, y)
    obj.set_size(cx, cy)
    obj.update_rect()
    return obj


def built(frames=3, duration=50, now=0, image=None):
    anim = Animation(image=image, now=now)
    anim.build(FramePoint(10, 20), FramePoint(8, 6), Info(50, 50, 10, 10), duration, frames)
    return anim


def test_build_lays_frames_along_top_row():
    anim = built(frames=4)
    assert len(anim.frames) == 4
    assert anim.frames[0].img_lt.x == 10
    assert all(f.img_lt.y == 0 for f in anim.frames)
    assert anim.frames[2].img_lt.x - anim.frames[1].img_lt.x == 8
    assert all(f.max_frame == 4 for f in anim.frames)


def test_edit_frame_replaces_cell():
    anim = built()
    anim.edit_frame(FramePoint(100, 200), FramePoint(24, 22), 1)
    assert (anim.frames[1].img_lt.x, anim.frames[1].img_lt.y) == (100, 200)
    assert (anim.frames[1].size.x, anim.frames[1].size.y) == (24, 22)


def test_edit_frame_past_end_is_ignored():
    anim = built(frames=2)
    before = [(f.img_lt.x, f.img_lt.y) for f in anim.frames]
    anim.edit_frame(FramePoint(1, 1), FramePoint(1, 1), 5)
    assert [(f.img_lt.x, f.img_lt.y) for f in anim.frames] == before


def test_edit_frame_negative_raises():
    with pytest.raises(IndexError):
        built().edit_frame(FramePoint(1, 1), FramePoint(1, 1), -1)


def test_advance_waits_for_duration_and_wraps():
    anim = built(frames=2, duration=50, now=0)
    assert anim.advance(50) == 0
    assert anim.advance(51) == 1
    assert anim.advance(200) == 0


def test_place_centres_on_target_bottom():
    anim = built()
    target = target_at(30, 40, 20, 16)
    frame = anim.place(target)
    assert frame.pos_lt.x + frame.size.x * 0.5 == target.info.x
    assert frame.pos_lt.y + frame.size.y == target.info.y + target.info.cy * 0.5


def test_store_keeps_first_animation():
    store = AnimationStore()
    first, second = built(), built()
    store.insert("walk", first)
    store.insert("walk", second)
    assert store.find("walk") is first
    assert len(store) == 1


def test_store_edit_missing_key_changes_nothing():
    store = AnimationStore()
    anim = built()
    store.insert("walk", anim)
    store.edit("run", FramePoint(9, 9), FramePoint(9, 9), 0)
    assert anim.frames[0].img_lt.x == 10
    assert "run" not in store


def test_store_release_empties():
    store = AnimationStore()
    store.insert("walk", built())
    store.release()
    assert len(store) == 0


def test_render_draws_frame_and_skips_transparent():
    sheet = pygame.Surface((16, 6))
    sheet.fill((255, 0, 0))
    sheet.fill(TRANSPARENT, pygame.Rect(8, 0, 8, 6))
    anim = Animation(image=sheet, now=0)
    anim.build(FramePoint(0, 0), FramePoint(8, 6), Info(50, 50, 10, 10), 50, 2)
    store = AnimationStore()
    store.insert("blink", anim)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    target = target_at(50, 50, 10, 10)

    store.render(surface, "blink", target, Scroll(), now=100)
    frame = anim.frames[0]
    assert surface.get_at((int(frame.pos_lt.x), int(frame.pos_lt.y)))[:3] == (255, 0, 0)
    assert anim.current == 1

    surface.fill((0, 0, 0))
    store.render(surface, "blink", target, Scroll(), now=100)
    frame = anim.frames[1]
    assert surface.get_at((int(frame.pos_lt.x), int(frame.pos_lt.y)))[:3] == (0, 0, 0)