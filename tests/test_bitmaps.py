import pygame
import pytest

from rockblocks.bitmaps import BitmapStore


def write_bmp(path, size, color=(10, 20, 30)):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def test_insert_and_find(tmp_path):
    path = write_bmp(tmp_path / "tile.bmp", (12, 7))
    store = BitmapStore()
    store.insert(path, "Tile")
    image = store.find("Tile")
    assert image.get_size() == (12, 7)
    assert tuple(image.get_at((0, 0)))[:3] == (10, 20, 30)
    assert "Tile" in store


def test_insert_keeps_first_image(tmp_path):
    first = write_bmp(tmp_path / "a.bmp", (4, 4))
    second = write_bmp(tmp_path / "b.bmp", (8, 8))
    store = BitmapStore()
    store.insert(first, "Key")
    store.insert(second, "Key")
    assert store.find("Key").get_size() == (4, 4)
    assert len(store) == 1


def test_find_missing_returns_none():
    assert BitmapStore().find("Nothing") is None


def test_missing_file_raises(tmp_path):
    store = BitmapStore()
    with pytest.raises(FileNotFoundError):
        store.insert(tmp_path / "absent.bmp", "Absent")
    assert "Absent" not in store


def test_root_resolves_relative_paths(tmp_path):
    (tmp_path / "img").mkdir()
    write_bmp(tmp_path / "img" / "x.bmp", (3, 5))
    store = BitmapStore(root=tmp_path)
    store.insert("img/x.bmp", "X")
    assert store.find("X").get_size() == (3, 5)


def test_release_clears(tmp_path):
    store = BitmapStore()
    store.insert(write_bmp(tmp_path / "t.bmp", (2, 2)), "T")
    store.release()
    assert store.find("T") is None
    assert len(store) == 0