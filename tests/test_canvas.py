import pytest

from raytrace.canvas import Canvas
from raytrace.colors import Color


def test_a_new_canvas_has_all_black_pixels():
    c = Canvas(10, 20)
    assert c.width == 10
    assert c.height == 20
    for y in range(20):
        for x in range(10):
            assert c.pixel_at(x, y) == Color(0.0, 0.0, 0.0)


def test_writing_a_color_to_a_pixel():
    c = Canvas(10, 20)
    red = Color(1.0, 0.0, 0.0)
    c.write_pixel(2, 3, red)
    assert c.pixel_at(2, 3) == red
    assert c.pixel_at(3, 2) == Color(0.0, 0.0, 0.0)


def test_constructing_a_ppm_header():
    c = Canvas(5, 3)
    lines = c.to_ppm().split("\n")
    assert lines[:3] == ["P3", "5 3", "255"]


def test_constructing_the_ppm_pixel_data():
    c = Canvas(5, 3)
    c.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
    c.write_pixel(2, 1, Color(0.0, 0.5, 0.0))
    c.write_pixel(4, 2, Color(-0.5, 0.0, 1.0))
    lines = c.to_ppm().split("\n")
    assert lines[3:6] == [
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
    ]


def test_splitting_long_lines_in_ppm_files():
    c = Canvas(10, 2)
    c.fill(Color(1.0, 0.8, 0.6))
    lines = c.to_ppm().split("\n")
    assert lines[3:7] == [
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
    ]


def test_ppm_files_are_terminated_by_a_newline_character():
    c = Canvas(5, 3)
    assert c.to_ppm().endswith("\n")


def test_ppm_lines_stay_under_seventy_characters():
    c = Canvas(40, 4)
    c.fill(Color(1.0, 0.8, 0.6))
    assert all(len(line) < 70 for line in c.to_ppm().split("\n"))


def test_fill_sets_every_pixel():
    c = Canvas(4, 3)
    color = Color(0.2, 0.4, 0.6)
    c.fill(color)
    assert all(c.pixel_at(x, y) == color for x in range(4) for y in range(3))


@pytest.mark.parametrize("x, y", [(10, 0), (0, 20), (-1, 0), (0, -1)])
def test_pixel_outside_canvas_raises(x, y):
    c = Canvas(10, 20)
    with pytest.raises(IndexError):
        c.pixel_at(x, y)
    with pytest.raises(IndexError):
        c.write_pixel(x, y, Color(1.0, 1.0, 1.0))


def test_save_writes_ppm_text(tmp_path):
    c = Canvas(5, 3)
    c.write_pixel(1, 1, Color(1.0, 0.0, 0.0))
    path = tmp_path / "image.ppm"
    c.save(path)
    assert path.read_text(encoding="ascii") == c.to_ppm()


def test_saving_twice_gives_the_same_file(tmp_path):
    c = Canvas(3, 2)
    first = tmp_path / "a.ppm"
    second = tmp_path / "b.ppm"
    c.save(first)
    c.save(second)
    assert first.read_bytes() == second.read_bytes()