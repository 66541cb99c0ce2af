import pytest

from ppgfx.image import Image


def test_new_image_is_black():
    image = Image(4, 3)
    assert image.get_pixel(3, 2) == (0, 0, 0)
    assert (image.width, image.height) == (4, 3)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Image(0, 5)
    with pytest.raises(ValueError):
        Image(5, -1)


def test_set_and_get_pixel_round_trip():
    image = Image(8, 8)
    image.set_pixel(2, 5, 10, 20, 30)
    assert image.get_pixel(2, 5) == (10, 20, 30)
    assert image.get_pixel(5, 2) == (0, 0, 0)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_out_of_bounds_positions_raise(x, y):
    image = Image(8, 8)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 1, 1, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_channel_out_of_range_raises():
    image = Image(2, 2)
    with pytest.raises(ValueError):
        image.set_pixel(0, 0, 256, 0, 0)
    with pytest.raises(ValueError):
        image.set_pixel(0, 0, 0, -1, 0)


def test_set_pixel_float_clamps():
    image = Image(2, 2)
    image.set_pixel_float(1, 1, 1.0, -0.5, 2.0)
    assert image.get_pixel(1, 1) == (255, 0, 255)


def test_clear_fills_every_pixel():
    image = Image(3, 2)
    image.clear((128, 128, 128))
    assert {image.get_pixel(x, y) for x in range(3) for y in range(2)} == {(128, 128, 128)}


def test_to_bytes_is_row_major_rgb():
    image = Image(3, 2)
    image.set_pixel(1, 0, 7, 8, 9)
    image.set_pixel(0, 1, 4, 5, 6)
    data = image.to_bytes()
    assert len(data) == 3 * 2 * 3
    assert data[3:6] == bytes([7, 8, 9])
    assert data[9:12] == bytes([4, 5, 6])


def test_from_raw_round_trip():
    image = Image(4, 4)
    image.set_pixel(3, 1, 1, 2, 3)
    copy = Image.from_raw(image.to_bytes(), 4, 4)
    assert copy.to_bytes() == image.to_bytes()


def test_from_raw_too_short_raises():
    with pytest.raises(ValueError):
        Image.from_raw(b"\x00" * 10, 4, 4)


def test_raw_file_round_trip(tmp_path):
    image = Image(5, 3)
    image.set_pixel(4, 2, 200, 100, 50)
    path = tmp_path / "picture.raw"
    image.save_raw(path)
    assert path.stat().st_size == 5 * 3 * 3
    loaded = Image.load_raw(path, 5, 3)
    assert loaded.get_pixel(4, 2) == (200, 100, 50)
    assert loaded.to_bytes() == image.to_bytes()


def test_bmp_file_round_trip(tmp_path):
    image = Image(6, 4)
    image.set_pixel(0, 0, 255, 0, 0)
    image.set_pixel(5, 3, 0, 0, 255)
    path = tmp_path / "picture.bmp"
    image.save_bmp(path)
    assert path.read_bytes()[:2] == b"BM"
    loaded = Image.load_bmp(path)
    assert (loaded.width, loaded.height) == (6, 4)
    assert loaded.to_bytes() == image.to_bytes()