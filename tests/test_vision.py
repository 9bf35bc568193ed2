import numpy as np
import pytest
from PIL import Image

from vision import capture_gray, invert, normalize, preprocess_canvas, resize_bilinear


@pytest.mark.parametrize("size", [(280, 280), (28, 28), (500, 120), (13, 77)])
def test_output_shape_is_fixed(size):
    tensor = preprocess_canvas(Image.new("RGB", size, "white"))
    assert tensor.shape == (1, 28, 28, 1)
    assert tensor.dtype == np.float32


def test_blank_canvas_becomes_zeros():
    tensor = preprocess_canvas(Image.new("RGB", (280, 280), "white"))
    assert np.allclose(tensor, 0.0)


def test_full_ink_becomes_ones():
    tensor = preprocess_canvas(Image.new("RGB", (280, 280), "black"))
    assert np.allclose(tensor, 1.0)


def test_preprocessing_is_deterministic(vertical_stroke):
    a = preprocess_canvas(vertical_stroke.image)
    b = preprocess_canvas(vertical_stroke.image)
    assert np.array_equal(a, b)


def test_stroke_is_light_on_dark(vertical_stroke):
    tensor = preprocess_canvas(vertical_stroke.image)[0, :, :, 0]
    assert tensor.min() >= 0.0 and tensor.max() <= 1.0
    # columna central con trazo, esquinas vacías
    assert tensor[:, 14].max() > 0.5
    assert tensor[0, 0] == pytest.approx(0.0)


def test_capture_gray_is_single_channel():
    gray = capture_gray(Image.new("RGB", (40, 30), "white"))
    assert gray.shape == (30, 40)
    assert gray.max() == 255.0


def test_resize_keeps_intensity_domain():
    gray = np.full((280, 280), 255.0, dtype=np.float32)
    gray[:, :140] = 0.0
    small = resize_bilinear(gray)
    assert small.shape == (28, 28)
    assert small.min() == 0.0 and small.max() == 255.0


@pytest.mark.parametrize("v", [0.0, 0.25, 0.5, 0.999, 1.0])
def test_invert_twice_is_identity(v):
    assert invert(invert(v)) == pytest.approx(v)


def test_normalize_scales_to_unit_range():
    arr = np.array([0.0, 127.5, 255.0], dtype=np.float32)
    assert np.allclose(normalize(arr), [0.0, 0.5, 1.0])
