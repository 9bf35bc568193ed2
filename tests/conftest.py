import pytest

from drawing import DrawingSurface


@pytest.fixture
def surface():
    return DrawingSurface()


@pytest.fixture
def vertical_stroke(surface):
    surface.start_stroke((140, 60))
    for y in range(70, 230, 10):
        surface.draw_stroke((140, y))
    surface.end_stroke()
    return surface


@pytest.fixture(scope="session")
def tiny_model_path(tmp_path_factory):
    """Clasificador diminuto sin entrenar guardado como .keras."""
    import tensorflow as tf

    model = tf.keras.Sequential([
        tf.keras.Input(shape=(28, 28, 1)),
        tf.keras.layers.Flatten(),
        tf.keras.layers.Dense(10, activation="softmax"),
    ])
    path = tmp_path_factory.mktemp("models") / "mnist_digit_cnn.keras"
    model.save(str(path))
    return path
