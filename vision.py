# ================== VISIÓN: PREPROCESADO DEL LIENZO ==================
import numpy as np
import cv2

from config import IMG_SIZE

def capture_gray(image):
    """
    Imagen PIL -> matriz de luminancia (float32, 0..255) a resolución nativa.
    """
    return np.asarray(image.convert("L"), dtype=np.float32)

def resize_bilinear(gray, size=IMG_SIZE):
    return cv2.resize(gray, (size, size), interpolation=cv2.INTER_LINEAR)

def normalize(arr):
    return arr / 255.0

def invert(arr):
    # el modelo espera trazo claro sobre fondo oscuro
    return 1.0 - arr

def to_model_input(arr, size=IMG_SIZE):
    return np.reshape(arr, (1, size, size, 1)).astype(np.float32)

def preprocess_canvas(image):
    """
    Lienzo (trazo oscuro sobre blanco) -> tensor (1,IMG_SIZE,IMG_SIZE,1) en [0,1].
    El orden importa: redimensionar antes de normalizar e invertir.
    """
    gray = capture_gray(image)
    small = resize_bilinear(gray)
    del gray
    norm = normalize(small)
    del small
    inv = invert(norm)
    del norm
    return to_model_input(np.clip(inv, 0.0, 1.0))
