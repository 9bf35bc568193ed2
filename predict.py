# ================== PREDICCIÓN ==================
import logging

import numpy as np

from config import CLASS_DIGITS
from errors import InferenceError

logger = logging.getLogger(__name__)


def argmax_first(values):
    """
    Índice del valor máximo; en empates gana el primero.
    """
    if len(values) == 0:
        raise InferenceError("La salida del modelo está vacía.")
    return int(np.argmax(values))

def predict_digit(handle, tensor):
    """
    Pasada hacia delante -> etiqueta 0..9.
    """
    if handle is None or handle.closed:
        raise InferenceError("El modelo no está cargado.")
    if tensor is None:
        raise InferenceError("No hay tensor de entrada.")

    output = handle.model.predict(tensor, verbose=0)
    try:
        probs = np.asarray(output, dtype=np.float32).reshape(-1)
    finally:
        del output
    if len(probs) != len(CLASS_DIGITS):
        raise InferenceError(f"Salida inesperada del modelo: {len(probs)} clases.")
    idx = argmax_first(probs)
    logger.debug("Probabilidades: %s -> %d", np.round(probs, 3).tolist(), idx)
    return idx
