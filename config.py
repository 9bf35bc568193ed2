# ================== CONFIGURACIÓN GENERAL ==================
import os

def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")

# Modelo remoto: model.json de TF.js (Layers) o bundle Keras .keras/.h5.
# También acepta una ruta local.
DEFAULT_MODEL_URL = "https://storage.googleapis.com/tfjs-models/tfjs/mnist_model/model.json"
MODEL_URL       = os.environ.get("DIGIT_MODEL_URL") or DEFAULT_MODEL_URL
MODEL_FILENAME  = "mnist_digit_cnn.keras"           # nombre del archivo en caché
MODEL_CACHE_DIR = os.environ.get("DIGIT_MODEL_CACHE_DIR") or None   # None -> ~/.keras

# Entrada del clasificador (MNIST)
IMG_SIZE     = 28
CLASS_DIGITS = [str(i) for i in range(10)]

# Lienzo de dibujo (UI)
CANVAS_SIZE    = 280     # tamaño del cuadro de dibujo en px
MIN_BRUSH_SIZE = 15      # grosor mínimo del pincel

# Varios
SPEAK_RESULTS = _env_flag("DIGIT_SPEAK", True)
LOG_LEVEL     = os.environ.get("DIGIT_LOG_LEVEL", "INFO").upper()
