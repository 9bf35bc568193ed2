# ================== CARGA DEL MODELO ==================
import logging
import json
import os
import posixpath
from urllib.parse import urljoin, urlparse

import numpy as np

from config import MODEL_URL, MODEL_FILENAME, MODEL_CACHE_DIR, IMG_SIZE
from errors import LoadError, BackendUnavailableError

logger = logging.getLogger(__name__)


def import_tensorflow():
    """
    Devuelve el módulo tensorflow o lanza BackendUnavailableError.
    """
    try:
        import tensorflow as tf
    except ImportError as exc:
        raise BackendUnavailableError("TensorFlow no está instalado.") from exc
    return tf


class ModelHandle:
    """
    Modelo cargado, compartido en solo lectura por todas las predicciones.
    """
    def __init__(self, model, source):
        self._model = model
        self.source = source

    @property
    def closed(self) -> bool:
        return self._model is None

    @property
    def model(self):
        return self._model

    def close(self):
        self._model = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def __repr__(self):
        state = "closed" if self.closed else "open"
        return f"<ModelHandle {self.source!r} {state}>"


def load_tfjs_layers_model(json_path):
    """
    model.json (TF.js Layers) + shards vecinos -> modelo Keras.
    """
    import tensorflowjs as tfjs
    return tfjs.converters.load_keras_model(json_path)


def is_tfjs_location(location) -> bool:
    return urlparse(location).path.endswith(".json")


class DigitModelLoader:
    def __init__(self, tf_module, model_url=MODEL_URL, cache_dir=MODEL_CACHE_DIR,
                 filename=MODEL_FILENAME, fetch=None, tfjs_load=None):
        if tf_module is None:
            raise BackendUnavailableError("No se proporcionó el módulo de TensorFlow.")
        self.tf        = tf_module
        self.model_url = model_url
        self.cache_dir = cache_dir
        self.filename  = filename
        self._fetch     = fetch or self._keras_fetch
        self._tfjs_load = tfjs_load or load_tfjs_layers_model

    def _keras_fetch(self, url, filename, cache_dir, subdir):
        return self.tf.keras.utils.get_file(filename, origin=url, cache_dir=cache_dir,
                                            cache_subdir=subdir)

    def _fetch_tfjs(self, url):
        """
        Descarga model.json y todos los shards de pesos en el mismo directorio.
        """
        path = urlparse(url).path
        bundle = posixpath.basename(posixpath.dirname(path)) or "tfjs"
        subdir = os.path.join("models", bundle)
        json_path = self._fetch(url, posixpath.basename(path), self.cache_dir, subdir)
        with open(json_path, encoding="utf-8") as fh:
            topology = json.load(fh)
        for group in topology.get("weightsManifest", []):
            for shard in group.get("paths", []):
                self._fetch(urljoin(url, shard), shard, self.cache_dir, subdir)
        return json_path

    def _resolve(self):
        url = self.model_url
        if not url:
            raise LoadError("No hay ubicación del modelo (define DIGIT_MODEL_URL).")
        if url.startswith(("http://", "https://")):
            if is_tfjs_location(url):
                return self._fetch_tfjs(url)
            return self._fetch(url, self.filename, self.cache_dir, "models")
        if not os.path.exists(url):
            raise LoadError(f"No existe el modelo local {url}")
        return url

    def load(self) -> ModelHandle:
        """
        Descarga (con caché), carga y calienta el modelo.
        """
        url = self.model_url
        try:
            path = self._resolve()
            logger.info("Cargando modelo desde %s ...", path)
            if is_tfjs_location(path):
                model = self._tfjs_load(path)
            else:
                model = self.tf.keras.models.load_model(path)
            # inferencia de calentamiento
            zeros = np.zeros((1, IMG_SIZE, IMG_SIZE, 1), dtype=np.float32)
            model.predict(zeros, verbose=0)
            del zeros
        except LoadError:
            logger.error("Error cargando el modelo desde %r", url)
            raise
        except Exception as exc:
            logger.exception("Error cargando el modelo desde %r", url)
            raise LoadError(f"No se pudo cargar el modelo desde {url}. "
                            "Revisa la red o la URL del modelo.") from exc
        logger.info("Modelo cargado y calentado.")
        return ModelHandle(model, url)
