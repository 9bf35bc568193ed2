# ================== ESTADO DE LA SESIÓN (sin Tkinter) ==================
import logging

from errors import (BackendUnavailableError, EmptyInputError, InferenceError, LoadError,
                    MSG_EMPTY_CANVAS, MSG_IDLE, MSG_LOAD_FAILED, MSG_LOADING,
                    MSG_NO_BACKEND, MSG_NOT_READY, MSG_PREDICT_FAILED,
                    MSG_PREDICTING, MSG_RESULT)
from predict import predict_digit
from vision import preprocess_canvas

logger = logging.getLogger(__name__)


class RecognizerController:
    """
    Une lienzo, preprocesado y modelo. Convierte errores en textos de estado;
    ningún método público lanza excepciones de dominio.
    """
    def __init__(self, surface, loader):
        self.surface = surface
        self.loader  = loader
        self.handle  = None
        self.is_loading    = False
        self.is_predicting = False
        self.prediction = None
        self.error      = None

    # ---------- Estado para la UI ----------
    @property
    def status(self):
        if self.is_loading:
            return MSG_LOADING
        if self.error:
            return self.error
        if self.is_predicting:
            return MSG_PREDICTING
        if self.prediction is not None:
            return MSG_RESULT.format(digit=self.prediction)
        return MSG_IDLE

    @property
    def can_predict(self) -> bool:
        return not self.is_loading and not self.is_predicting and self.handle is not None

    @property
    def can_clear(self) -> bool:
        return not self.is_predicting

    # ---------- Modelo ----------
    def begin_load(self):
        self.error = None
        self.is_loading = True

    def finish_load(self, handle=None, exc=None):
        self.is_loading = False
        if exc is None:
            self.handle = handle
        elif isinstance(exc, BackendUnavailableError):
            logger.error("Backend no disponible: %s", exc)
            self.error = MSG_NO_BACKEND
        elif isinstance(exc, LoadError):
            logger.error("Error cargando el modelo: %s", exc)
            self.error = MSG_LOAD_FAILED
        else:
            raise exc

    def load_model(self):
        self.begin_load()
        try:
            handle = self.loader.load()
        except LoadError as exc:
            self.finish_load(exc=exc)
        else:
            self.finish_load(handle)
        return self.handle

    # ---------- Predicción ----------
    def check_ready(self):
        if self.handle is None or self.surface is None:
            raise InferenceError("El modelo o el lienzo no están listos.")
        if self.surface.is_empty:
            raise EmptyInputError("El lienzo está vacío.")

    def begin_predict(self):
        """
        Valida y preprocesa. Devuelve el tensor o None si no hay que predecir.
        """
        try:
            self.check_ready()
        except EmptyInputError as exc:
            logger.info("%s", exc)
            self.error = MSG_EMPTY_CANVAS
            return None
        except InferenceError as exc:
            logger.warning("%s", exc)
            self.error = MSG_NOT_READY
            return None
        self.is_predicting = True
        self.error = None
        self.prediction = None
        try:
            return preprocess_canvas(self.surface.image)
        except Exception:
            logger.exception("Error preprocesando el lienzo")
            self.finish_predict(exc=InferenceError("Preprocesado fallido"))
            return None

    def run_predict(self, tensor):
        return predict_digit(self.handle, tensor)

    def finish_predict(self, digit=None, exc=None):
        self.is_predicting = False
        if exc is not None:
            logger.error("Error prediciendo el dígito: %s", exc)
            self.error = MSG_PREDICT_FAILED
            return None
        self.prediction = str(digit)
        logger.info("Predicción: %s", self.prediction)
        return digit

    def predict(self):
        tensor = self.begin_predict()
        if tensor is None:
            return None
        try:
            digit = self.run_predict(tensor)
        except Exception as exc:
            return self.finish_predict(exc=exc)
        finally:
            del tensor
        return self.finish_predict(digit)

    # ---------- Lienzo ----------
    def clear(self):
        if self.surface is not None:
            self.surface.clear()
        self.prediction = None
        self.error = None

    def close(self):
        if self.handle is not None:
            self.handle.close()
            self.handle = None
