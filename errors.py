# ================== ERRORES Y MENSAJES ==================

# Textos que la interfaz muestra como estado
MSG_LOADING        = "Cargando el modelo de IA..."
MSG_LOAD_FAILED    = "No se pudo cargar el modelo de IA. Reinicia la aplicación."
MSG_NO_BACKEND     = "TensorFlow no está disponible. Revisa la instalación."
MSG_NOT_READY      = "El modelo o el lienzo no están listos."
MSG_EMPTY_CANVAS   = "Dibuja un dígito primero."
MSG_PREDICT_FAILED = "No se pudo reconocer el dígito. Inténtalo de nuevo."
MSG_IDLE           = "Dibuja un dígito (0–9) y presiona 'Predecir'."
MSG_PREDICTING     = "Reconociendo..."
MSG_RESULT         = "Predicción IA: {digit}"


class RecognizerError(Exception):
    """Base de todos los errores del reconocedor."""


class LoadError(RecognizerError):
    """Fallo al descargar o interpretar el modelo remoto."""


class BackendUnavailableError(LoadError):
    """TensorFlow no está instalado o no se inyectó."""


class EmptyInputError(RecognizerError):
    """Se pidió una predicción con el lienzo vacío."""


class InferenceError(RecognizerError):
    """Falta el modelo o el tensor, o la salida no es válida."""
