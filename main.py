# ================== PUNTO DE ENTRADA ==================
import logging
import tkinter as tk
from tkinter import ttk

from config import LOG_LEVEL
from errors import BackendUnavailableError, MSG_NO_BACKEND
from learning import DigitModelLoader, import_tensorflow
from ui import DigitApp

logger = logging.getLogger(__name__)


class _NoBackendLoader:
    """
    Cargador que siempre falla: la UI muestra el aviso en vez de cerrarse.
    """
    def __init__(self, exc):
        self.exc = exc

    def load(self):
        raise self.exc


def build_loader():
    try:
        return DigitModelLoader(import_tensorflow())
    except BackendUnavailableError as exc:
        logger.error("%s %s", MSG_NO_BACKEND, exc)
        return _NoBackendLoader(exc)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root = tk.Tk()
    try:
        ttk.Style(root).theme_use("clam")
    except tk.TclError:
        pass

    app = DigitApp(root, build_loader())
    root.mainloop()
