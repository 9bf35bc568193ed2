# ================== INTERFAZ GRÁFICA (Tkinter) ==================
import logging
import tkinter as tk
from tkinter import ttk
from concurrent.futures import ThreadPoolExecutor

import pyttsx3

from config import SPEAK_RESULTS
from controller import RecognizerController
from drawing import DrawingSurface, point_from_event, INK

logger = logging.getLogger(__name__)

POLL_MS = 50

def speak(text):
    try:
        engine = pyttsx3.init()
        engine.say(text)
        engine.runAndWait()
    except Exception as exc:
        logger.warning("No se pudo anunciar el resultado: %s", exc)


class CanvasInput:
    """
    Conecta los eventos del ratón del tk.Canvas con el DrawingSurface.
    attach() / detach() suscriben y retiran los bindings.
    """
    EVENTS = ("<ButtonPress-1>", "<B1-Motion>", "<ButtonRelease-1>", "<Leave>")

    def __init__(self, canvas, surface):
        self.canvas  = canvas
        self.surface = surface
        self._bindings = []

    @property
    def attached(self) -> bool:
        return bool(self._bindings)

    def attach(self):
        if self.attached:
            return
        handlers = (self._on_press, self._on_motion, self._on_release, self._on_release)
        for sequence, handler in zip(self.EVENTS, handlers):
            funcid = self.canvas.bind(sequence, handler, add="+")
            self._bindings.append((sequence, funcid))

    def detach(self):
        for sequence, funcid in self._bindings:
            self.canvas.unbind(sequence, funcid)
        self._bindings = []
        self.surface.end_stroke()

    def _on_press(self, event):
        x, y = point_from_event(event, self.canvas)
        self.surface.start_stroke((x, y))
        r = self.surface.brush / 2
        self.canvas.create_oval(x - r, y - r, x + r, y + r, fill=INK, outline=INK)
        return "break"

    def _on_motion(self, event):
        if not self.surface.is_drawing:
            return None
        x0, y0 = self.surface.last_pt
        x1, y1 = point_from_event(event, self.canvas)
        self.canvas.create_line(x0, y0, x1, y1,
                                width=self.surface.brush, fill=INK,
                                capstyle=tk.ROUND, joinstyle=tk.ROUND)
        self.surface.draw_stroke((x1, y1))
        return "break"

    def _on_release(self, event):
        was_drawing = self.surface.is_drawing
        self.surface.end_stroke()
        return "break" if was_drawing else None


class DigitApp:
    def __init__(self, root, loader, surface=None, speak_results=SPEAK_RESULTS, executor=None):
        self.root = root
        self.root.title("Reconocedor de dígitos IA")
        self.speak_results = speak_results

        self.surface    = surface or DrawingSurface()
        self.controller = RecognizerController(self.surface, loader)
        self.executor   = executor or ThreadPoolExecutor(max_workers=1)
        self.pending    = None

        self._build_widgets()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        self.load_model()

    def _build_widgets(self):
        frame = ttk.Frame(self.root)
        frame.pack(fill="both", expand=True)

        self.canvas = tk.Canvas(frame, width=self.surface.width, height=self.surface.height,
                                bg="white", cursor="pencil")
        self.canvas.pack(padx=10, pady=10)
        self.canvas_input = CanvasInput(self.canvas, self.surface)
        self.canvas_input.attach()

        controls = ttk.Frame(frame)
        controls.pack(padx=10, pady=5, fill="x")
        self.predict_btn = ttk.Button(controls, text="Predecir", command=self.predict_from_canvas)
        self.predict_btn.pack(side="left", padx=5, expand=True, fill="x")
        self.clear_btn = ttk.Button(controls, text="Limpiar", command=self.clear_canvas)
        self.clear_btn.pack(side="left", padx=5, expand=True, fill="x")

        self.status_var = tk.StringVar()
        self.status_label = ttk.Label(frame, textvariable=self.status_var, font=("Arial", 14))
        self.status_label.pack(pady=(5, 10))

    # ---------- Estado ----------
    def refresh(self):
        self.status_var.set(self.controller.status)
        self.predict_btn.configure(state="normal" if self.controller.can_predict else "disabled")
        self.clear_btn.configure(state="normal" if self.controller.can_clear else "disabled")

    def _poll(self, future, done):
        if not future.done():
            self.root.after(POLL_MS, self._poll, future, done)
            return
        self.pending = None
        exc = future.exception()
        done(None if exc else future.result(), exc)
        self.refresh()

    def _submit(self, fn, done, *args):
        self.pending = self.executor.submit(fn, *args)
        self.root.after(POLL_MS, self._poll, self.pending, done)

    # ---------- Modelo ----------
    def load_model(self):
        self.controller.begin_load()
        self.refresh()
        self._submit(self.controller.loader.load,
                     lambda handle, exc: self.controller.finish_load(handle, exc))

    # ---------- Dibujo ----------
    def clear_canvas(self):
        if not self.controller.can_clear:
            return
        self.canvas.delete("all")
        self.controller.clear()
        self.refresh()

    def predict_from_canvas(self):
        if not self.controller.can_predict:
            return
        tensor = self.controller.begin_predict()
        self.refresh()
        if tensor is None:
            return
        self._submit(self.controller.run_predict, self._on_prediction, tensor)

    def _on_prediction(self, digit, exc):
        result = self.controller.finish_predict(digit, exc)
        if result is not None and self.speak_results:
            speak(f"Es el número {result}")

    # ---------- Cierre ----------
    def on_close(self):
        self.canvas_input.detach()
        self.executor.shutdown(wait=False, cancel_futures=True)
        self.controller.close()
        self.root.destroy()
