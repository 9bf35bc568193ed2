# ================== LIENZO: TRAZOS A MAPA DE BITS ==================
from PIL import Image, ImageDraw

from config import CANVAS_SIZE, MIN_BRUSH_SIZE

BACKGROUND = "white"
INK        = "black"


def point_from_event(event, widget):
    """
    Coordenadas del evento relativas al widget (resta su posición en pantalla).
    Si el evento trae varios toques, se usa solo el primero.
    """
    touches = getattr(event, "touches", None)
    if touches:
        event = touches[0]
    return (event.x_root - widget.winfo_rootx(),
            event.y_root - widget.winfo_rooty())


class DrawingSurface:
    """
    Mapa de bits fijo (trazo negro sobre blanco) con bandera de vacío.
    """
    def __init__(self, width=CANVAS_SIZE, height=CANVAS_SIZE, brush=None):
        self.width  = width
        self.height = height
        self.brush  = brush if brush is not None else max(MIN_BRUSH_SIZE, width // 20)
        self.image  = Image.new("RGB", (width, height), BACKGROUND)
        self._draw  = ImageDraw.Draw(self.image)
        self.is_empty = True
        self.last_pt  = None

    @property
    def is_drawing(self) -> bool:
        return self.last_pt is not None

    def _dot(self, point):
        x, y = point
        r = self.brush / 2
        self._draw.ellipse([x - r, y - r, x + r, y + r], fill=INK)

    def start_stroke(self, point):
        self.last_pt = point
        self.is_empty = False
        self._dot(point)

    def draw_stroke(self, point):
        if self.last_pt is None:
            return
        x0, y0 = self.last_pt
        x1, y1 = point
        self._draw.line([x0, y0, x1, y1], fill=INK, width=self.brush, joint="curve")
        # extremos redondos
        self._dot(point)
        self.last_pt = point

    def end_stroke(self):
        self.last_pt = None

    def clear(self):
        self._draw.rectangle([0, 0, self.width, self.height], fill=BACKGROUND)
        self.is_empty = True
        self.last_pt = None
