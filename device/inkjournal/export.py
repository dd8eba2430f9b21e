"""PDF export for notes.

Layout is computed in top-left page coordinates (like a screen canvas) and
flipped into PDF space when drawn.
"""

import io
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from reportlab.lib.colors import HexColor, black
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .config import ExportConfig
from .errors import NothingToExport
from .models import Note
from .smoothing import smooth

logger = logging.getLogger("inkjournal.export")

PAGE_WIDTH, PAGE_HEIGHT = A4  # 595 x 842 pt

MARGIN_X = 40
LABEL_Y = 40
TEXT_Y = 60
TIMESTAMP_Y = 90
LINE_HEIGHT = 16
FONT_SIZE = 14

# Region the ink is scaled into
INK_OFFSET = (50.0, 130.0)
INK_REGION = (500.0, 600.0)

TEXT_COLOR = HexColor("#444444")
CUSTOM_FONT_NAME = "InkJournalText"


def format_timestamp(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%d %b %Y, %I:%M %p")


def pdf_file_name(note: Note) -> str:
    return "Note_{}.pdf".format(datetime.fromtimestamp(note.timestamp / 1000).strftime("%Y%m%d_%H%M%S"))


def ink_transform(note: Note) -> Tuple[float, float, float]:
    """Return (min_x, min_y, scale) fitting all of a note's points into the ink region.

    Raises NothingToExport if the note has no points.
    """
    points = list(note.iter_points())
    if not points:
        raise NothingToExport("No strokes to export")

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)

    scale_x = INK_REGION[0] / max(max_x - min_x, 1.0)
    scale_y = INK_REGION[1] / max(max_y - min_y, 1.0)
    return min_x, min_y, min(scale_x, scale_y)


class PdfExporter:
    """Renders a note (recognized text, timestamp and ink) to a PDF document."""

    def __init__(self, config: Optional[ExportConfig] = None, smoothing_window: int = 4):
        self.config = config or ExportConfig()
        self.smoothing_window = smoothing_window
        self.font_name = "Helvetica"

        if self.config.font_path:
            pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, self.config.font_path))
            self.font_name = CUSTOM_FONT_NAME

    def render(self, note: Note) -> bytes:
        """Render a note to PDF bytes."""
        min_x, min_y, scale = ink_transform(note)

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle(f"Note {note.id}")

        text_lines = self._wrap(note.recognized_text)

        pdf.setFillColor(TEXT_COLOR)
        pdf.setFont(self.font_name, FONT_SIZE)
        self._draw_text(pdf, MARGIN_X, LABEL_Y, "Recognized Text:")
        if text_lines:
            self._draw_text(pdf, MARGIN_X, TEXT_Y, text_lines[0])
        self._draw_text(pdf, MARGIN_X, TIMESTAMP_Y, f"Timestamp: {format_timestamp(note.timestamp)}")

        self._draw_ink(pdf, note, min_x, min_y, scale)
        pdf.showPage()

        remaining = text_lines[1:]
        lines_per_page = int((PAGE_HEIGHT - TEXT_Y - MARGIN_X) // LINE_HEIGHT)
        while remaining:
            page_lines, remaining = remaining[:lines_per_page], remaining[lines_per_page:]
            pdf.setFillColor(TEXT_COLOR)
            pdf.setFont(self.font_name, FONT_SIZE)
            self._draw_text(pdf, MARGIN_X, LABEL_Y, "Recognized Text (continued):")
            for i, line in enumerate(page_lines):
                self._draw_text(pdf, MARGIN_X, TEXT_Y + i * LINE_HEIGHT, line)
            pdf.showPage()

        pdf.save()
        return buffer.getvalue()

    def export(self, note: Note, output_dir: Union[str, Path, None] = None) -> Path:
        """Render a note and write it to ``output_dir``. Returns the PDF path."""
        content = self.render(note)

        out_dir = Path(output_dir or self.config.output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / pdf_file_name(note)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            with open(tmp_path, "wb") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

        logger.info("Saved PDF at: %s", path)
        return path

    def _wrap(self, text: str) -> List[str]:
        if not text:
            return []
        return simpleSplit(text, self.font_name, FONT_SIZE, PAGE_WIDTH - 2 * MARGIN_X)

    def _draw_text(self, pdf: canvas.Canvas, x: float, y: float, text: str):
        pdf.drawString(x, PAGE_HEIGHT - y, text)

    def _draw_ink(self, pdf: canvas.Canvas, note: Note, min_x: float, min_y: float, scale: float):
        offset_x, offset_y = INK_OFFSET
        width = self.config.stroke_width

        pdf.setStrokeColor(black)
        pdf.setFillColor(black)
        pdf.setLineWidth(width)
        pdf.setLineCap(1)
        pdf.setLineJoin(1)

        for stroke in note.strokes:
            points = stroke.points
            if self.config.smooth_strokes:
                points = smooth(points, self.smoothing_window)
            if not points:
                continue

            coords = [
                ((p.x - min_x) * scale + offset_x, PAGE_HEIGHT - ((p.y - min_y) * scale + offset_y))
                for p in points
            ]

            if len(coords) == 1:
                pdf.circle(coords[0][0], coords[0][1], width / 2, stroke=0, fill=1)
                continue

            path = pdf.beginPath()
            path.moveTo(*coords[0])
            for x, y in coords[1:]:
                path.lineTo(x, y)
            pdf.drawPath(path, stroke=1, fill=0)
