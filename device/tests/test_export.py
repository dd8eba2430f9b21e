"""Tests for PDF export."""

import re
from datetime import datetime

import pytest

from inkjournal.config import ExportConfig
from inkjournal.errors import NothingToExport
from inkjournal.export import PdfExporter, format_timestamp, ink_transform, pdf_file_name
from inkjournal.models import Note, Point, Stroke


def _page_count(pdf: bytes) -> int:
    # Outlines also carry a /Count, always 0 here
    return max(int(n) for n in re.findall(rb"/Count (\d+)", pdf))


@pytest.fixture
def exporter(tmp_path):
    return PdfExporter(ExportConfig(output_dir=str(tmp_path / "Downloads")))


def test_render_produces_pdf(exporter, sample_note):
    pdf = exporter.render(sample_note)

    assert pdf.startswith(b"%PDF")
    assert _page_count(pdf) == 1


def test_export_writes_named_file(exporter, sample_note, tmp_path):
    path = exporter.export(sample_note)

    expected = datetime.fromtimestamp(sample_note.timestamp / 1000).strftime("Note_%Y%m%d_%H%M%S.pdf")
    assert path == tmp_path / "Downloads" / expected
    assert path.read_bytes().startswith(b"%PDF")
    assert [p.name for p in path.parent.iterdir()] == [expected]


def test_export_to_explicit_directory(exporter, sample_note, tmp_path):
    path = exporter.export(sample_note, tmp_path / "elsewhere")
    assert path.parent == tmp_path / "elsewhere"


@pytest.mark.parametrize("strokes", [(), (Stroke(), Stroke())], ids=["no-strokes", "empty-strokes"])
def test_nothing_to_export(exporter, tmp_path, strokes):
    note = Note(id="blank", strokes=strokes, recognized_text="text only", timestamp=1)

    with pytest.raises(NothingToExport, match="No strokes to export"):
        exporter.export(note)
    assert not (tmp_path / "Downloads").exists()

    with pytest.raises(NothingToExport):
        exporter.render(note)


def test_long_text_continues_on_next_pages(exporter):
    text = " ".join(f"word{i}" for i in range(3000))
    note = Note(id="long", strokes=(Stroke(points=(Point(0.0, 0.0, 0),)),), recognized_text=text, timestamp=1)

    assert _page_count(exporter.render(note)) > 1


def test_ink_transform_fits_region():
    note = Note(strokes=(Stroke(points=(Point(10.0, 20.0, 0), Point(110.0, 70.0, 1))),))
    min_x, min_y, scale = ink_transform(note)

    assert (min_x, min_y) == (10.0, 20.0)
    # width 100 -> 500/100, height 50 -> 600/50; the tighter one wins
    assert scale == 5.0


def test_ink_transform_single_point():
    note = Note(strokes=(Stroke(points=(Point(3.0, 4.0, 0),)),))
    assert ink_transform(note) == (3.0, 4.0, 500.0)


def test_render_without_smoothing(sample_note):
    exporter = PdfExporter(ExportConfig(smooth_strokes=False))
    assert exporter.render(sample_note).startswith(b"%PDF")


def test_file_name_and_timestamp_format():
    note = Note(id="x", timestamp=1760000000000)
    moment = datetime.fromtimestamp(1760000000)

    assert pdf_file_name(note) == moment.strftime("Note_%Y%m%d_%H%M%S.pdf")
    assert format_timestamp(1760000000000) == moment.strftime("%d %b %Y, %I:%M %p")
