from PIL import Image, ImageDraw, ImageFont
from typing import List, Optional, Tuple

from tableview.presentation import Presentation
from tableview.schemas import TableModel

# DejaVu ships with most Linux distributions; fall back to Pillow's bitmap font.
try:
    DEFAULT_FONT = ImageFont.truetype("DejaVuSans.ttf", 14)
    HEADER_FONT = ImageFont.truetype("DejaVuSans-Bold.ttf", 16)
except IOError:
    DEFAULT_FONT = ImageFont.load_default()
    HEADER_FONT = DEFAULT_FONT

CELL_PADDING = 8
LINE_WIDTH = 1
ROW_HEIGHT_MIN = 28
HEADER_FILL = (245, 245, 245)
PLACEHOLDER_FILL = (120, 120, 120)


def _line_height(font: ImageFont.ImageFont) -> int:
    bbox = font.getbbox("Ag")
    return bbox[3] - bbox[1]


def measure_text(text: str, font: ImageFont.ImageFont, max_width: int) -> Tuple[List[str], int]:
    """Wrap text into lines that fit max_width and return wrapped lines and height."""
    words = text.split()
    if not words:
        return [""], _line_height(font) + 2 * CELL_PADDING

    def text_width(s: str) -> int:
        bbox = font.getbbox(s)
        return bbox[2] - bbox[0]

    lines = []
    line = ""
    for w in words:
        test = (line + " " + w).strip()
        if text_width(test) + 2 * CELL_PADDING > max_width and line:
            lines.append(line)
            line = w
        else:
            line = test
    if line:
        lines.append(line)

    return lines, len(lines) * _line_height(font) + 2 * CELL_PADDING


def _draw_lines(draw: ImageDraw.ImageDraw, lines: List[str], left: int, top: int, font) -> None:
    step = _line_height(font)
    for ln in lines:
        draw.text((left, top), ln, font=font, fill="black")
        top += step


def render_table_image(model: TableModel, title: Optional[str] = None, max_width: int = 1200) -> Image.Image:
    """
    Render the normalized table model to a PIL Image.
    Columns share the width equally; rows grow to fit their wrapped text.
    """
    labels = [col.label for col in model.columns]
    n_cols = max(1, len(labels))
    col_width = max_width // n_cols

    header_height = max([measure_text(label, HEADER_FONT, col_width)[1] for label in labels] or [ROW_HEIGHT_MIN]) + 2

    row_heights = []
    for row in model.rows:
        heights = [max(measure_text(row[col.key], DEFAULT_FONT, col_width)[1], ROW_HEIGHT_MIN) for col in model.columns]
        row_heights.append(max(heights or [ROW_HEIGHT_MIN]))

    title_height = 0
    if title:
        title_height = measure_text(title, HEADER_FONT, max_width)[1] + 12

    total_height = title_height + header_height + sum(row_heights) + (len(model.rows) + 2) * LINE_WIDTH + 20

    img = Image.new("RGB", (max_width, total_height), "white")
    draw = ImageDraw.Draw(img)

    y = 10
    if title:
        draw.text((10, y), title, font=HEADER_FONT, fill="black")
        y += title_height

    # header
    draw.rectangle([0, y, max_width, y + header_height], fill=HEADER_FILL)
    x = 0
    for label in labels:
        lines, _ = measure_text(label, HEADER_FONT, col_width)
        _draw_lines(draw, lines, x + CELL_PADDING, y + CELL_PADDING, HEADER_FONT)
        draw.line([x + col_width, y, x + col_width, total_height], fill="black", width=LINE_WIDTH)
        x += col_width
    y += header_height
    draw.line([0, y, max_width, y], fill="black", width=LINE_WIDTH)

    # body
    for row, row_h in zip(model.rows, row_heights):
        x = 0
        for col in model.columns:
            lines, _ = measure_text(row[col.key], DEFAULT_FONT, col_width)
            _draw_lines(draw, lines, x + CELL_PADDING, y + CELL_PADDING, DEFAULT_FONT)
            draw.line([x + col_width, y, x + col_width, y + row_h], fill="black", width=LINE_WIDTH)
            x += col_width
        draw.line([0, y + row_h, max_width, y + row_h], fill="black", width=LINE_WIDTH)
        y += row_h

    return img


def render_placeholder_image(message: str, has_error: bool = False, max_width: int = 1200) -> Image.Image:
    lines, height = measure_text(message, HEADER_FONT, max_width)
    img = Image.new("RGB", (max_width, height + 40), "white")
    draw = ImageDraw.Draw(img)
    color = "red" if has_error else PLACEHOLDER_FILL
    top = 20
    for ln in lines:
        draw.text((20, top), ln, font=HEADER_FONT, fill=color)
        top += _line_height(HEADER_FONT)
    return img


def render_presentation_image(presentation: Presentation, title: Optional[str] = None, max_width: int = 1200) -> Image.Image:
    if presentation.is_placeholder:
        return render_placeholder_image(presentation.message or "", presentation.has_error, max_width)
    return render_table_image(presentation.model, title=title, max_width=max_width)
