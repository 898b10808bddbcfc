"""Document assembly and rendering with ReportLab"""

import asyncio
import io
import logging
from dataclasses import replace
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.platypus import (
    Image, PageBreak as RLPageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle,
)

from .assets import FontFamily
from .document import (
    Cell, ColumnsBlock, DocumentDescription, Footer, ImageBlock, PageBreak, SpacerBlock,
    StackBlock, TableBlock, TextBlock,
)
from .styles import to_paragraph_style

logger = logging.getLogger(__name__)

PAGE_SIZE = A4
PAGE_MARGIN = 40
FOOTER_FONT_SIZE = 10

# Relative share of the leftover width for flexible columns
FLEX_WEIGHTS = {'*': 3, 'auto': 1}

# Narrowest text area a table cell may get, in points
MIN_CELL_WIDTH = 4

# Tables too wide for the frame fall back to tighter cells
COMPACT_PADDING = 1
COMPACT_FONT_SIZE = 6

BUILTIN_FONTS = FontFamily(
    normal='Helvetica',
    bold='Helvetica-Bold',
    italic='Helvetica-Oblique',
    bolditalic='Helvetica-BoldOblique',
)


class RenderError(RuntimeError):
    """The PDF backend failed to produce a document"""


def page_number_footer(page):
    return Footer(text=str(page), alignment='right')


def assemble(content, styles, footer_factory=page_number_footer, fonts=None, title=''):
    """Wrap content blocks, styles and footer into a document description"""
    return DocumentDescription(
        content=tuple(content),
        styles=styles,
        footer=footer_factory,
        fonts=fonts,
        title=title,
    )


def resolve_widths(specs, available, min_flex=0):
    """
    Turn width specs into points

    Percentages are taken from the available width and numbers are used as
    given; ``*`` and ``auto`` columns share what is left, never getting less
    than ``min_flex`` points each. The result may then exceed ``available``.
    """
    resolved = []
    flex = []
    used = 0.0
    for spec in specs:
        if isinstance(spec, str) and spec.endswith('%'):
            width = available * float(spec[:-1]) / 100
        elif isinstance(spec, str):
            if spec not in FLEX_WEIGHTS:
                raise ValueError(f"Invalid column width: {spec!r}")
            flex.append((len(resolved), FLEX_WEIGHTS[spec]))
            resolved.append(None)
            continue
        else:
            width = float(spec)
        used += width
        resolved.append(width)

    if flex:
        remaining = max(available - used, 0)
        total_weight = sum(weight for _, weight in flex)
        for position, weight in flex:
            resolved[position] = max(remaining * weight / total_weight, min_flex)
    return resolved


def fit_widths(widths, available):
    """Scale widths down proportionally so they add up to at most ``available``"""
    total = sum(widths)
    if total <= available:
        return list(widths)
    return [w * available / total for w in widths]


class _FlowableBuilder:
    """Converts document blocks into ReportLab flowables"""

    def __init__(self, description: DocumentDescription, frame_width):
        self.fonts = description.fonts or BUILTIN_FONTS
        self.styles = description.styles
        self.frame_width = frame_width
        self._paragraph_styles = {}

    def paragraph_style(self, key, alignment=None, margin=None, max_font_size=None):
        cache_key = (key, alignment, margin, max_font_size)
        if cache_key not in self._paragraph_styles:
            spec = self.styles[key]
            if margin is not None:
                spec = replace(spec, margin=margin)
            if max_font_size is not None and spec.font_size > max_font_size:
                spec = replace(spec, font_size=max_font_size)
            self._paragraph_styles[cache_key] = to_paragraph_style(
                f"{key}-{len(self._paragraph_styles)}", spec, self.fonts, alignment)
        return self._paragraph_styles[cache_key]

    def build(self, blocks, width=None):
        width = width or self.frame_width
        flowables = []
        for block in blocks:
            flowables.extend(self.convert(block, width))
        return flowables

    def convert(self, block, width):
        if isinstance(block, TextBlock):
            return [self.text(block)]
        if isinstance(block, TableBlock):
            return self.table(block, width)
        if isinstance(block, ColumnsBlock):
            return [self.columns(block, width)]
        if isinstance(block, StackBlock):
            return self.build(block.blocks, width)
        if isinstance(block, ImageBlock):
            return [self.image(block)]
        if isinstance(block, SpacerBlock):
            return [Spacer(1, block.height)]
        if isinstance(block, PageBreak):
            return [RLPageBreak()]
        raise TypeError(f"Unsupported content block: {type(block).__name__}")

    def text(self, block: TextBlock):
        markup = []
        for run in block.runs:
            fragment = escape(run.text)
            if run.underline:
                fragment = f"<u>{fragment}</u>"
            if run.bold:
                fragment = f"<b>{fragment}</b>"
            markup.append(fragment)
        style = self.paragraph_style(block.style, block.alignment, block.margin)
        return Paragraph(''.join(markup), style)

    def cell(self, cell: Cell, max_font_size=None):
        style = self.paragraph_style(cell.style, max_font_size=max_font_size)
        return Paragraph(escape(str(cell.text)), style)

    def image(self, block: ImageBlock):
        if block.fit:
            width, height = block.fit
            image = Image(io.BytesIO(block.data), width=width, height=height, kind='proportional')
        else:
            image = Image(io.BytesIO(block.data), width=block.width, height=block.height)
        image.hAlign = block.alignment.upper()
        return image

    def columns(self, block: ColumnsBlock, width):
        widths = resolve_widths(block.widths or ('*',) * len(block.columns), width)
        row = []
        commands = [
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), 0),
            ('RIGHTPADDING', (0, 0), (-1, -1), 0),
            ('TOPPADDING', (0, 0), (-1, -1), 0),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 0),
        ]
        for col, (column, col_width) in enumerate(zip(block.columns, widths)):
            row.append(self.convert(column, col_width))
            if isinstance(column, ImageBlock):
                commands.append(('ALIGN', (col, 0), (col, 0), column.alignment.upper()))
        table = Table([row], colWidths=widths)
        table.setStyle(TableStyle(commands))
        return table

    def table_layout(self, block: TableBlock, width):
        """
        Column widths, horizontal padding and font size cap for a table

        When the columns cannot all get their padding plus MIN_CELL_WIDTH,
        the table is laid out compact: thinner padding, smaller text and
        widths scaled to the frame.
        """
        left, right = block.padding[:2]
        widths = resolve_widths(block.column_widths, width, min_flex=left + right + MIN_CELL_WIDTH)
        if sum(widths) <= width + 0.01:
            return widths, left, right, None

        widths = fit_widths(
            resolve_widths(block.column_widths, width, min_flex=2 * COMPACT_PADDING + MIN_CELL_WIDTH),
            width,
        )
        padding = min(COMPACT_PADDING, min(widths) / 4)
        logger.warning(
            f"Table with {len(widths)} columns does not fit {width:.0f}pt, using compact layout"
        )
        return widths, padding, padding, COMPACT_FONT_SIZE

    def table(self, block: TableBlock, width):
        col_widths, left, right, max_font_size = self.table_layout(block, width)
        data = []
        if block.header_row:
            data.append([self.cell(cell, max_font_size) for cell in block.header_row])
        data.extend([self.cell(cell, max_font_size) for cell in row] for row in block.body_rows)
        if not data:
            return []

        top, bottom = block.padding[2:]
        commands = [
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('LEFTPADDING', (0, 0), (-1, -1), left),
            ('RIGHTPADDING', (0, 0), (-1, -1), right),
            ('TOPPADDING', (0, 0), (-1, -1), top),
            ('BOTTOMPADDING', (0, 0), (-1, -1), bottom),
        ]
        if block.header_row and block.header_fill:
            commands.append(('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(block.header_fill)))

        table = Table(
            data,
            colWidths=col_widths,
            repeatRows=block.header_rows if block.header_row else 0,
        )
        table.setStyle(TableStyle(commands))

        flowables = [table]
        if block.margin:
            _, margin_top, _, margin_bottom = block.margin
            flowables = [Spacer(1, margin_top), table, Spacer(1, margin_bottom)]
        return flowables


def _footer_callback(description: DocumentDescription, fonts):
    def draw_footer(canvas, doc):
        footer = description.footer(canvas.getPageNumber())
        left, top, right, bottom = footer.margin
        page_width = doc.pagesize[0]
        y = max(doc.bottomMargin / 2 - top + bottom, 0)

        canvas.saveState()
        canvas.setFont(fonts.normal, FOOTER_FONT_SIZE)
        if footer.alignment == 'right':
            canvas.drawRightString(page_width - right, y, footer.text)
        elif footer.alignment == 'center':
            canvas.drawCentredString(page_width / 2, y, footer.text)
        else:
            canvas.drawString(left or doc.leftMargin, y, footer.text)
        canvas.restoreState()

    return draw_footer


def render(description: DocumentDescription) -> bytes:
    """
    Render a document description into PDF bytes

    Raises:
        RenderError: If ReportLab fails to build the document
    """
    buffer = io.BytesIO()
    try:
        doc = SimpleDocTemplate(
            buffer,
            pagesize=PAGE_SIZE,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN + 20,
            title=description.title,
        )
        builder = _FlowableBuilder(description, doc.width)
        elements = builder.build(description.content)

        if description.footer is not None:
            on_page = _footer_callback(description, builder.fonts)
            doc.build(elements, onFirstPage=on_page, onLaterPages=on_page)
        else:
            doc.build(elements)
    except Exception as e:
        logger.error(f"Error rendering document '{description.title}': {e}")
        raise RenderError(f"Could not render document: {e}") from e

    pdf_bytes = buffer.getvalue()
    logger.info(f"Rendered '{description.title}' ({doc.page} pages, {len(pdf_bytes)} bytes)")
    return pdf_bytes


async def render_async(description: DocumentDescription, timeout=None) -> bytes:
    """Render in a worker thread, optionally bounded by a deadline in seconds"""
    try:
        return await asyncio.wait_for(asyncio.to_thread(render, description), timeout)
    except asyncio.TimeoutError as e:
        logger.error(f"Rendering '{description.title}' exceeded {timeout}s")
        raise RenderError(f"Rendering timed out after {timeout} seconds") from e
