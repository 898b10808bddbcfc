"""Abstract document description consumed by the PDF renderer.

Report generators never touch ReportLab directly: they describe the document
as a sequence of content blocks (styled text, tables, images, page breaks)
and hand it to the renderer.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

HEADER_FILL = '#18316B'

WidthSpec = Union[str, int, float]


class TableClosedError(RuntimeError):
    """Raised when a row is appended to a table whose page is already closed"""


@dataclass(frozen=True)
class Cell:
    text: Union[str, int, float]
    style: str = 'tableData'


@dataclass(frozen=True)
class TextRun:
    text: str
    bold: bool = False
    underline: bool = False


@dataclass(frozen=True)
class TextBlock:
    runs: Tuple[TextRun, ...]
    style: str = 'text'
    alignment: Optional[str] = None
    margin: Optional[Tuple[float, float, float, float]] = None

    @property
    def plain_text(self):
        return ''.join(run.text for run in self.runs)


@dataclass(frozen=True)
class ImageBlock:
    data: bytes
    fit: Optional[Tuple[float, float]] = None
    width: Optional[float] = None
    height: Optional[float] = None
    alignment: str = 'left'


@dataclass(frozen=True)
class ColumnsBlock:
    columns: Tuple[Any, ...]
    widths: Tuple[WidthSpec, ...] = ()


@dataclass(frozen=True)
class StackBlock:
    blocks: Tuple[Any, ...]


@dataclass(frozen=True)
class SpacerBlock:
    height: float


@dataclass(frozen=True)
class PageBreak:
    """Marker: the next block starts on a new page"""


@dataclass
class TableBlock:
    """One table of a report page: column widths, header row and body rows"""

    column_widths: Tuple[WidthSpec, ...]
    header_row: Tuple[Cell, ...]
    body_rows: list = field(default_factory=list)
    header_fill: Optional[str] = HEADER_FILL
    padding: Tuple[float, float, float, float] = (5, 5, 3, 3)  # left, right, top, bottom
    margin: Optional[Tuple[float, float, float, float]] = None
    closed: bool = False

    header_rows = 1

    def add_row(self, cells: Sequence[Cell]):
        if self.closed:
            raise TableClosedError("Cannot add rows to a closed table")
        self.body_rows.append(tuple(cells))

    def close(self):
        self.closed = True
        self.body_rows = tuple(self.body_rows)

    @property
    def row_count(self):
        return len(self.body_rows)


@dataclass(frozen=True)
class Footer:
    text: str
    alignment: str = 'right'
    margin: Tuple[float, float, float, float] = (0, 0, 40, 0)


@dataclass(frozen=True)
class DocumentContext:
    """Per-invocation report context, never mutated once generation starts"""

    institution: str
    program: str
    fecha: str = 'N/A'
    hora: str = ''
    entity_name: Optional[str] = None
    details: Tuple[Tuple[str, Any], ...] = ()

    def detail(self, label, default=None):
        for key, value in self.details:
            if key == label:
                return value
        return default


@dataclass(frozen=True)
class DocumentDescription:
    content: Tuple[Any, ...]
    styles: Mapping[str, Any]
    footer: Optional[Callable[[int], Footer]] = None
    fonts: Optional[Any] = None
    title: str = ''

    @property
    def tables(self):
        return [block for block in self.content if isinstance(block, TableBlock)]

    @property
    def page_breaks(self):
        return sum(1 for block in self.content if isinstance(block, PageBreak))


def text_block(*parts, style='text', alignment=None, margin=None):
    """Build a TextBlock from plain strings and TextRun instances"""
    runs = tuple(part if isinstance(part, TextRun) else TextRun(str(part)) for part in parts)
    return TextBlock(runs=runs, style=style, alignment=alignment, margin=margin)
