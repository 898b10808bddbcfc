"""Layout primitives: page headers and empty table skeletons for each report type"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .document import (
    Cell, ColumnsBlock, DocumentContext, ImageBlock, SpacerBlock, StackBlock,
    TableBlock, TextRun, text_block,
)

DEFAULT_CAREER = 'No especificada'
DEFAULT_TEACHER = 'No especificado'
DEFAULT_DATE = 'N/A'


class ReportType(Enum):
    ADMINISTRATORS = 'administrators'
    TEACHERS = 'teachers'
    PERIODS = 'periods'
    TEACHING_HISTORY = 'teaching_history'
    STUDENT_LIST = 'student_list'
    STATISTICS = 'statistics'


@dataclass(frozen=True)
class ReportLayout:
    page_size: int
    headers: Tuple[str, ...]
    widths: Tuple[str, ...]
    filename: str
    padding: Tuple[float, float, float, float] = (5, 5, 3, 3)
    font_sizes: Dict[str, float] = field(default_factory=dict)


REPORT_LAYOUTS = {
    ReportType.ADMINISTRATORS: ReportLayout(
        page_size=15,
        headers=('No', 'Nombre', 'Correo', 'Fecha', 'Hora'),
        widths=('5%', '35%', '35%', '15%', '10%'),
        filename='administradores.pdf',
        font_sizes={'tableHeader': 11, 'tableData': 10, 'text': 12},
    ),
    ReportType.TEACHERS: ReportLayout(
        page_size=15,
        headers=('No', 'Nombre', 'Correo', 'Fecha', 'Hora'),
        widths=('5%', '35%', '35%', '15%', '10%'),
        filename='docentes.pdf',
        font_sizes={'tableHeader': 11, 'tableData': 10, 'text': 12},
    ),
    ReportType.PERIODS: ReportLayout(
        page_size=15,
        headers=('No', 'Periodo', 'Retícula', 'Fecha', 'Hora'),
        widths=('10%', '30%', '20%', '20%', '20%'),
        filename='periodos.pdf',
        padding=(5, 5, 2, 2),
        font_sizes={'tableHeader': 12, 'tableData': 10, 'text': 12},
    ),
    ReportType.TEACHING_HISTORY: ReportLayout(
        page_size=15,
        headers=('Grupo', 'Materia', 'Periodo', 'Aprob.', 'Reprob.', 'Deser.'),
        widths=('10%', '30%', '15%', '15%', '15%', '15%'),
        filename='historial_docente.pdf',
        font_sizes={'tableHeader': 10, 'tableData': 9, 'text': 10},
    ),
    ReportType.STUDENT_LIST: ReportLayout(
        page_size=30,
        headers=('No.', 'Nombre', 'Promedio'),
        widths=('5%', '*', '15%'),
        filename='lista_alumnos.pdf',
        font_sizes={'tableHeader': 10, 'tableData': 8, 'tableDataName': 8, 'text': 10},
    ),
    ReportType.STATISTICS: ReportLayout(
        page_size=1,
        headers=(),
        widths=(),
        filename='estadisticas.pdf',
        font_sizes={'statisticsTitle': 12, 'statisticsText': 11},
    ),
}


def _underlined(value):
    return TextRun(str(value), underline=True)


def _context_sentence(context: DocumentContext, report_type: ReportType):
    fecha = _underlined(f"{context.fecha or DEFAULT_DATE}.")

    if report_type is ReportType.ADMINISTRATORS:
        return text_block(
            'Información de todos los administradores registrados en el sistema hasta ', fecha)
    if report_type is ReportType.TEACHERS:
        return text_block(
            'Información de todos los docentes de la carrera ',
            _underlined(context.entity_name or DEFAULT_CAREER),
            ' registrados en el sistema hasta ', fecha)
    if report_type is ReportType.PERIODS:
        return text_block(
            'Información de todos los periodos de la carrera ',
            _underlined(context.entity_name or DEFAULT_CAREER),
            ' registrados en el sistema hasta ', fecha)
    if report_type is ReportType.TEACHING_HISTORY:
        return text_block(
            'Información de todos los grupos impartidos por el/la docente ',
            _underlined(context.entity_name or DEFAULT_TEACHER),
            ' registrados en el sistema hasta ', fecha)
    if report_type is ReportType.STATISTICS:
        return text_block(
            'Estadísticas del grupo ', _underlined(context.detail('GRUPO', '-')),
            ' de la materia ', _underlined(context.entity_name or '-'),
            ' registradas hasta ', fecha)
    if report_type is ReportType.STUDENT_LIST:
        return _group_details(context)
    raise ValueError(f"Unsupported report type: {report_type}")


def _detail_line(label, value, underline=False):
    return text_block(f"{label}: ", TextRun(str(value), bold=True, underline=underline))


def _group_details(context: DocumentContext):
    """Two columns of LABEL: value lines describing the group"""
    details = list(context.details)
    left, right = details[:4], details[4:]
    left_lines = tuple(_detail_line(label, value) for label, value in left)
    right_lines = tuple(
        _detail_line(label, value, underline=(label == 'ALUMNOS')) for label, value in right
    )
    return ColumnsBlock(
        columns=(StackBlock(left_lines), StackBlock(right_lines)),
        widths=('75%', '25%'),
    )


def build_header(context: DocumentContext, assets, report_type: ReportType):
    """
    Build the header repeated at the top of every report page

    Returns the logos row, the institution name, the program subtitle and
    the contextual block for the report type, in that order.
    """
    blocks = [
        ColumnsBlock(
            columns=(
                ImageBlock(assets.primary_logo_data, fit=(100, 100)),
                ImageBlock(assets.secondary_logo_data, fit=(60, 100), alignment='right'),
            ),
            widths=('*', '*'),
        ),
        text_block(context.institution, style='mainHeader'),
        text_block(context.program, style='header'),
        _context_sentence(context, report_type),
    ]
    if report_type is not ReportType.STATISTICS:
        blocks.append(SpacerBlock(10))
    return blocks


def build_table_skeleton(report_type: ReportType, schema=()) -> TableBlock:
    """Return an empty table with the header row and column widths of the report type"""
    layout = REPORT_LAYOUTS[report_type]
    if not layout.headers:
        raise ValueError(f"{report_type.value} reports have no table")

    headers = list(layout.headers)
    widths = list(layout.widths)
    if report_type is ReportType.STUDENT_LIST:
        # Activity columns go between the name and the average
        headers[2:2] = [f"Act{i + 1}" for i in range(len(schema))]
        widths[2:2] = ['auto'] * len(schema)

    return TableBlock(
        column_widths=tuple(widths),
        header_row=tuple(Cell(header, 'tableHeader') for header in headers),
        padding=layout.padding,
    )
