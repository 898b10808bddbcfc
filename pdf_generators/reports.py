"""Report generators for administrators, teachers, periods, teaching history, student lists and statistics

Each ``build_*_report`` function lays out its records into a document
description; the matching ``export_*`` function renders it to PDF bytes.
"""

import io
import logging

from PyPDF2 import PdfMerger

from config import APP_CONFIG, REPORT_CONFIG
from util.date_utils import get_date_and_time
from .document import Cell, DocumentContext, ImageBlock, TableBlock, text_block
from .grades import (
    PLACEHOLDER, compute_average, compute_outcome_summary, find_activity_grade,
    format_average, infer_columns,
)
from .layout import (
    DEFAULT_CAREER, DEFAULT_TEACHER, REPORT_LAYOUTS, ReportType, build_header,
    build_table_skeleton,
)
from .paginator import paginate
from .renderer import assemble, page_number_footer, render, render_async
from .styles import build_style_dictionary

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = 'application/pdf'
REPORT_FILENAMES = {report_type: layout.filename for report_type, layout in REPORT_LAYOUTS.items()}

STATISTICS_CHARTS = [
    ("Gráfica 1. Estado de alumnos por unidades",
     "Representación gráfica de estudiantes aprobados, reprobados y desertores a lo largo del semestre."),
    ("Gráfica 2. Rango de promedios",
     "Visualización de los promedios finales de los estudiantes divididos por rango de calificación."),
    ("Gráfica 3. Estado final de los alumnos",
     "Representación gráfica de estudiantes aprobados, reprobados y desertores al finalizar el semestre."),
]
CHART_FIT = (515, 260)


def _fecha(fecha):
    return fecha or get_date_and_time()['fecha']


def _context(fecha, entity_name=None, details=()):
    return DocumentContext(
        institution=APP_CONFIG['institution_name'],
        program=APP_CONFIG['program_name'],
        fecha=fecha,
        entity_name=entity_name,
        details=tuple(details),
    )


def _value(record, key, default=PLACEHOLDER):
    value = record.get(key) if record else None
    return default if value is None else value


def _build_paginated(report_type, records, context, assets, row_renderer, schema=(), trailer=()):
    layout = REPORT_LAYOUTS[report_type]
    body = paginate(
        records,
        layout.page_size,
        row_renderer,
        header_factory=lambda: build_header(context, assets, report_type),
        table_factory=lambda: build_table_skeleton(report_type, schema),
        schema=schema,
        trailer=trailer,
    )
    logger.info(
        f"Built {report_type.value} report: {sum(body.row_counts)} rows in {len(body.tables)} tables"
    )
    return assemble(
        body.content,
        build_style_dictionary(**layout.font_sizes),
        footer_factory=page_number_footer,
        fonts=assets.font_names,
        title=layout.filename,
    )


# ==================== ROW RENDERERS ====================

def user_row(record, index, schema=()):
    """Row for administrator and teacher listings"""
    return [
        Cell(index + 1),
        Cell(_value(record, 'nombre')),
        Cell(_value(record, 'correo')),
        Cell(_value(record, 'fechaRegistro')),
        Cell(_value(record, 'horaRegistro')),
    ]


def period_row(record, index, schema=()):
    return [
        Cell(index + 1),
        Cell(_value(record, 'periodo')),
        Cell(_value(record, 'claveReticula')),
        Cell(_value(record, 'fechaRegistro')),
        Cell(_value(record, 'horaRegistro')),
    ]


def _outcome(percentage, count):
    return f"{percentage}% ({count})"


def teaching_history_row(record, index, schema=()):
    """Row for one taught group; ``record`` is a (group, subject) pair"""
    group, subject = record
    subject = subject or {}
    return [
        Cell(_value(subject, 'claveMateria')),
        Cell(_value(subject, 'nombreMateria')),
        Cell(_value(group, 'periodo')),
        Cell(_outcome(_value(group, 'porcentajeAprobados', 0), _value(group, 'alumnosAprobados', 0))),
        Cell(_outcome(_value(group, 'porcentajeReprobados', 0), _value(group, 'alumnosReprobados', 0))),
        Cell(_outcome(_value(group, 'porcentajeDesertados', 0), _value(group, 'alumnosDesertados', 0))),
    ]


def student_row(record, index, schema=()):
    """Row for the student list: one cell per inferred activity, then the average"""
    average = compute_average(record.get('calificaciones'))
    return [
        Cell(index + 1),
        Cell(_value(record, 'nombre'), 'tableDataName'),
        *(Cell(find_activity_grade(record, activity)) for activity in schema),
        Cell(format_average(average)),
    ]


# ==================== REPORT BUILDERS ====================

def build_admins_report(admins, assets, fecha=None):
    context = _context(_fecha(fecha))
    return _build_paginated(ReportType.ADMINISTRATORS, admins, context, assets, user_row)


def build_teachers_report(teachers, carrera, assets, fecha=None):
    context = _context(_fecha(fecha), entity_name=carrera or DEFAULT_CAREER)
    return _build_paginated(ReportType.TEACHERS, teachers, context, assets, user_row)


def build_periods_report(periods, assets, fecha=None):
    """Periods of one career; the career name is taken from the first record"""
    periods = list(periods)
    carrera = (periods[0].get('carrera') if periods else None) or DEFAULT_CAREER
    context = _context(_fecha(fecha), entity_name=carrera)
    return _build_paginated(ReportType.PERIODS, periods, context, assets, period_row)


def build_teaching_history_report(groups, subjects, teacher, assets, fecha=None):
    """
    History of the groups taught by a teacher

    ``subjects`` is aligned with ``groups`` by position; groups without a
    matching subject show placeholders for the subject columns.
    """
    groups = list(groups)
    subjects = list(subjects or ())
    records = [
        (group, subjects[i] if i < len(subjects) else None)
        for i, group in enumerate(groups)
    ]
    teacher_name = (teacher or {}).get('nombre') or DEFAULT_TEACHER
    context = _context(_fecha(fecha), entity_name=teacher_name)
    return _build_paginated(ReportType.TEACHING_HISTORY, records, context, assets, teaching_history_row)


def _student_list_details(group, subject, teacher, unit, total_students):
    group = group or {}
    subject = subject[0] if isinstance(subject, (list, tuple)) and subject else (subject or {})
    return (
        ('DEPARTAMENTO', _value(group, 'carrera')),
        ('MATERIA', _value(subject, 'nombreMateria')),
        ('PROFESOR', _value(teacher, 'nombre')),
        ('PERIODO', _value(group, 'periodo')),
        ('GRUPO', _value(group, 'numeroGrupo')),
        ('UNIDAD', 0 if unit is None else unit),
        ('CLAVE', _value(subject, 'claveMateria')),
        ('ALUMNOS', 0 if total_students is None else total_students),
    )


def _outcome_table(summary):
    return TableBlock(
        column_widths=('*', '15%', '15%'),
        header_row=(),
        body_rows=[tuple(Cell(value) for value in row) for row in summary.rows()],
        header_fill=None,
        margin=(0, 25, 0, 0),
    )


def _signature_footer(fecha):
    return [
        text_block('________________________________________', style='tableData',
                   alignment='center', margin=(0, 50, 0, 10)),
        text_block('Firma del profesor', style='tableData', alignment='center', margin=(0, 0, 0, 10)),
        text_block('Este documento no es válido si tiene tachaduras o enmendaduras',
                   style='tableData', alignment='center'),
        text_block(f"{APP_CONFIG['city_line']} a {fecha}", style='tableData', alignment='center'),
    ]


def build_student_list_report(group, subject, teacher, students, unit, percentages,
                              total_students, assets, fecha=None):
    """
    Grade sheet of a group: one row per student with a column per graded activity

    The activity columns are inferred from every student before any row is
    laid out. The outcome summary and signature block follow the last page.
    """
    students = list(students or ())
    fecha = _fecha(fecha)
    schema = infer_columns(students)
    details = _student_list_details(group, subject, teacher, unit, total_students)
    context = _context(fecha, entity_name=details[0][1], details=details)

    summary = compute_outcome_summary(percentages, total_students)
    trailer = [_outcome_table(summary), *_signature_footer(fecha)]

    return _build_paginated(
        ReportType.STUDENT_LIST, students, context, assets, student_row,
        schema=schema, trailer=trailer,
    )


def build_statistics_report(group, subject, teacher, students, files, assets, fecha=None):
    """Statistics charts of a group: a title, a description and an image per chart"""
    files = list(files or ())
    if len(files) != len(STATISTICS_CHARTS):
        raise ValueError(f"Expected {len(STATISTICS_CHARTS)} chart images, got {len(files)}")

    subject = subject[0] if isinstance(subject, (list, tuple)) and subject else (subject or {})
    details = (
        ('GRUPO', _value(group, 'numeroGrupo')),
        ('PROFESOR', _value(teacher, 'nombre')),
    )
    context = _context(_fecha(fecha), entity_name=_value(subject, 'nombreMateria'), details=details)

    content = build_header(context, assets, ReportType.STATISTICS)
    for (title, description), chart in zip(STATISTICS_CHARTS, files):
        buffer = chart['buffer'] if isinstance(chart, dict) else chart
        content.extend([
            text_block(title, style='statisticsTitle', margin=(0, 0, 0, 10)),
            text_block(description, style='statisticsText', margin=(0, 0, 0, 10)),
            ImageBlock(bytes(buffer), fit=CHART_FIT, alignment='center'),
        ])

    logger.info(f"Built statistics report with {len(files)} charts")
    layout = REPORT_LAYOUTS[ReportType.STATISTICS]
    return assemble(
        content,
        build_style_dictionary(**layout.font_sizes),
        footer_factory=None,
        fonts=assets.font_names,
        title=layout.filename,
    )


# ==================== EXPORTS ====================

def export_admins(admins, assets, fecha=None):
    return render(build_admins_report(admins, assets, fecha))


def export_teachers(teachers, carrera, assets, fecha=None):
    return render(build_teachers_report(teachers, carrera, assets, fecha))


def export_periods(periods, assets, fecha=None):
    return render(build_periods_report(periods, assets, fecha))


def export_teaching_history(groups, subjects, teacher, assets, fecha=None):
    return render(build_teaching_history_report(groups, subjects, teacher, assets, fecha))


def export_student_list(group, subject, teacher, students, unit, percentages,
                        total_students, assets, fecha=None):
    return render(build_student_list_report(
        group, subject, teacher, students, unit, percentages, total_students, assets, fecha))


def export_statistics(group, subject, teacher, students, files, assets, fecha=None):
    return render(build_statistics_report(group, subject, teacher, students, files, assets, fecha))


REPORT_BUILDERS = {
    ReportType.ADMINISTRATORS: build_admins_report,
    ReportType.TEACHERS: build_teachers_report,
    ReportType.PERIODS: build_periods_report,
    ReportType.TEACHING_HISTORY: build_teaching_history_report,
    ReportType.STUDENT_LIST: build_student_list_report,
    ReportType.STATISTICS: build_statistics_report,
}


async def export_report_async(report_type, *args, timeout=None, **kwargs):
    """
    Build a report and render it off the event loop

    Args:
        report_type: ReportType selecting the builder
        *args, **kwargs: Arguments of the matching ``build_*_report`` function
        timeout: Deadline for the render step in seconds, defaults to
            REPORT_CONFIG["render_timeout"]; 0 disables it

    Returns:
        bytes: The rendered PDF
    """
    if timeout is None:
        timeout = REPORT_CONFIG['render_timeout']
    description = REPORT_BUILDERS[report_type](*args, **kwargs)
    return await render_async(description, timeout=timeout or None)


def merge_reports(buffers):
    """Concatenate several rendered PDFs into a single document"""
    merger = PdfMerger()
    for buffer in buffers:
        merger.append(io.BytesIO(buffer))

    output_buffer = io.BytesIO()
    merger.write(output_buffer)
    merger.close()
    return output_buffer.getvalue()
