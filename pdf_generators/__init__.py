# pdf_generators/__init__.py

"""
PDF report generation - assets, layout, pagination and rendering of academic reports
"""

from .assets import AssetBundle, MissingAssetError, load_assets, buffer_to_data_url
from .document import (
    Cell, DocumentContext, DocumentDescription, PageBreak, TableBlock, TableClosedError,
)
from .grades import compute_average, compute_outcome_summary, infer_columns
from .layout import ReportType, build_header, build_table_skeleton
from .paginator import Paginator, PaginatorState, paginate
from .renderer import RenderError, assemble, render, render_async
from .reports import (
    PDF_CONTENT_TYPE,
    REPORT_FILENAMES,
    build_admins_report,
    build_periods_report,
    build_statistics_report,
    build_student_list_report,
    build_teachers_report,
    build_teaching_history_report,
    export_admins,
    export_periods,
    export_report_async,
    export_statistics,
    export_student_list,
    export_teachers,
    export_teaching_history,
    merge_reports,
)

__all__ = [
    # Assets
    'AssetBundle',
    'MissingAssetError',
    'load_assets',
    'buffer_to_data_url',

    # Document model
    'Cell',
    'DocumentContext',
    'DocumentDescription',
    'PageBreak',
    'TableBlock',
    'TableClosedError',

    # Engine
    'compute_average',
    'compute_outcome_summary',
    'infer_columns',
    'ReportType',
    'build_header',
    'build_table_skeleton',
    'Paginator',
    'PaginatorState',
    'paginate',
    'RenderError',
    'assemble',
    'render',
    'render_async',

    # Reports
    'PDF_CONTENT_TYPE',
    'REPORT_FILENAMES',
    'build_admins_report',
    'build_periods_report',
    'build_statistics_report',
    'build_student_list_report',
    'build_teachers_report',
    'build_teaching_history_report',
    'export_admins',
    'export_periods',
    'export_report_async',
    'export_statistics',
    'export_student_list',
    'export_teachers',
    'export_teaching_history',
    'merge_reports',
]
