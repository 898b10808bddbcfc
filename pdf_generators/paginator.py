"""Pagination of report records into repeated header + table pages"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from .document import PageBreak, TableBlock

logger = logging.getLogger(__name__)


class PaginatorState(Enum):
    BEFORE_FIRST_PAGE = 'before_first_page'
    PAGE_OPEN = 'page_open'


@dataclass
class PaginatedBody:
    content: list
    tables: List[TableBlock]

    @property
    def row_counts(self):
        return [table.row_count for table in self.tables]


class Paginator:
    """
    Lay out records as rows of a table, opening a new page every ``page_size`` rows

    Every page starts with the blocks returned by ``header_factory`` followed
    by a fresh table from ``table_factory``. Pages after the first are
    preceded by a page break marker. Rows are produced by
    ``row_renderer(record, index, schema)``.
    """

    def __init__(self, page_size: int, row_renderer: Callable, header_factory: Callable,
                 table_factory: Callable, schema: Sequence = ()):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.row_renderer = row_renderer
        self.header_factory = header_factory
        self.table_factory = table_factory
        self.schema = tuple(schema)

        self.state = PaginatorState.BEFORE_FIRST_PAGE
        self.content = []
        self.tables = []
        self.index = 0

    @property
    def open_table(self):
        return self.tables[-1] if self.tables else None

    def _open_page(self):
        self.content.extend(self.header_factory())
        table = self.table_factory()
        self.content.append(table)
        self.tables.append(table)

    def start(self):
        if self.state is PaginatorState.BEFORE_FIRST_PAGE:
            self._open_page()
            self.state = PaginatorState.PAGE_OPEN
        return self

    def add(self, record):
        self.start()
        i = self.index
        if i > 0 and i % self.page_size == 0:
            self.open_table.close()
            self.content.append(PageBreak())
            self._open_page()
        self.open_table.add_row(self.row_renderer(record, i, self.schema))
        self.index += 1

    def finish(self, trailer=()) -> PaginatedBody:
        """Close the last table and append the trailer blocks once"""
        self.start()
        if not self.open_table.closed:
            self.open_table.close()
        self.content.extend(trailer)
        logger.debug(f"Paginated {self.index} rows into {len(self.tables)} tables")
        return PaginatedBody(content=self.content, tables=self.tables)


def paginate(records, page_size, row_renderer, header_factory, table_factory,
             schema=(), trailer=()) -> PaginatedBody:
    paginator = Paginator(page_size, row_renderer, header_factory, table_factory, schema)
    paginator.start()
    for record in records:
        paginator.add(record)
    return paginator.finish(trailer)
