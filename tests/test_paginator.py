"""
Tests for the paginator: page boundaries, row placement and table lifecycle
"""
import math

import pytest

from pdf_generators.document import Cell, PageBreak, TableBlock, TableClosedError, text_block
from pdf_generators.paginator import Paginator, PaginatorState, paginate


def header():
    return [text_block("HEADER")]


def table():
    return TableBlock(column_widths=("*",), header_row=(Cell("No", "tableHeader"),))


def row(record, index, schema=()):
    return [Cell(record)]


def run(count, page_size, trailer=()):
    return paginate(range(count), page_size, row, header, table, trailer=trailer)


class TestPageBoundaries:

    def test_no_records_gives_one_empty_table(self):
        body = run(0, 15)
        assert body.row_counts == [0]
        assert not any(isinstance(block, PageBreak) for block in body.content)

    def test_exactly_one_page(self):
        body = run(15, 15)
        assert body.row_counts == [15]

    def test_one_record_over_a_page(self):
        body = run(16, 15)
        assert body.row_counts == [15, 1]

    def test_thirty_two_records(self):
        body = run(32, 15)
        assert body.row_counts == [15, 15, 2]
        breaks = [i for i, block in enumerate(body.content) if isinstance(block, PageBreak)]
        assert len(breaks) == 2
        # Each page break is followed by the header and the next table
        for position in breaks:
            assert body.content[position + 1].plain_text == "HEADER"
            assert isinstance(body.content[position + 2], TableBlock)
        first_rows = [table.body_rows[0][0].text for table in body.tables]
        assert first_rows == [0, 15, 30]

    @pytest.mark.parametrize("page_size", [1, 15, 30])
    @pytest.mark.parametrize("count", [0, 1, 14, 15, 29, 30, 31, 45, 61])
    def test_rows_land_in_expected_table(self, count, page_size):
        body = run(count, page_size)
        assert len(body.tables) == max(1, math.ceil(count / page_size))
        assert sum(body.row_counts) == count
        assert all(rows <= page_size for rows in body.row_counts)
        for i in range(count):
            table_index, row_index = divmod(i, page_size)
            assert body.tables[table_index].body_rows[row_index][0].text == i

    def test_each_page_starts_with_header(self):
        body = run(31, 15)
        headers = [block for block in body.content if getattr(block, "plain_text", None) == "HEADER"]
        assert len(headers) == len(body.tables) == 3


class TestLifecycle:

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            Paginator(0, row, header, table)

    def test_state_transitions(self):
        paginator = Paginator(15, row, header, table)
        assert paginator.state is PaginatorState.BEFORE_FIRST_PAGE
        assert paginator.open_table is None
        paginator.start()
        assert paginator.state is PaginatorState.PAGE_OPEN
        assert paginator.open_table is not None

    def test_all_tables_closed(self):
        body = run(32, 15)
        assert all(table.closed for table in body.tables)

    def test_closed_table_rejects_rows(self):
        body = run(3, 15)
        with pytest.raises(TableClosedError):
            body.tables[0].add_row([Cell("late")])

    def test_trailer_appended_once_at_end(self):
        trailer = [text_block("FIN")]
        body = run(32, 15, trailer=trailer)
        assert body.content[-1].plain_text == "FIN"
        assert sum(1 for block in body.content if getattr(block, "plain_text", None) == "FIN") == 1

    def test_schema_passed_to_row_renderer(self):
        seen = []

        def capture(record, index, schema):
            seen.append((index, schema))
            return [Cell(record)]

        paginate(["a", "b"], 15, capture, header, table, schema=("Act",))
        assert seen == [(0, ("Act",)), (1, ("Act",))]
