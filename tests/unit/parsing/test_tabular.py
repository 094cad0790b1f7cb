"""Tests for delimited-table parsing."""

import csv

import pytest

from whisper_diary.core import ParseError, ParseReason
from whisper_diary.parsing import parse_table, coerce_number

MARKER_COLUMNS = ("Speaker Name", "Start Time", "End Time", "Text")


class TestCoerceNumber:
    def test_int(self):
        assert coerce_number("1000") == 1000
        assert isinstance(coerce_number("1000"), int)

    def test_float(self):
        assert coerce_number("1.5") == 1.5

    def test_not_numeric(self):
        with pytest.raises(ValueError):
            coerce_number("soon")

    @pytest.mark.parametrize("value", ["nan", "NaN", "inf", "-inf", "Infinity"])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            coerce_number(value)


class TestStrictParsing:
    def test_records_keyed_by_header(self):
        records = parse_table("start,end,text\n1000,3000,hello\n", coerce=("start", "end"))
        assert records == [{"start": 1000, "end": 3000, "text": "hello"}]

    def test_fields_and_header_trimmed(self):
        records = parse_table(" start , end ,text\n 1 , 2 ,  hi there  \n")
        assert records == [{"start": "1", "end": "2", "text": "hi there"}]

    def test_blank_lines_skipped(self):
        records = parse_table("start,end,text\n\n1,2,a\n   \n3,4,b\n\n")
        assert [r["text"] for r in records] == ["a", "b"]

    def test_quoted_fields_with_commas_and_newlines(self):
        records = parse_table('start,end,text\n1,2,"one, two"\n3,4,"multi\nline"\n')
        assert records[0]["text"] == "one, two"
        assert records[1]["text"] == "multi\nline"

    def test_byte_order_mark_ignored(self):
        records = parse_table("\ufeffstart,end,text\n1,2,a\n", required=("start",))
        assert records[0]["start"] == "1"

    def test_header_only_is_empty_not_error(self):
        assert parse_table("start,end,text\n", required=("start", "end", "text")) == []

    def test_text_after_closing_quote(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table('start,end,text\n1000,2000,"hello" world\n')
        assert exc_info.value.reason is ParseReason.QUOTING

    def test_unterminated_quote(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table('start,end,text\n1000,2000,"hello\n')
        assert exc_info.value.reason is ParseReason.QUOTING

    def test_row_width_mismatch(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("start,end,text\n1,2,a\n1000,2000\n")
        assert exc_info.value.reason is ParseReason.COLUMNS
        assert exc_info.value.line == 3

    def test_non_numeric_coerced_column(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("start,end,text\nabc,2000,hi\n", coerce=("start", "end"))
        assert exc_info.value.reason is ParseReason.VALUE

    def test_non_finite_coerced_column(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("start,end,text\nnan,3000,hi\n", coerce=("start", "end"))
        assert exc_info.value.reason is ParseReason.VALUE
        assert exc_info.value.line == 2

    def test_oversized_field(self):
        big = "x" * (csv.field_size_limit() + 1)
        with pytest.raises(ParseError) as exc_info:
            parse_table(f"start,end,text\n1,2,{big}\n")
        assert exc_info.value.reason is ParseReason.VALUE

    def test_missing_required_column(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("begin,finish,words\n1,2,x\n", required=("start", "end", "text"))
        assert exc_info.value.reason is ParseReason.HEADER

    def test_no_header_row(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("\n\n   \n", required=("start",))
        assert exc_info.value.reason is ParseReason.HEADER


class TestTolerantParsing:
    HEADER = "Speaker Name,Start Time,End Time,Text\n"

    def parse(self, body):
        return parse_table(self.HEADER + body, tolerant=True, required=MARKER_COLUMNS)

    def test_stray_quotes_kept_as_text(self):
        records = self.parse('Alice,00;00;00;00,00;00;05;00,She said "hi" there\n')
        assert records[0]["Text"] == 'She said "hi" there'

    def test_text_after_closing_quote_accepted(self):
        records = self.parse('Alice,00;00;00;00,00;00;05;00,"quoted" tail\n')
        assert len(records) == 1
        assert records[0]["Speaker Name"] == "Alice"

    def test_short_row_dropped(self):
        records = self.parse("Alice,00;00;00;00\nBob,00;00;05;00,00;00;06;00,ok\n")
        assert [r["Speaker Name"] for r in records] == ["Bob"]

    def test_extra_cells_ignored(self):
        records = self.parse("Alice,00;00;00;00,00;00;05;00,hi,extra,more\n")
        assert records == [
            {
                "Speaker Name": "Alice",
                "Start Time": "00;00;00;00",
                "End Time": "00;00;05;00",
                "Text": "hi",
            }
        ]

    def test_rows_with_empty_required_values_dropped(self):
        records = self.parse(
            ",00;00;00;00,00;00;01;00,nobody\n"
            "Alice,00;00;01;00,00;00;02;00,\n"
            "Bob,00;00;02;00,00;00;03;00,kept\n"
        )
        assert [r["Speaker Name"] for r in records] == ["Bob"]

    def test_optional_columns_may_be_empty(self):
        records = parse_table(
            self.HEADER + "Alice,00;00;00;00,00;00;01;00,\n",
            tolerant=True,
            required=("Speaker Name", "Start Time", "End Time"),
        )
        assert records[0]["Text"] == ""

    def test_missing_header_still_fails(self):
        with pytest.raises(ParseError) as exc_info:
            parse_table("Alice,00;00;00;00,00;00;05;00,hi\n", tolerant=True, required=MARKER_COLUMNS)
        assert exc_info.value.reason is ParseReason.HEADER

    def test_unclosed_quote_fails_at_opening_line(self):
        with pytest.raises(ParseError) as exc_info:
            self.parse(
                'Alice,00;00;00;00,00;00;05;00,"unterminated\n'
                "Bob,00;00;05;01,00;00;09;00,ok\n"
                "Carol,00;00;09;01,00;00;12;00,ok\n"
            )
        assert exc_info.value.reason is ParseReason.QUOTING
        assert exc_info.value.line == 2

    def test_unclosed_quote_on_last_line(self):
        with pytest.raises(ParseError) as exc_info:
            self.parse(
                "Alice,00;00;00;00,00;00;05;00,ok\n"
                'Bob,00;00;05;01,00;00;09;00,"never closed'
            )
        assert exc_info.value.reason is ParseReason.QUOTING
        assert exc_info.value.line == 3

    def test_closed_multiline_quote_at_end(self):
        records = self.parse('Alice,00;00;00;00,00;00;05;00,"two\nlines"\n')
        assert records[0]["Text"] == "two\nlines"

    def test_stray_quote_on_last_line_accepted(self):
        records = self.parse('Alice,00;00;00;00,00;00;05;00,6" tall')
        assert records[0]["Text"] == '6" tall'
