"""Tests for CSV serialization and the result table."""
import csv
import io
from datetime import datetime, timezone

from alttext.client.results_table import EMPTY_MESSAGE, ResultTable
from alttext.config.locales import CSV_HEADERS, LOCALES
from alttext.schemas import ResultRow
from alttext.services.csv_export_service import csv_document, export_filename, rows_to_csv


def make_row(filename, english_alt, **overrides):
    translations = {lc: f"{lc} text" for lc in LOCALES}
    translations.update({k.replace("_", "-"): v for k, v in overrides.items()})
    return ResultRow(filename=filename, english_alt=english_alt, translations=translations)


def parse(text):
    return list(csv.reader(io.StringIO(text, newline="")))


class TestRowsToCsv:

    def test_header_only_when_empty(self):
        assert parse(rows_to_csv([])) == [list(CSV_HEADERS)]

    def test_header_order(self):
        assert CSV_HEADERS == (
            "filename", "english_alt", "es-ES", "it-IT", "nl-NL", "nl-BE", "fr-FR", "de-DE", "de-AT",
        )

    def test_round_trip_with_special_characters(self):
        rows = [
            make_row("a.jpg", 'A dog, wearing a "red" scarf'),
            make_row("b,c.png", "Line one\nline two", fr_FR='Un chien "rouge", assis'),
            make_row("d.webp", "Café in Zürich", de_AT="Kaffeehaus in Zürich"),
        ]
        parsed = parse(rows_to_csv(rows))

        assert len(parsed) == 1 + len(rows)
        for row, fields in zip(rows, parsed[1:]):
            assert fields == [row.as_record()[h] for h in CSV_HEADERS]

    def test_quoting_only_where_needed(self):
        text = rows_to_csv([make_row("plain.jpg", 'say "hi", ok')])
        line = text.split("\r\n")[1]
        assert line.startswith('plain.jpg,"say ""hi"", ok",')

    def test_document_has_bom_and_utf8(self):
        doc = csv_document([make_row("x.jpg", "Crème brûlée")])
        assert doc.startswith(b"\xef\xbb\xbf")
        assert "Crème brûlée" in doc.decode("utf-8-sig")


class TestExportFilename:

    def test_timestamped(self):
        when = datetime(2026, 10, 18, 9, 30, 12, 345678, tzinfo=timezone.utc)
        assert export_filename(when) == "alt-texts-2026-10-18T09-30-12-345Z.csv"

    def test_no_colons_or_dots_in_stamp(self):
        name = export_filename()
        stamp = name[len("alt-texts-"):-len(".csv")]
        assert ":" not in stamp and "." not in stamp


class TestResultTable:

    def test_append_is_ordered_and_clear_empties(self):
        table = ResultTable()
        table.append([make_row("1.jpg", "one")])
        table.append([make_row("2.jpg", "two"), make_row("3.jpg", "three")])

        assert [r.filename for r in table] == ["1.jpg", "2.jpg", "3.jpg"]
        table.clear()
        assert len(table) == 0

    def test_export_writes_bom_csv(self, tmp_path):
        table = ResultTable()
        table.append([make_row("1.jpg", "one, two")])
        when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        path = table.export(tmp_path, now=when)

        assert path.name == "alt-texts-2026-01-02T03-04-05-000Z.csv"
        content = path.read_bytes().decode("utf-8-sig")
        assert parse(content)[1][:2] == ["1.jpg", "one, two"]

    def test_render(self):
        table = ResultTable()
        assert table.render() == EMPTY_MESSAGE

        table.append([make_row("cat.jpg", "A cat on a sofa")])
        out = table.render()
        assert out.startswith("[1] cat.jpg")
        assert "A cat on a sofa" in out
        for lc in LOCALES:
            assert lc in out
