"""
Tests for the prayer request CSV export.

Run with:
    python -m pytest tests/test_csv_export.py
"""
import csv
import io
import unittest

from errors import ExportError
from utils.csv_export import FILENAME, HEADER, CsvExporter
from tests.helpers import MemoryStore


def _parse(output):
    return list(csv.reader(io.StringIO(output.decode('utf-8'))))


REQUESTS = [
    {'name': 'Marie', 'phone': '0601', 'prayer': 'Pour ma famille', 'submitted_at': '2024-03-01T08:00:00+00:00'},
    {'name': 'Dupont, Jean', 'phone': '0602', 'prayer': 'Il a dit "courage"', 'submitted_at': '2024-03-02T09:00:00+00:00'},
    {'name': 'Zoé', 'phone': '', 'prayer': 'Guérison', 'submitted_at': '2024-02-01T10:00:00+00:00'},
]


class TestCsvExporter(unittest.TestCase):

    def test_header_labels(self):
        self.assertEqual(HEADER, ["Nom", "Téléphone", "Sujet de prière", "Date de soumission"])
        self.assertEqual(FILENAME, "prayer_requests.csv")

    def test_empty_collection_is_header_only(self):
        output = CsvExporter(MemoryStore([])).export_csv()
        self.assertEqual(output.decode('utf-8').splitlines(), [','.join(HEADER)])

    def test_one_line_per_record_in_collection_order(self):
        output = CsvExporter(MemoryStore(REQUESTS)).export_csv()
        self.assertEqual(len(output.decode('utf-8').splitlines()), len(REQUESTS) + 1)

        rows = _parse(output)
        self.assertEqual(rows[0], HEADER)
        for row, record in zip(rows[1:], REQUESTS):
            self.assertEqual(row, [record['name'], record['phone'], record['prayer'], record['submitted_at']])

    def test_quoting(self):
        output = CsvExporter(MemoryStore(REQUESTS[1:2])).export_csv().decode('utf-8')
        self.assertIn('"Dupont, Jean"', output)
        self.assertIn('"Il a dit ""courage"""', output)

    def test_line_breaks_inside_a_field_are_quoted(self):
        record = {'name': 'Marie', 'phone': '0601', 'prayer': 'Première ligne\nDeuxième ligne', 'submitted_at': 'x'}
        rows = _parse(CsvExporter(MemoryStore([record])).export_csv())
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][2], 'Première ligne\nDeuxième ligne')

    def test_bare_carriage_return_is_quoted(self):
        record = {'name': 'a\rb', 'phone': '1', 'prayer': 'p\r', 'submitted_at': 't'}
        output = CsvExporter(MemoryStore([record])).export_csv()
        self.assertIn(b'"a\rb"', output)
        rows = _parse(output)
        self.assertEqual(rows[1:], [['a\rb', '1', 'p\r', 't']])

    def test_missing_fields_render_empty(self):
        rows = _parse(CsvExporter(MemoryStore([{'name': 'Marie', 'phone': None}])).export_csv())
        self.assertEqual(rows[1], ['Marie', '', '', ''])

    def test_output_is_utf8(self):
        output = CsvExporter(MemoryStore(REQUESTS)).export_csv()
        self.assertIsInstance(output, bytes)
        self.assertIn('Zoé'.encode('utf-8'), output)

    def test_non_object_record_raises_export_error(self):
        with self.assertRaises(ExportError):
            CsvExporter(MemoryStore(['not a record'])).export_csv()

    def test_unreadable_store_raises_export_error(self):
        class BrokenStore(MemoryStore):
            def read_all(self):
                from errors import ParseError
                raise ParseError('bad json')

        with self.assertRaises(ExportError):
            CsvExporter(BrokenStore()).export_csv()


if __name__ == '__main__':
    unittest.main()
