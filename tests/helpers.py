"""Shared fakes for the test suite."""
import os
import shutil
import tempfile
import unittest
from datetime import datetime, timedelta, timezone


VERSES = [
    {"reference": "Jean 3:16", "text": "Car Dieu a tant aimé le monde..."},
    {"reference": "Psaume 23:1", "text": "L'Éternel est mon berger."},
    {"reference": "Philippiens 4:13", "text": "Je puis tout par celui qui me fortifie."},
]


class MemoryStore:
    """In-memory stand-in for JsonFileStore."""

    path = '<memory>'

    def __init__(self, records=None):
        self.records = list(records or [])
        self.reads = 0

    def read_all(self):
        self.reads += 1
        return list(self.records)

    def write_all(self, records):
        self.records = list(records)

    def append(self, record):
        records = self.read_all()
        records.append(record)
        self.write_all(records)
        return records


class FakeClock:
    def __init__(self, start=None):
        self.now = start or datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class TmpDirMixin(unittest.TestCase):
    """Creates a fresh temp directory for each test."""

    def setUp(self):
        self.tmp = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def _path(self, name: str) -> str:
        return os.path.join(self.tmp, name)
