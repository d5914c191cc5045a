# store.py
import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager

from errors import ParseError, StoreWriteError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """A collection of records kept as one JSON array in a flat file.

    Every read parses the whole document and every write replaces it, so
    nothing is cached between calls.
    """

    def __init__(self, path):
        self.path = str(path)
        self._lock = threading.Lock()

    def read_all(self):
        """Return the records in the file, or an empty list if there are none."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {self.path}: {str(e)}")
            raise ParseError(f"Could not read {self.path}") from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Malformed JSON in {self.path}: {str(e)}")
            raise ParseError(f"Malformed JSON in {self.path}") from e

        if not isinstance(data, list):
            raise ParseError(f"{self.path} does not contain a JSON array")
        return data

    def write_all(self, records):
        """Replace the file with *records* (write-then-rename)."""
        dir_name = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(list(records), f, indent=2, ensure_ascii=False)
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing {self.path}: {str(e)}")
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise StoreWriteError(f"Could not write {self.path}") from e

    def _file_mode(self):
        # mkstemp creates 0600 files; keep whatever mode the target already has
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return 0o644

    @contextmanager
    def locked(self):
        """Hold the store lock around a read-modify-write sequence."""
        with self._lock:
            yield self

    def append(self, record):
        """Append one record and return the new collection."""
        with self.locked():
            records = self.read_all()
            records.append(record)
            self.write_all(records)
        return records

    def __repr__(self):
        return f'<JsonFileStore {self.path}>'


_stores = {}
_stores_lock = threading.Lock()


def get_store(path):
    """Get the shared store for *path* so every caller uses the same lock."""
    key = os.path.abspath(str(path))
    with _stores_lock:
        store = _stores.get(key)
        if store is None:
            store = JsonFileStore(key)
            _stores[key] = store
    return store


def read_all(path):
    return get_store(path).read_all()


def write_all(path, records):
    get_store(path).write_all(records)
