"""
Resource Store
==============

CRUD access to one content collection. Each collection is a SQLite table of
JSON documents; the integer row id is the record id.

Records are returned as plain dicts: the document fields plus ``id``.
"""

import json
import logging
import sqlite3

from .config import Config, get_config_value
from .database import Database
from .exceptions import NotFoundError, TransportError
from .schema import get_schema

logger = logging.getLogger(__name__)


def _to_record(row):
    record = json.loads(row[1])
    record['id'] = row[0]
    return record


def _coerce_id(record_id):
    """Ids are integers; anything that can't be one matches no record"""
    if isinstance(record_id, bool):
        return None
    try:
        return int(record_id)
    except (TypeError, ValueError):
        return None


class ResourceStore:
    """list / get_by_id / create / update / delete for one collection"""

    def __init__(self, db_path, schema):
        self.db_path = db_path
        self.schema = schema
        self.table = Config.COLLECTION_TABLES[schema.collection]

    @property
    def collection(self):
        return self.schema.collection

    def _connect(self):
        try:
            return Database.connect(self.db_path)
        except sqlite3.Error as e:
            raise TransportError(f"Could not open store for {self.collection}: {e}")

    def list(self):
        """All records in creation order"""
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f'SELECT id, data FROM {self.table} ORDER BY id ASC')
                return [_to_record(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise TransportError(f"Failed to list {self.collection}: {e}")

    def get_by_id(self, record_id):
        """Return the record, or None if there is no such id"""
        record_id = _coerce_id(record_id)
        if record_id is None:
            return None

        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f'SELECT id, data FROM {self.table} WHERE id = ?', (record_id,))
                row = cursor.fetchone()
                return _to_record(row) if row else None
        except sqlite3.Error as e:
            raise TransportError(f"Failed to get {self.collection} {record_id}: {e}")

    def create(self, fields):
        """Validate and insert a new document, returning it with its id"""
        document = self.schema.validate_create(fields)

        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f'INSERT INTO {self.table} (data) VALUES (?)',
                               (json.dumps(document),))
                conn.commit()
                new_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise TransportError(f"Failed to create {self.collection} record: {e}")

        logger.debug(f"Created {self.collection} {new_id}")
        return dict(document, id=new_id)

    def update(self, record_id, partial):
        """Merge the given fields into an existing document.

        Fields not present in ``partial`` are left untouched. Passing None for an
        optional field resets it to its default (or removes it).
        """
        patch = self.schema.validate_update(partial)
        key = _coerce_id(record_id)
        if key is None:
            raise NotFoundError(self.collection, record_id)

        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f'SELECT data FROM {self.table} WHERE id = ?', (key,))
                row = cursor.fetchone()
                if not row:
                    raise NotFoundError(self.collection, record_id)

                document = json.loads(row[0])
                for name, value in patch.items():
                    if value is None:
                        document.pop(name, None)
                    else:
                        document[name] = value

                cursor.execute(f'''
                    UPDATE {self.table}
                    SET data = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                ''', (json.dumps(document), key))
                conn.commit()
        except sqlite3.Error as e:
            raise TransportError(f"Failed to update {self.collection} {record_id}: {e}")

        logger.debug(f"Updated {self.collection} {key}: {sorted(patch)}")
        return dict(document, id=key)

    def delete(self, record_id):
        """Remove a record, returning a confirmation with the deleted id"""
        key = _coerce_id(record_id)
        if key is None:
            raise NotFoundError(self.collection, record_id)

        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(f'DELETE FROM {self.table} WHERE id = ?', (key,))
                conn.commit()
                deleted = cursor.rowcount > 0
        except sqlite3.Error as e:
            raise TransportError(f"Failed to delete {self.collection} {record_id}: {e}")

        if not deleted:
            raise NotFoundError(self.collection, record_id)

        logger.debug(f"Deleted {self.collection} {key}")
        return {'success': True, 'deleted_id': key}


def get_db_path():
    """Content database path from app config, Config or environment"""
    return get_config_value('FOLIO_DB', Config.FOLIO_DB)


# Databases whose collection tables already exist in this process
_initialized_paths = set()


def get_store(collection, db_path=None):
    """Build the store for a collection, creating its tables on first use"""
    db_path = db_path or get_db_path()
    if db_path not in _initialized_paths:
        Database.init_store_tables(db_path)
        _initialized_paths.add(db_path)
    return ResourceStore(db_path, get_schema(collection))
