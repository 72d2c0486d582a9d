"""
Panel Synchronization
=====================

Local mirror of one collection for an admin panel.

- Starts from hardcoded sample records so the panel never renders empty
- A non-empty store snapshot replaces the mirror wholesale (samples are discarded,
  never merged); snapshots can arrive at any time
- After a mutation commits, the mirror is patched from the mutation's return value
  instead of re-querying the store

There is no conflict detection: the last write to an id wins at the store.
"""

import copy
import logging
import time

from .exceptions import FolioError, ValidationError
from .fallbacks import get_fallback
from .storage import embed_file

logger = logging.getLogger(__name__)

CREATE = 'create'
UPDATE = 'update'
DELETE = 'delete'

INITIAL = 'initial'
LOADED = 'loaded'


def _deleted_id(payload):
    if isinstance(payload, dict):
        return payload.get('deleted_id', payload.get('id'))
    return payload


def apply_mutation_result(collection, kind, payload):
    """Return a new collection with a committed mutation applied.

    Args:
        collection: Current list of records (not modified).
        kind: 'create', 'update' or 'delete'.
        payload: The created record, the updated record, or the delete
            confirmation ({'deleted_id': ...}) / bare id.
    """
    if kind == CREATE:
        return list(collection) + [payload]
    if kind == UPDATE:
        return [payload if record.get('id') == payload.get('id') else record
                for record in collection]
    if kind == DELETE:
        deleted_id = _deleted_id(payload)
        return [record for record in collection if record.get('id') != deleted_id]
    raise ValueError(f"Unknown mutation kind: {kind}")


class PanelState:
    """State container for one panel: the mirror plus a draft buffer"""

    def __init__(self, fallback):
        self.fallback = copy.deepcopy(list(fallback))
        self.records = copy.deepcopy(self.fallback)
        self.status = INITIAL
        self.draft = None
        self.is_adding = False

    @property
    def is_fallback(self):
        return self.status == INITIAL

    def receive_snapshot(self, records):
        """Reconcile with a list() result. Empty or missing results keep the current view."""
        if not records:
            return False
        self.records = list(records)
        self.status = LOADED
        return True

    # ----- draft buffer -----

    def begin_create(self, blank):
        self.draft = dict(blank)
        self.is_adding = True

    def begin_edit(self, record):
        self.draft = copy.deepcopy(record)
        self.is_adding = False

    def edit_draft(self, **fields):
        if self.draft is None:
            raise RuntimeError("No record selected")
        self.draft.update(fields)

    def discard_draft(self):
        self.draft = None
        self.is_adding = False

    # ----- committed mutations -----

    def commit_create(self, record):
        self.records = apply_mutation_result(self.records, CREATE, record)
        self.discard_draft()

    def commit_update(self, record):
        self.records = apply_mutation_result(self.records, UPDATE, record)
        self.discard_draft()

    def commit_delete(self, confirmation):
        self.records = apply_mutation_result(self.records, DELETE, confirmation)

    def find(self, record_id):
        for record in self.records:
            if record.get('id') == record_id:
                return record
        return None

    def view(self):
        return {'records': list(self.records), 'is_fallback': self.is_fallback}


class AdminPanel:
    """Drives one panel against a backend with the list/get/create/update/delete contract.

    Failures call ``notify`` with a generic message, leave a developer trace in the
    log and leave local state unchanged. Nothing is retried.

    ``blank`` is the empty draft for "Add New", or a callable returning one.
    """

    def __init__(self, backend, fallback, blank, label, notify=None):
        self.backend = backend
        self.state = PanelState(fallback)
        self.blank = blank
        self.label = label
        self.notify = notify or (lambda message: None)

    @property
    def records(self):
        return self.state.records

    def refresh(self):
        """Pull a snapshot from the backend"""
        try:
            records = self.backend.list()
        except FolioError as e:
            logger.error(f"Failed to load {self.label}s: {e}")
            self.notify(f"Failed to load {self.label}s")
            return False
        return self.state.receive_snapshot(records)

    def add(self):
        blank = self.blank() if callable(self.blank) else copy.deepcopy(self.blank)
        self.state.begin_create(blank)

    def edit(self, record_id):
        record = self.state.find(record_id)
        if record is None:
            raise KeyError(record_id)
        self.state.begin_edit(record)

    def set_field(self, name, value):
        self.state.edit_draft(**{name: value})

    def attach_file(self, field, file_bytes, filename):
        """Store a selected file inline in the draft"""
        self.set_field(field, embed_file(file_bytes, filename))

    def cancel(self):
        self.state.discard_draft()

    def _draft_fields(self):
        return {k: v for k, v in self.state.draft.items() if k != 'id'}

    def save(self):
        """Submit the draft. Returns the saved record, or None on failure."""
        if self.state.draft is None:
            return None

        try:
            if self.state.is_adding:
                record = self.backend.create(self._draft_fields())
                self.state.commit_create(record)
            else:
                record = self.backend.update(self.state.draft.get('id'), self._draft_fields())
                self.state.commit_update(record)
        except ValidationError as e:
            logger.warning(f"Rejected {self.label}: {e}")
            self.notify(f"Failed to save {self.label}: {e.message}")
            return None
        except FolioError as e:
            logger.error(f"Failed to save {self.label}: {e}")
            self.notify(f"Failed to save {self.label}")
            return None
        return record

    def delete(self, record_id, confirm=None):
        """Delete after confirmation. Returns True if the record was removed."""
        if record_id is None:
            return False
        if confirm is not None and not confirm(f"Are you sure you want to delete this {self.label}?"):
            return False

        try:
            confirmation = self.backend.delete(record_id)
        except FolioError as e:
            logger.error(f"Failed to delete {self.label} {record_id}: {e}")
            self.notify(f"Failed to delete {self.label}")
            return False

        self.state.commit_delete(confirmation)
        return True

    def view(self):
        return self.state.view()


# Empty draft used by "Add New ..." per collection
BLANK_DRAFTS = {
    'projects': {'title': '', 'description': '', 'image': '', 'link': '', 'technologies': []},
    'blogs': {'title': '', 'content': '', 'image': '', 'author': ''},
    'services': {'title': '', 'description': '', 'icon': ''},
    'heroImages': {'title': '', 'subtitle': '', 'image': ''},
}

LABELS = {
    'projects': 'project',
    'blogs': 'blog',
    'services': 'service',
    'heroImages': 'item',
}


def _now_ms():
    return int(time.time() * 1000)


def blank_draft(collection):
    """Empty draft for a collection; new blog posts are dated when they are started"""
    blank = copy.deepcopy(BLANK_DRAFTS[collection])
    if collection == 'blogs':
        blank['date'] = _now_ms()
    return blank


def make_panel(collection, backend, notify=None):
    """AdminPanel for a collection, seeded with its sample records"""
    return AdminPanel(backend, get_fallback(collection), lambda: blank_draft(collection),
                      LABELS[collection], notify)
