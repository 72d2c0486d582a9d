"""
Resource Schema
===============

Field definitions for the four content collections and the validation applied
on create and update.

- Project:   title, description, link, technologies required; image defaults to ""
- Blog:      title, content, author, date required; image optional (no default)
- Service:   title, description required; icon defaults to ""
- HeroImage: title, subtitle, image all optional, each defaulting to ""
"""

import math
from numbers import Real

from .exceptions import ValidationError

TEXT = 'text'
NUMBER = 'number'
TEXT_LIST = 'text_list'

_MISSING = object()


class Field:
    """A single document field"""

    def __init__(self, name, kind=TEXT, required=True, default=_MISSING):
        self.name = name
        self.kind = kind
        self.required = required
        self.default = default

    @property
    def has_default(self):
        return self.default is not _MISSING

    def check(self, value):
        """Raise ValidationError if value is not of this field's kind"""
        if self.kind == TEXT:
            ok = isinstance(value, str)
            expected = 'text'
        elif self.kind == NUMBER:
            # bool is an int subclass but never a timestamp; NaN and Infinity have no JSON form
            ok = (isinstance(value, Real) and not isinstance(value, bool)
                  and math.isfinite(value))
            expected = 'a finite number'
        elif self.kind == TEXT_LIST:
            ok = isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)
            expected = 'a list of text'
        else:
            raise ValueError(f"Unknown field kind: {self.kind}")

        if not ok:
            raise ValidationError(f"'{self.name}' must be {expected}", field=self.name)

    def normalize(self, value):
        if self.kind == TEXT_LIST:
            return list(value)
        return value


class ResourceSchema:
    """Field set of one collection"""

    def __init__(self, collection, label, fields):
        self.collection = collection
        self.label = label
        self.fields = {f.name: f for f in fields}

    def _reject_unknown(self, data):
        if 'id' in data:
            raise ValidationError("'id' is assigned by the store and cannot be set", field='id')
        unknown = sorted(set(data) - set(self.fields))
        if unknown:
            raise ValidationError(f"Unknown field(s) for {self.label}: {', '.join(unknown)}",
                                  field=unknown[0])

    def validate_create(self, data):
        """Return a complete document for insertion"""
        if not isinstance(data, dict):
            raise ValidationError(f"{self.label} data must be an object")
        self._reject_unknown(data)

        document = {}
        for name, field in self.fields.items():
            value = data.get(name, _MISSING)
            if value is _MISSING or value is None:
                if field.required:
                    raise ValidationError(f"'{name}' is required", field=name)
                if field.has_default:
                    document[name] = field.default
                continue
            field.check(value)
            document[name] = field.normalize(value)
        return document

    def validate_update(self, data):
        """Return the subset of fields to merge into an existing document"""
        if not isinstance(data, dict):
            raise ValidationError(f"{self.label} data must be an object")
        self._reject_unknown(data)

        patch = {}
        for name, value in data.items():
            field = self.fields[name]
            if value is None:
                if field.required:
                    raise ValidationError(f"'{name}' cannot be empty", field=name)
                # Optional fields reset to their default, or drop out of the document
                patch[name] = field.default if field.has_default else None
                continue
            field.check(value)
            patch[name] = field.normalize(value)
        return patch


PROJECT = ResourceSchema('projects', 'Project', [
    Field('title'),
    Field('description'),
    Field('image', required=False, default=''),
    Field('link'),
    Field('technologies', TEXT_LIST),
])

BLOG = ResourceSchema('blogs', 'Blog', [
    Field('title'),
    Field('content'),
    Field('image', required=False),
    Field('author'),
    Field('date', NUMBER),
])

SERVICE = ResourceSchema('services', 'Service', [
    Field('title'),
    Field('description'),
    Field('icon', required=False, default=''),
])

HERO_IMAGE = ResourceSchema('heroImages', 'Hero image', [
    Field('title', required=False, default=''),
    Field('subtitle', required=False, default=''),
    Field('image', required=False, default=''),
])

SCHEMAS = {s.collection: s for s in (PROJECT, BLOG, SERVICE, HERO_IMAGE)}


def get_schema(collection):
    try:
        return SCHEMAS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection}")
