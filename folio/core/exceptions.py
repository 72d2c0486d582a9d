"""
Folio Errors
============

Errors raised by the data-access layer and the store client. Routes and admin
panels catch them nearest the user action and turn them into a message.
"""


class FolioError(Exception):
    """Base class for folio errors"""

    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self):
        return {'error': self.message}


class ValidationError(FolioError):
    """A required field is missing or a field has the wrong type"""

    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message, {'field': field} if field else None)
        self.field = field


class NotFoundError(FolioError):
    """Update or delete target does not exist"""

    status_code = 404

    def __init__(self, collection, record_id):
        super().__init__(f"{collection} record {record_id} not found",
                         {'collection': collection, 'id': record_id})
        self.collection = collection
        self.record_id = record_id


class TransportError(FolioError):
    """The store is unreachable or the request failed"""

    status_code = 503
