"""Errors raised by the shortlink store and service layer.

Each error carries the name reported to clients in the ``error`` field of
the JSON body and the HTTP status it maps to.
"""


class ShortlinkError(Exception):
    """Base exception for all application-specific errors."""

    error = 'ShortlinkError'
    status_code = 500
    default_message = 'Unexpected error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.error, 'message': self.message}


class InvalidUrl(ShortlinkError):
    """Raised when the target URL is missing or not an absolute http(s) URL."""

    error = 'InvalidUrl'
    status_code = 400
    default_message = 'URL must be a valid absolute http or https URL'


class InvalidValidity(ShortlinkError):
    """Raised when the validity period is not a positive integer."""

    error = 'InvalidValidity'
    status_code = 400
    default_message = 'Validity must be a positive integer number of minutes'


class InvalidShortcodeFormat(ShortlinkError):
    """Raised when a requested shortcode is not 3-10 alphanumeric characters."""

    error = 'InvalidShortcodeFormat'
    status_code = 400
    default_message = 'Shortcode must be 3-10 alphanumeric characters'


class ShortcodeCollision(ShortlinkError):
    """Raised when a requested shortcode is already in use."""

    error = 'ShortcodeCollision'
    status_code = 409
    default_message = 'Shortcode already in use'


class NotFound(ShortlinkError):
    """Raised when no record exists for a shortcode."""

    error = 'NotFound'
    status_code = 404
    default_message = 'Short URL not found'


class Expired(ShortlinkError):
    """Raised when a record exists but its validity has run out."""

    error = 'Expired'
    status_code = 410
    default_message = 'Short URL has expired'


class AllocatorExhausted(ShortlinkError):
    """Raised when no free random shortcode was found within the attempt limit."""

    error = 'AllocatorExhausted'
    status_code = 503
    default_message = 'Could not allocate a unique shortcode, try again'


class InternalError(ShortlinkError):
    """Catch-all for unexpected faults. The client message stays generic."""

    error = 'InternalError'
    status_code = 500
    default_message = 'Internal server error'
