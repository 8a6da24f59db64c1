"""Error taxonomy shared by services and routes.

Each error carries the HTTP status it maps to; the app registers one handler
for ShowroomError that renders ``{"error": message}``.
"""


class ShowroomError(Exception):
    status_code = 500
    default_message = 'An internal error occurred'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ShowroomError):
    """Bad upload type/size or missing required field."""
    status_code = 400
    default_message = 'Invalid request'


class Unauthorized(ShowroomError):
    status_code = 401
    default_message = 'Authentication required'


class NotFound(ShowroomError):
    status_code = 404
    default_message = 'Not found'


class InternalError(ShowroomError):
    status_code = 500
