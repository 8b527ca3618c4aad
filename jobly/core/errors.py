"""
Domain errors raised by the repositories and SQL helpers.

The HTTP layer turns any JoblyError into a JSON response with the
error's status code (see main.py); nothing in the core catches them.
"""


class JoblyError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Request data is well-formed but not acceptable (400)."""
    status_code = 400

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Credentials were missing or wrong (401)."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """The addressed record does not exist (404)."""
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)
