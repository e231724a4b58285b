"""Progress and catalog errors. Routers map them to HTTP status codes."""


class ProgressError(Exception):
    status_code = 500


class NotFoundError(ProgressError):
    status_code = 404


class InvalidDayError(ProgressError):
    status_code = 400

    def __init__(self, expected: int, got: int):
        super().__init__(f"Invalid day completion: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class ConflictError(ProgressError):
    status_code = 409
