# payroll_app/exceptions.py


class PayrollError(Exception):
    """Base class for every error raised by the payroll engine."""


class ValidationError(PayrollError):
    """A numeric input to a calculation is negative or missing."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class DataError(PayrollError):
    """An employee or attendance row is malformed, incomplete or unknown."""

    def __init__(self, message, row_number=None):
        super().__init__(message)
        self.row_number = row_number


class NoAttendanceDataError(DataError):
    """No attendance records fall inside the requested cutoff period."""


class PreconditionError(PayrollError):
    """A calculation was invoked with a missing employee or an invalid pay period."""
