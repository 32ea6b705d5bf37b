"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidSignalError(DomainException):
    """File signal is malformed or degenerate (e.g. zero total commits)"""

    pass


class NotFoundError(DomainException):
    """No risk record with the requested file id"""

    pass


class SignalProviderError(DomainException):
    """Signal provider returned an error or is unavailable"""

    pass
