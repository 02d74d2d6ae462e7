"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EmptyInputError(DomainException):
    """Aggregation called without any transactions"""

    pass


class InsufficientDataError(DomainException):
    """Not enough transactions to produce the requested ranking"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass


class TransactionSourceError(DomainException):
    """Transaction feed returned an error or is unavailable"""

    pass
