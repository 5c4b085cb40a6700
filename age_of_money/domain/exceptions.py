"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LedgerAPIError(DomainException):
    """Ledger API returned an error or is unavailable"""

    pass


class InvalidReportRangeError(DomainException):
    """Requested report months are malformed or out of order"""

    pass
