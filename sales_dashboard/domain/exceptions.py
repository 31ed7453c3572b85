"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidQueryError(DomainException):
    """Query parameter (month, page, page size) is out of range or malformed"""

    pass


class SeedSourceError(DomainException):
    """Seed dataset source is unreachable or returned malformed data"""

    pass
