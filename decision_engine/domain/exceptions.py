"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPersonalCodeError(DomainException):
    """Personal identity code is malformed or fails its checksum"""

    pass
