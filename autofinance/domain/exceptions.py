"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTermError(DomainException):
    """Loan or lease term is not a positive number of months"""

    pass


class InvalidProfileError(DomainException):
    """Financial profile cannot support a calculation (e.g. zero income)"""

    pass


class InvalidVehicleError(DomainException):
    """Vehicle record is malformed or unknown"""

    pass


class NonFiniteResultError(DomainException):
    """Calculation produced NaN or infinity"""

    pass


class InvalidFinancingOptionError(DomainException):
    """Financing option has an unknown kind or negative amounts"""

    pass
