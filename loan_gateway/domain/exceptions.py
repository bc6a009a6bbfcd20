"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LoanRequestRejected(DomainException):
    """Request rejected due to bad input or ineligibility; shown to the applicant as-is"""

    pass


class InvalidPersonalCodeError(LoanRequestRejected):
    """Personal ID code is malformed, fails its checksum, or cannot be decoded"""

    pass


class InvalidLoanAmountError(LoanRequestRejected):
    """Requested loan amount is outside the allowed bounds"""

    pass


class InvalidLoanPeriodError(LoanRequestRejected):
    """Requested loan period is outside the allowed bounds"""

    pass


class AgeRestrictionError(LoanRequestRejected):
    """Applicant is too young, or the loan would outlast the life-expectancy horizon"""

    pass


class NoValidLoanError(DomainException):
    """No loan can be offered for this customer and request"""

    pass
