"""Domain-specific exceptions"""

from typing import Dict


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidBillInputError(DomainException):
    """Bill input rejected by strict validation"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid bill input fields: {fields}")


class ExtractionError(DomainException):
    """Extraction service failed or returned unusable data"""

    pass


class ExtractionNotConfiguredError(ExtractionError):
    """Extraction service credentials are missing"""

    pass
