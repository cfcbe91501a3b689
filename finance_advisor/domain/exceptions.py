"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Caller passed a structurally invalid snapshot, request or horizon"""

    pass


class InvalidBudgetError(InvalidInputError):
    """Budget category cannot be evaluated (non-positive plan or negative spend)"""

    def __init__(self, category: str, message: str):
        super().__init__(f"{category}: {message}")
        self.category = category
