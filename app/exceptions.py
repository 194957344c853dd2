"""Project-wide custom exception types."""


class StoreUnavailable(RuntimeError):
    """Raised when the feedback store cannot be read or written."""


class UnknownSectionError(KeyError):
    """Raised when a dashboard section name is not recognised."""

    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.section = section
