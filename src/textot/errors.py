from typing import Optional


class EditError(ValueError):
    pass


class LengthMismatchError(EditError):
    """
    Raised when an edit is used against a string or another edit whose
    length does not line up with it.
    """

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ExhaustedEditError(EditError):
    pass


class WireFormatError(EditError):
    pass
