class DuplicateValueError(ValueError):
    """Raised when inserting a value that is already in the tree."""

    def __init__(self, value) -> None:
        super().__init__(f"The value {value} already exists in this tree.")
        self.value = value


class EmptyContainerError(IndexError):
    """Raised by pop/dequeue on an empty scratch container."""


class InvalidCallbackError(TypeError):
    """Raised when a traversal is given something that is not callable."""

    def __init__(self, message: str = "A callback is required in order to traverse.") -> None:
        super().__init__(message)
