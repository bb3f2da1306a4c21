class SeqkitException(Exception):
    """A general error in a sequence operation occurred."""


class NegativeCountError(SeqkitException, ValueError):
    """A repetition count was negative.

    Attributes:
        name (str): The name of the offending argument.
        count (int): The rejected value.

    """

    def __init__(self, name: str, count: int) -> None:
        super().__init__(f"{name} must be non-negative, got {count}")
        self.name = name
        self.count = count


class NotACollectionError(SeqkitException, TypeError):
    """The given value cannot be traversed repeatedly from a start position."""
