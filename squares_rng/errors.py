"""Error kinds raised for invalid caller input."""


class SquaresError(Exception):
    """Root of every error raised by squares_rng."""


class InvalidKeyIndex(SquaresError, IndexError):
    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Key index {index} is outside the table range [0, {count}).")


class InvalidRange(SquaresError, ValueError):
    """Raised when a bounded accessor is given an empty or out-of-bounds range."""
