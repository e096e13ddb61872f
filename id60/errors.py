from __future__ import annotations


class Base60Error(ValueError):
    pass


class FormatError(Base60Error):
    pass


class InvalidCharacterError(Base60Error):
    def __init__(self, char: str, position: int, *, alphabet_name: str = "base60") -> None:
        self.char = char
        self.position = position
        self.alphabet_name = alphabet_name
        super().__init__(f"invalid {alphabet_name} character {char!r} at position {position}")


class LengthMismatchError(Base60Error):
    def __init__(self, label: str, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} chars for {label}, got {actual}")


class LengthExceededError(Base60Error, OverflowError):
    pass


class DomainError(Base60Error):
    pass
