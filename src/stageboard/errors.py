"""Exceptions raised by stageboard."""


class BoardError(Exception):
    """Base for all board errors."""


class BoardIntegrityError(BoardError, ValueError):
    """A board violates id uniqueness."""

    def __init__(self, duplicate_columns: list[str], duplicate_cards: list[str]) -> None:
        parts = []
        if duplicate_columns:
            parts.append(f"duplicate column ids: {', '.join(duplicate_columns)}")
        if duplicate_cards:
            parts.append(f"duplicate card ids: {', '.join(duplicate_cards)}")
        super().__init__("; ".join(parts))
        self.duplicate_columns = duplicate_columns
        self.duplicate_cards = duplicate_cards


class InvalidMoveError(BoardError, ValueError):
    """A move referenced a missing column or an out-of-range index."""


class SeedError(BoardError, ValueError):
    """Seed data could not be read or is malformed."""
