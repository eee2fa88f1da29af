"""Configuration for hand-driven shuffle styles."""

from dataclasses import dataclass

# Fraction of the deck around the middle where a split may land.
# 0.0 splits at the exact middle every time.
STANDARD_DECK_SPLIT_PRECISION = 0.2
DEALER_FIRED_DECK_SPLIT_PRECISION = 0.7


@dataclass(frozen=True)
class ShuffleSettings:
    """
    How a dealer handles the deck.

    split_precision controls how far from the middle the deck may be cut,
    dealer_is_right_handed decides which hand takes the first turn.
    """

    split_precision: float = STANDARD_DECK_SPLIT_PRECISION
    dealer_is_right_handed: bool = True

    def __post_init__(self) -> None:
        """Validate settings."""
        if not 0.0 <= self.split_precision <= 1.0:
            raise ValueError("split_precision must be between 0 and 1")

    @classmethod
    def standard(cls) -> "ShuffleSettings":
        """A steady right-handed dealer."""
        return cls()

    @classmethod
    def dealer_fired(cls) -> "ShuffleSettings":
        """A dealer about to lose the job: the split wanders far from the middle."""
        return cls(split_precision=DEALER_FIRED_DECK_SPLIT_PRECISION)

    @classmethod
    def left_handed(cls) -> "ShuffleSettings":
        """A left-handed dealer with standard precision."""
        return cls(dealer_is_right_handed=False)
