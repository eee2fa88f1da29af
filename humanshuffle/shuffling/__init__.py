"""Human shuffle styles."""

from humanshuffle.shuffling.base import ShuffleStyle, next_int, split_the_deck
from humanshuffle.shuffling.overhand import Hand, OverhandShuffle, OverhandTrace, Turn
from humanshuffle.shuffling.settings import (
    DEALER_FIRED_DECK_SPLIT_PRECISION,
    STANDARD_DECK_SPLIT_PRECISION,
    ShuffleSettings,
)
from humanshuffle.shuffling.styles import ShuffleStyles, available_styles, get_style, shuffle
from humanshuffle.shuffling.unimplemented import (
    HinduShuffle,
    PortlandPowerhouseShuffle,
    RiffleShuffle,
    ShiftwiseFreestyleShuffle,
    StripShuffle,
    TableRiffleShuffle,
    UnimplementedShuffle,
    WeaveShuffle,
)

__all__ = [
    "ShuffleStyle",
    "next_int",
    "split_the_deck",
    "Hand",
    "OverhandShuffle",
    "OverhandTrace",
    "Turn",
    "DEALER_FIRED_DECK_SPLIT_PRECISION",
    "STANDARD_DECK_SPLIT_PRECISION",
    "ShuffleSettings",
    "ShuffleStyles",
    "available_styles",
    "get_style",
    "shuffle",
    "HinduShuffle",
    "PortlandPowerhouseShuffle",
    "RiffleShuffle",
    "ShiftwiseFreestyleShuffle",
    "StripShuffle",
    "TableRiffleShuffle",
    "UnimplementedShuffle",
    "WeaveShuffle",
]
