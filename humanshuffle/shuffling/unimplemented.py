"""Shuffle styles that are named but not built yet."""

from random import Random
from typing import MutableSequence

from humanshuffle.cards import Card
from humanshuffle.shuffling.base import ShuffleStyle


class UnimplementedShuffle(ShuffleStyle):
    """
    A shuffle style with no machine behind it.

    Applying one raises NotImplementedError and leaves the cards untouched.
    """

    _NAME = "Unimplemented"

    @property
    def name(self) -> str:
        return self._NAME

    def apply(self, cards: MutableSequence[Card], rng: Random) -> None:
        raise NotImplementedError(f"The {self.name} shuffle is not implemented")


class HinduShuffle(UnimplementedShuffle):
    """The Hindu Shuffle: simple, quick and very elegant."""

    _NAME = "Hindu"


class WeaveShuffle(UnimplementedShuffle):
    """The Weave Shuffle, for those yet to master the riffle."""

    _NAME = "Weave"


class RiffleShuffle(UnimplementedShuffle):
    """The Riffle Shuffle: not as difficult as it looks."""

    _NAME = "Riffle"


class TableRiffleShuffle(UnimplementedShuffle):
    """The Table Riffle: easier than riffling in the hands, just as effective."""

    _NAME = "Table Riffle"


class StripShuffle(UnimplementedShuffle):
    """The Strip Shuffle, also known as running cuts."""

    _NAME = "Strip"


class PortlandPowerhouseShuffle(UnimplementedShuffle):
    _NAME = "Portland Powerhouse"


class ShiftwiseFreestyleShuffle(UnimplementedShuffle):
    _NAME = "Shift-wise Freestyle Show-off"
