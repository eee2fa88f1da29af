"""Style registry and the shuffle entry point."""

from random import Random
from typing import Callable, Iterable, MutableSequence

from humanshuffle.cards import Card
from humanshuffle.shuffling.base import ShuffleStyle
from humanshuffle.shuffling.overhand import OverhandShuffle
from humanshuffle.shuffling.settings import ShuffleSettings
from humanshuffle.shuffling.unimplemented import (
    HinduShuffle,
    PortlandPowerhouseShuffle,
    RiffleShuffle,
    ShiftwiseFreestyleShuffle,
    StripShuffle,
    TableRiffleShuffle,
    WeaveShuffle,
)


class ShuffleStyles:
    """
    Ready-made style instances.

    Only the overhand shuffle is implemented; every other style raises
    NotImplementedError when applied.
    """

    OVERHAND: ShuffleStyle = OverhandShuffle()
    HINDU: ShuffleStyle = HinduShuffle()
    WEAVE: ShuffleStyle = WeaveShuffle()
    RIFFLE: ShuffleStyle = RiffleShuffle()
    TABLE_RIFFLE: ShuffleStyle = TableRiffleShuffle()
    STRIP: ShuffleStyle = StripShuffle()
    PORTLAND_POWERHOUSE: ShuffleStyle = PortlandPowerhouseShuffle()
    SHIFTWISE_FREESTYLE: ShuffleStyle = ShiftwiseFreestyleShuffle()
    DEFAULT: ShuffleStyle = OVERHAND  # The one most people use


_FACTORIES: dict[str, Callable[[ShuffleSettings | None], ShuffleStyle]] = {
    "overhand": OverhandShuffle,
    "hindu": lambda _: HinduShuffle(),
    "weave": lambda _: WeaveShuffle(),
    "riffle": lambda _: RiffleShuffle(),
    "table-riffle": lambda _: TableRiffleShuffle(),
    "strip": lambda _: StripShuffle(),
    "portland-powerhouse": lambda _: PortlandPowerhouseShuffle(),
    "shiftwise-freestyle": lambda _: ShiftwiseFreestyleShuffle(),
}


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


def available_styles() -> list[str]:
    """Return the names of every known shuffle style."""
    return list(_FACTORIES)


def get_style(name: str, settings: ShuffleSettings | None = None) -> ShuffleStyle:
    """
    Build a shuffle style by name.

    Args:
        name: Style name; case, spaces, dashes and underscores are ignored
        settings: Dealer settings for styles that use them

    Raises:
        ValueError: If no style has that name
    """
    wanted = _normalize(name)
    for key, factory in _FACTORIES.items():
        if _normalize(key) == wanted:
            return factory(settings)
    raise ValueError(f"Unknown shuffle style: {name}")


def shuffle(
    cards: MutableSequence[Card],
    style: ShuffleStyle | Iterable[ShuffleStyle] | None = None,
    rng: Random | None = None,
) -> None:
    """
    Shuffle cards in place with one style or a chain of styles.

    Styles in a chain are applied in order to the same sequence. If one
    fails, the styles already applied keep their effect.

    Args:
        cards: The sequence to shuffle
        style: A style, an iterable of styles, or None for the default style
        rng: Random number generator (a fresh one if omitted)
    """
    rng = rng or Random()
    if style is None:
        style = ShuffleStyles.DEFAULT
    styles = [style] if isinstance(style, ShuffleStyle) else style
    for each in styles:
        each.apply(cards, rng)
