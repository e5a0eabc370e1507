"""Pure domain functions with no I/O or framework dependencies.

Contents:
    * :func:`ender` - suffixer factory returning string transformers.
    * :func:`compose` - left-to-right composition of transformers.
    * :func:`build_chain` - composition built from a sequence of endings.
    * :func:`hyperup` - the canonical ``adore -> announce -> exclaim`` chain.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final

Transformer = Callable[[str], str]
"""A function mapping a string to a new string."""

ADORE_ENDING: Final[str] = " rocks"
ANNOUNCE_ENDING: Final[str] = ", you all"
EXCLAIM_ENDING: Final[str] = "!"

#: Endings of the canonical chain, innermost first.
CANONICAL_ENDINGS: Final[tuple[str, ...]] = (ADORE_ENDING, ANNOUNCE_ENDING, EXCLAIM_ENDING)

CANONICAL_INPUT: Final[str] = "vim script"
CANONICAL_OUTPUT: Final[str] = "vim script rocks, you all!"


def ender(ending: str) -> Transformer:
    r"""Return a transformer that appends ``ending`` to its input.

    Each call produces an independent function holding its own copy of
    ``ending``. Non-string inputs are converted with :func:`str` before
    concatenation, so the result is always a new ``str``.

    Args:
        ending: Suffix captured by the returned function. May be empty.

    Returns:
        Transformer ``t`` with ``t(x) == str(x) + ending``.

    Example:
        >>> rocks = ender(" rocks")
        >>> rocks("vim script")
        'vim script rocks'
        >>> rocks.ending
        ' rocks'
        >>> ender("!")(42)
        '42!'
    """

    def append(text: str) -> str:
        return (text if isinstance(text, str) else str(text)) + ending

    append.__name__ = f"ender({ending!r})"
    append.__qualname__ = append.__name__
    append.ending = ending  # type: ignore[attr-defined]
    return append


def compose(*transformers: Transformer) -> Transformer:
    """Compose transformers so the first one receives the original input.

    ``compose(f, g, h)(x)`` evaluates to ``h(g(f(x)))``. With no arguments
    the result is the identity on strings.

    Example:
        >>> shout = compose(ender(" rocks"), ender("!"))
        >>> shout("python")
        'python rocks!'
        >>> compose()("unchanged")
        'unchanged'
    """
    steps = tuple(transformers)

    def composed(text: str) -> str:
        result = text if isinstance(text, str) else str(text)
        for step in steps:
            result = step(result)
        return result

    composed.__name__ = " | ".join(step.__name__ for step in steps) or "identity"
    composed.__qualname__ = composed.__name__
    return composed


def build_chain(endings: Iterable[str]) -> Transformer:
    """Return the composition of one :func:`ender` per ending, in order.

    Example:
        >>> build_chain(CANONICAL_ENDINGS)(CANONICAL_INPUT) == CANONICAL_OUTPUT
        True
        >>> build_chain([])("as is")
        'as is'
    """
    return compose(*(ender(ending) for ending in endings))


adore: Transformer = ender(ADORE_ENDING)
announce: Transformer = ender(ANNOUNCE_ENDING)
exclaim: Transformer = ender(EXCLAIM_ENDING)


def hyperup(text: str) -> str:
    """Apply ``adore``, then ``announce``, then ``exclaim``.

    Example:
        >>> hyperup("vim script")
        'vim script rocks, you all!'
        >>> hyperup("")
        ' rocks, you all!'
    """
    return exclaim(announce(adore(text)))


__all__ = [
    "ADORE_ENDING",
    "ANNOUNCE_ENDING",
    "CANONICAL_ENDINGS",
    "CANONICAL_INPUT",
    "CANONICAL_OUTPUT",
    "EXCLAIM_ENDING",
    "Transformer",
    "adore",
    "announce",
    "build_chain",
    "compose",
    "ender",
    "exclaim",
    "hyperup",
]
