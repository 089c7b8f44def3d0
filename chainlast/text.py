"""
``chainlast.text``
==================

String splitting built on ``chain_from_last()``, where each further
separator only applies to the trailing fragment of the previous split.
"""
import typing as ty
from functools import partial

from chainlast.base import Chain, SequenceAdapter

__all__ = ["split_last"]


def _split_tail(
    text: str, sep: str, rest: ty.Tuple[str, ...]
) -> SequenceAdapter[str]:
    parts = Chain(text.split(sep))
    if not rest:
        return parts
    return parts.chain_from_last(
        partial(_split_tail, sep=rest[0], rest=rest[1:])
    )


def split_last(text: str, *separators: str) -> SequenceAdapter[str]:
    """Splits ``text`` on the first separator, then splits only the
    last resulting fragment on the second separator, and so on.

    :group: Text

    Parameters
    ----------
    text : str
        The string to split.
    *separators : str
        Separators applied in order, each to the trailing fragment
        of the previous level. If none are given, ``text`` is split on
        runs of whitespace, as with ``str.split()``.

    Returns
    -------
    SequenceAdapter[str]
        Iterator over the fragments. Deeper levels are only split once
        iteration reaches them.

    Raises
    ------
    ValueError
        If any separator is the empty string.

    Examples
    --------
    >>> list(split_last("lorem ipsum dolor;sit;amet", " ", ";"))
    ['lorem', 'ipsum', 'dolor', 'sit', 'amet']
    >>> list(split_last("a;b c;d", " ", ";"))
    ['a;b', 'c', 'd']
    """
    if "" in separators:
        raise ValueError("empty separator")
    if not separators:
        return Chain(text.split())
    return _split_tail(text, separators[0], separators[1:])
