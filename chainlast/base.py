from abc import ABC, abstractmethod
from typing import TypeVar, Iterable, Iterator, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from chainlast.adaptor import ChainFromLast


__all__ = [
    "T",
    "Builder",
    "SequenceAdapter",
    "Chain",
]


T = TypeVar("T")
Builder = Callable[[T], Iterable[T]]


class SequenceAdapter(ABC, Iterator[T]):
    """Adapter pattern interface for lazy sequences. Every subclass
    gains the ``chain_from_last()`` capability.
    """

    @abstractmethod
    def __next__(self) -> T:
        pass

    def __iter__(self) -> "SequenceAdapter[T]":
        return self

    def chain_from_last(self, builder: Builder[T]) -> "ChainFromLast[T]":
        """Chains this sequence with a continuation built from its last
        element. See ``chainlast.adaptor.chain_from_last()``.

        Parameters
        ----------
        builder : callable
            Called once with the last element, returning an iterable of
            the same element type.

        Returns
        -------
        ChainFromLast
            Lazy adaptor over this sequence.
        """
        from chainlast.adaptor import chain_from_last

        return chain_from_last(self, builder)


class Chain(SequenceAdapter[T]):
    """Lifts any iterable into a ``SequenceAdapter``, so that
    ``chain_from_last()`` can be called fluently on it.

    :group: Adaptors

    Parameters
    ----------
    iterable : iterable
        The data to wrap. Only ``iter()`` is called on construction.

    Examples
    --------
    >>> words = Chain("a b c;d".split(" ")).chain_from_last(
    ...     lambda last: last.split(";")
    ... )
    >>> list(words)
    ['a', 'b', 'c', 'd']
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)

    def __next__(self) -> T:
        return next(self._it)
