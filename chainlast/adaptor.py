"""
``chainlast.adaptor``
=====================

The chainlast adaptor module provides a lazy iterator adaptor which
yields every element of a source iterable except the last, followed by
the elements of a continuation sequence built from that last element.

Only one element of the source is ever buffered, so the source may be
arbitrarily long and is consumed in a single pass.
"""
import enum
import typing as ty
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from chainlast import base
from chainlast.base import T

__all__ = ["ChainFromLast", "chain_from_last"]


class _Empty(enum.Enum):
    EMPTY = enum.auto()


_EMPTY = _Empty.EMPTY


@dataclass
class _Sourcing(ty.Generic[T]):
    source: ty.Iterator[T]
    builder: base.Builder[T]
    pending: ty.Union[T, _Empty] = _EMPTY


@dataclass
class _Continuing(ty.Generic[T]):
    continuation: ty.Iterator[T]


_State = ty.Union[_Sourcing[T], _Continuing[T]]


def _builder_name(builder: ty.Callable[..., ty.Any]) -> str:
    return getattr(builder, "__qualname__", None) or repr(builder)


class ChainFromLast(base.SequenceAdapter[T]):
    """Iterator adaptor chaining a source with a continuation built from
    the source's last element.

    :group: Adaptors

    Parameters
    ----------
    source : iterable
        The sequence to draw from. Only ``iter()`` is called during
        initialisation, so no elements are consumed until the adaptor
        is iterated.
    builder : callable
        Function taking the last element of ``source`` and returning an
        iterable over the same element type. Called exactly once if
        ``source`` is non-empty, and never otherwise.

    Raises
    ------
    TypeError
        If ``builder`` is not callable, or ``source`` is not iterable.

    Notes
    -----
    The adaptor is either sourcing, holding ``source``, ``builder`` and
    a single-element lookahead, or continuing, holding only the
    continuation. The switch happens once, during the pull which finds
    ``source`` exhausted, and that same pull already returns the first
    element of the continuation.
    """

    def __init__(
        self, source: ty.Iterable[T], builder: base.Builder[T]
    ) -> None:
        if not callable(builder):
            raise TypeError(
                f"builder must be callable, got {type(builder).__name__}."
            )
        self._state: _State[T] = _Sourcing(iter(source), builder)

    @property
    def phase(self) -> str:
        """Name of the active phase, either ``'sourcing'`` or
        ``'continuing'``.
        """
        if isinstance(self._state, _Sourcing):
            return "sourcing"
        return "continuing"

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        tree = Tree(f"{name}(phase=[yellow]'{self.phase}'[default])")
        state = self._state
        if isinstance(state, _Sourcing):
            pending = state.pending
            fields = {
                "builder": _builder_name(state.builder),
                "pending": "<empty>" if pending is _EMPTY else repr(pending),
            }
        else:
            fields = {"continuation": repr(state.continuation)}
        for key, value in fields.items():
            tree.add(f"[blue]{key} [default]= [green]{escape(value)}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get()

    def __next__(self) -> T:
        state = self._state
        if isinstance(state, _Continuing):
            return next(state.continuation)
        if state.pending is not _EMPTY:
            candidate = state.pending
            state.pending = _EMPTY
        else:
            try:
                candidate = next(state.source)
            except StopIteration:  # empty source, builder is dropped
                self._state = _Continuing(iter(()))
                raise
        try:
            state.pending = next(state.source)
        except StopIteration:
            # candidate is the last element, so the builder is spent here
            builder = state.builder
            self._state = _Continuing(iter(()))
            self._state = _Continuing(iter(builder(candidate)))
            return self.__next__()
        return candidate  # type: ignore


def chain_from_last(
    source: ty.Iterable[T], builder: base.Builder[T]
) -> ChainFromLast[T]:
    """Returns an iterator adaptor yielding all elements of ``source``
    except the last, followed by the elements of ``builder(last)``.

    If ``source`` is empty, the result is empty and ``builder`` is never
    called.

    :group: Adaptors

    Parameters
    ----------
    source : iterable
        Sequence to draw from. Not consumed until the result is
        iterated.
    builder : callable
        Single use function mapping the last element of ``source`` to an
        iterable of the same element type. It decides for itself
        whether to re-emit, transform, or drop that element.

    Returns
    -------
    ChainFromLast
        Lazy iterator over the chained sequence.

    Examples
    --------
    >>> words = chain_from_last(
    ...     "lorem ipsum dolor;sit;amet".split(" "),
    ...     lambda last: last.split(";"),
    ... )
    >>> list(words)
    ['lorem', 'ipsum', 'dolor', 'sit', 'amet']
    """
    return ChainFromLast(source, builder)
