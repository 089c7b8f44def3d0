"""
``chainlast``
=============

Provides a lazy iterator adaptor which chains a sequence with a
continuation built from its last element, along with a fluent wrapper
exposing it on any iterable and a string splitting helper built on it.
"""
from ._version import __version__
from . import adaptor
from . import text
from .adaptor import ChainFromLast, chain_from_last
from .base import Chain, SequenceAdapter
from .text import split_last


__all__ = [
    "__version__",
    "adaptor",
    "text",
    "ChainFromLast",
    "chain_from_last",
    "Chain",
    "SequenceAdapter",
    "split_last",
]
