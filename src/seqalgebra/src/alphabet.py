"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/alphabet.py

Shared behaviour for closed single-letter alphabets.

Every alphabet is an Enum whose members carry their own metadata (display
character, rank, the concrete symbols they stand for, IUPAC validity). All
codec, rank and set-algebra methods are derived from that metadata here, so a
concrete alphabet only has to list its members.

- SymbolMixin: parse/format, rank/index/cardinality, members, matches
- RedundantMixin: union/intersection/difference (+ | & - operators);
  None stands for the empty set

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, FrozenSet, Optional, Tuple, Union

from .errors import UnrecognizedSymbol

SymbolLike = Union[str, bytes, bytearray, int]


# -------------------- per-class lookup tables (built once) --------------------


@lru_cache(maxsize=None)
def _by_char(cls) -> Dict[str, "SymbolMixin"]:
    return {m.char.upper(): m for m in cls}


@lru_cache(maxsize=None)
def _by_rank(cls) -> Dict[int, "SymbolMixin"]:
    return {m.rank: m for m in cls}


@lru_cache(maxsize=None)
def _variants(cls) -> Tuple["SymbolMixin", ...]:
    return tuple(cls)


@lru_cache(maxsize=None)
def _index_of(cls) -> Dict["SymbolMixin", int]:
    return {m: i for i, m in enumerate(cls)}


@lru_cache(maxsize=None)
def _members(cls) -> Dict["SymbolMixin", FrozenSet["SymbolMixin"]]:
    by_char = _by_char(cls)
    return {m: frozenset(by_char[c] for c in m.covers) for m in cls}


@lru_cache(maxsize=None)
def _by_members(cls) -> Dict[FrozenSet["SymbolMixin"], "SymbolMixin"]:
    return {ms: m for m, ms in _members(cls).items()}


def _coerce_char(symbol: SymbolLike) -> Optional[str]:
    if isinstance(symbol, str):
        return symbol if len(symbol) == 1 else None
    if isinstance(symbol, (bytes, bytearray)):
        return chr(symbol[0]) if len(symbol) == 1 else None
    if isinstance(symbol, int) and not isinstance(symbol, bool):
        return chr(symbol) if 0 <= symbol < 256 else None
    return None


# -------------------- mixins --------------------


class SymbolMixin:
    """
    Codec, ranking and matching for an Enum of single-letter symbols.

    Members must set the attributes ``char``, ``rank``, ``covers`` (the
    characters of the concrete symbols it represents), ``full_name`` and
    ``is_iupac``.
    """

    char: str
    rank: int
    covers: str
    full_name: str
    is_iupac: bool

    # ---- codec ----

    @classmethod
    def parse(cls, symbol: SymbolLike):
        """
        Parse one character, one byte, or a byte value (case-insensitive).
        Raises UnrecognizedSymbol carrying the offending input.
        """
        char = _coerce_char(symbol)
        found = _by_char(cls).get(char.upper()) if char is not None else None
        if found is None:
            raise UnrecognizedSymbol(char if char is not None else symbol, cls.__name__)
        return found

    def format(self) -> str:
        return self.char

    def to_byte(self) -> int:
        return ord(self.char)

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    # ---- ranking ----

    @classmethod
    def cardinality(cls) -> int:
        return len(_variants(cls))

    @classmethod
    def variants(cls) -> tuple:
        """All members in rank order."""
        return _variants(cls)

    @classmethod
    def from_rank(cls, rank: int):
        return _by_rank(cls).get(rank)

    @classmethod
    def from_index(cls, index: int):
        vs = _variants(cls)
        return vs[index] if 0 <= index < len(vs) else None

    @property
    def index(self) -> int:
        """Dense 0-based position in variants(); used to address flat tables."""
        return _index_of(type(self))[self]

    @classmethod
    def default(cls):
        """The most general symbol of the alphabet."""
        return max(_variants(cls), key=lambda m: len(m.covers))

    # ---- redundancy ----

    def members(self) -> FrozenSet:
        """Concrete symbols of this alphabet that this symbol stands for."""
        return _members(type(self))[self]

    @property
    def is_redundant(self) -> bool:
        return len(self.covers) > 1

    def matches(self, other) -> bool:
        """Could both symbols denote the same concrete symbol? Not transitive."""
        return not self.members().isdisjoint(other.members())


class RedundantMixin(SymbolMixin):
    """
    Set algebra over symbols that stand for sets of concrete symbols.

    Results with no exact symbol are promoted to the most general symbol
    (``default()``); an empty result is None.
    """

    @classmethod
    def from_members(cls, members) -> Optional["RedundantMixin"]:
        """Exact symbol for a set of concrete members, or None."""
        return _by_members(cls).get(frozenset(members))

    @classmethod
    def _closest(cls, members: FrozenSet):
        if not members:
            return None
        found = _by_members(cls).get(members)
        return found if found is not None else cls.default()

    def union(self, other):
        return type(self)._closest(self.members() | other.members())

    def intersection(self, other):
        return type(self)._closest(self.members() & other.members())

    def difference(self, other):
        return type(self)._closest(self.members() - other.members())

    def __or__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.difference(other)
