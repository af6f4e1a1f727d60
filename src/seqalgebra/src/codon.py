"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/codon.py

Codon: an ordered triple of symbols from one alphabet.

The rank of a codon is computed from the dense index of each symbol,
    rank = i1 * C**2 + i2 * C + i3        (C = alphabet cardinality)
which is injective and dense over [0, C**3). Codon.variants() enumerates in
the same first-symbol-major order, so flat tables line up with ranks.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice, product
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .errors import CodonTooShort
from .nucleotide import DNA4

S = TypeVar("S")


@dataclass(frozen=True)
class Codon(Generic[S]):
    first: S
    second: S
    third: S

    # ---- construction ----

    @classmethod
    def new(cls, first: S, second: S, third: S) -> "Codon[S]":
        return cls(first, second, third)

    @classmethod
    def from_symbols(cls, symbols: Iterable[S]) -> "Codon[S]":
        """Take the first three symbols; anything after them is ignored."""
        head = list(islice(iter(symbols), 3))
        if len(head) < 3:
            raise CodonTooShort(len(head))
        return cls(*head)

    @classmethod
    def parse(cls, text, alphabet) -> "Codon":
        """Parse the first three characters (or bytes) of ``text``."""
        return cls.from_symbols(alphabet.parse(ch) for ch in text)

    @classmethod
    def from_rank(cls, alphabet, rank: int) -> Optional["Codon"]:
        c = alphabet.cardinality()
        if not 0 <= rank < c**3:
            return None
        hi, lo = divmod(rank, c)
        hi, mid = divmod(hi, c)
        return cls(alphabet.from_index(hi), alphabet.from_index(mid), alphabet.from_index(lo))

    @staticmethod
    def cardinality(alphabet) -> int:
        return alphabet.cardinality() ** 3

    @classmethod
    def variants(cls, alphabet) -> Tuple["Codon", ...]:
        """Every codon over ``alphabet``, in rank order."""
        vs = alphabet.variants()
        return tuple(cls(a, b, c) for a, b, c in product(vs, repeat=3))

    # ---- value ----

    def __iter__(self) -> Iterator[S]:
        return iter((self.first, self.second, self.third))

    @property
    def alphabet(self):
        return type(self.first)

    def rank(self) -> int:
        c = self.alphabet.cardinality()
        return (self.first.index * c + self.second.index) * c + self.third.index

    def format(self) -> str:
        return "".join(s.format() for s in self)

    def __str__(self) -> str:
        return self.format()

    @property
    def is_redundant(self) -> bool:
        return any(s.is_redundant for s in self)

    def matches(self, other: "Codon[S]") -> bool:
        return all(a.matches(b) for a, b in zip(self, other))

    # ---- nucleotide helpers ----

    def complement(self) -> "Codon[S]":
        return Codon(*(s.complement() for s in self))

    def reverse_complement(self) -> "Codon[S]":
        return Codon(self.third.complement(), self.second.complement(), self.first.complement())

    def expand(self) -> Tuple["Codon[DNA4]", ...]:
        """Every concrete codon this codon stands for, in rank order."""
        return tuple(Codon(a, b, c) for a, b, c in product(*(s.expand() for s in self)))

    def to_dna4(self) -> "Codon[DNA4]":
        """Narrow to concrete bases; raises RedundantSymbolNotRepresentable."""
        return Codon(*(s.to_dna4() for s in self))
