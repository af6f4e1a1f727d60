"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/nucleotide.py

Nucleotide alphabets.

- `Nucleotide`: the 15 IUPAC DNA codes. The rank of each code is a 4-bit mask
  (A=0b0001, C=0b0010, G=0b0100, T=0b1000); union/intersection/difference
  are OR/AND/AND-NOT on that mask, with an all-zero result mapped to None.
- `DNA4`: the concrete A/C/G/T alphabet (ranks 0..3) used to address the
  genetic-code tables.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .alphabet import RedundantMixin, SymbolMixin
from .errors import RedundantSymbolNotRepresentable

_BASE_BITS = ((0b0001, "A"), (0b0010, "C"), (0b0100, "G"), (0b1000, "T"))
_ALL_BITS = 0b1111


class Nucleotide(RedundantMixin, Enum):
    # char, bit mask, complement, name
    A = ("A", 0b0001, "T", "Adenine")
    C = ("C", 0b0010, "G", "Cytosine")
    M = ("M", 0b0011, "K", "Adenine or Cytosine")
    G = ("G", 0b0100, "C", "Guanine")
    R = ("R", 0b0101, "Y", "Adenine or Guanine")
    S = ("S", 0b0110, "S", "Cytosine or Guanine")
    V = ("V", 0b0111, "B", "Adenine, Cytosine or Guanine")
    T = ("T", 0b1000, "A", "Thymine")
    W = ("W", 0b1001, "W", "Adenine or Thymine")
    Y = ("Y", 0b1010, "R", "Cytosine or Thymine")
    H = ("H", 0b1011, "D", "Adenine, Cytosine or Thymine")
    K = ("K", 0b1100, "M", "Guanine or Thymine")
    D = ("D", 0b1101, "H", "Adenine, Guanine or Thymine")
    B = ("B", 0b1110, "V", "Cytosine, Guanine or Thymine")
    N = ("N", 0b1111, "N", "Any nucleotide")

    def __init__(self, char: str, bits: int, compl: str, full_name: str):
        self.char = char
        self.rank = bits
        self.covers = "".join(c for bit, c in _BASE_BITS if bits & bit)
        self.full_name = full_name
        self.is_iupac = True
        self._compl = compl

    @property
    def bits(self) -> int:
        return self.rank

    @classmethod
    def from_bits(cls, bits: int) -> Optional["Nucleotide"]:
        return cls.from_rank(bits)

    def complement(self) -> "Nucleotide":
        return Nucleotide.parse(self._compl)

    # Bitwise forms of the set algebra; equivalent to the member-set versions.
    def matches(self, other: "Nucleotide") -> bool:
        return bool(self.rank & _bits_of(other))

    def union(self, other: "Nucleotide") -> "Nucleotide":
        return Nucleotide.from_rank(self.rank | _bits_of(other))

    def intersection(self, other: "Nucleotide") -> Optional["Nucleotide"]:
        return Nucleotide.from_rank(self.rank & _bits_of(other))

    def difference(self, other: "Nucleotide") -> Optional["Nucleotide"]:
        return Nucleotide.from_rank(self.rank & ~_bits_of(other) & _ALL_BITS)

    def expand(self) -> Tuple["DNA4", ...]:
        """Concrete bases this code stands for, in DNA4 rank order."""
        return tuple(DNA4.parse(c) for c in self.covers)

    def to_dna4(self) -> "DNA4":
        if self.is_redundant:
            raise RedundantSymbolNotRepresentable(self)
        return DNA4.from_rank(self.rank.bit_length() - 1)


def _bits_of(other) -> int:
    """Mask of a Nucleotide, or of a DNA4 base widened to its Nucleotide."""
    if isinstance(other, Nucleotide):
        return other.rank
    if isinstance(other, DNA4):
        return 1 << other.rank
    raise TypeError(f"Expected Nucleotide or DNA4, got {type(other).__name__}")


class DNA4(SymbolMixin, Enum):
    A = ("A", 0, "Adenine")
    C = ("C", 1, "Cytosine")
    G = ("G", 2, "Guanine")
    T = ("T", 3, "Thymine")

    def __init__(self, char: str, rank: int, full_name: str):
        self.char = char
        self.rank = rank
        self.covers = char
        self.full_name = full_name
        self.is_iupac = True

    def complement(self) -> "DNA4":
        return DNA4.from_rank(self.rank ^ 0b11)

    def expand(self) -> Tuple["DNA4", ...]:
        return (self,)

    def to_dna4(self) -> "DNA4":
        return self

    def to_nucleotide(self) -> Nucleotide:
        return Nucleotide.from_bits(1 << self.rank)

    @classmethod
    def from_nucleotide(cls, base: Nucleotide) -> "DNA4":
        return base.to_dna4()
