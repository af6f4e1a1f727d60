"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/seq.py

Thin adapters between plain symbol streams and codons.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, List, TypeVar

from .codon import Codon
from .wrappers import Base, Gap, Gapped

S = TypeVar("S")


def parse_symbols(text, alphabet) -> List:
    """Parse every character (or byte) of ``text``; raises UnrecognizedSymbol."""
    return [alphabet.parse(ch) for ch in text]


def parse_gapped(text, alphabet) -> List[Gapped]:
    return [Gapped.parse(ch, alphabet) for ch in text]


def iter_codons(symbols: Iterable[S]) -> Iterator[Codon[S]]:
    """Non-overlapping triples; one or two trailing symbols are dropped."""
    it = iter(symbols)
    while True:
        chunk = tuple(islice(it, 3))
        if len(chunk) < 3:
            return
        yield Codon(*chunk)


def reverse_complement(symbols: Iterable[S]) -> List[S]:
    return [s.complement() for s in reversed(list(symbols))]


def collapse_gaps(codon: Codon[Gapped[S]]) -> Gapped[Codon[S]]:
    """A codon of gapped symbols is a Gap as soon as one position is a gap."""
    if any(s.is_gap() for s in codon):
        return Gap
    return Base(Codon(*(s.value for s in codon)))
