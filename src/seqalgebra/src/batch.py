"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/batch.py

Vectorised (numpy) translation of concrete DNA.

  encode_dna4(text)            -> uint8 DNA4 ranks
  codon_ranks(ranks)           -> int64 codon ranks (trailing 1-2 bases dropped)
  translate_ranks(table, r)    -> '<U1' one-letter residues, '*' for Stop

Results agree with GeneticCodeTable.get() entry by entry; StopOr(x) renders
as its residue x.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from functools import lru_cache
from typing import Union

import numpy as np

from .errors import UnrecognizedSymbol
from .genetic_code import GeneticCodeTable
from .nucleotide import DNA4

_INVALID = 255

_ASCII_TO_RANK = np.full(256, _INVALID, dtype=np.uint8)
for _base in DNA4:
    _ASCII_TO_RANK[ord(_base.char)] = _base.rank
    _ASCII_TO_RANK[ord(_base.char.lower())] = _base.rank
del _base


def encode_dna4(text: Union[str, bytes, bytearray]) -> np.ndarray:
    if isinstance(text, str):
        try:
            text = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise UnrecognizedSymbol(text[e.start], DNA4.__name__) from e
    raw = np.frombuffer(bytes(text), dtype=np.uint8)
    ranks = _ASCII_TO_RANK[raw]
    bad = np.flatnonzero(ranks == _INVALID)
    if bad.size:
        raise UnrecognizedSymbol(chr(int(raw[bad[0]])), DNA4.__name__)
    return ranks


def codon_ranks(ranks: np.ndarray) -> np.ndarray:
    ranks = np.asarray(ranks)
    n = (ranks.shape[0] // 3) * 3
    triples = ranks[:n].reshape(-1, 3).astype(np.int64)
    return triples[:, 0] * 16 + triples[:, 1] * 4 + triples[:, 2]


@lru_cache(maxsize=None)
def translation_chars(table: GeneticCodeTable) -> np.ndarray:
    chars = np.array([s.format() for s in table.translations], dtype="<U1")
    chars.setflags(write=False)
    return chars


def translate_ranks(table: GeneticCodeTable, ranks: np.ndarray) -> np.ndarray:
    return translation_chars(table)[np.asarray(ranks, dtype=np.int64)]


def translate_dna(table: GeneticCodeTable, text: Union[str, bytes, bytearray]) -> str:
    """One-letter protein string for concrete DNA text."""
    return "".join(translate_ranks(table, codon_ranks(encode_dna4(text))).tolist())
