"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/translate.py

Codon -> amino acid lookups on a chosen GeneticCodeTable.

translate/tag are exact lookups on concrete codons. The *_redundant variants
expand an ambiguous codon into every concrete codon it stands for and combine
the answers with the redundancy algebra:

  all expansions stop            -> Stop
  only residues                  -> Res(union of residues)
  residues mixed with any stop   -> StopOr(union of residues)

All four accept a Gapped codon: Gap translates to Gap, Base(c) to Base(...).

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Callable, Union

from .amino_acid import AminoAcid
from .codon import Codon
from .genetic_code import GeneticCodeTable
from .tags import CodonTag
from .wrappers import Gapped, Res, Stop, StopOr, Stopped

_LOG = logging.getLogger("seqalgebra.translate")

CodonLike = Union[Codon, Gapped]


def _through_gap(codon: CodonLike, fn: Callable):
    if isinstance(codon, Gapped):
        return codon.map(fn)
    return fn(codon)


def translate(table: GeneticCodeTable, codon: CodonLike):
    """Translate a concrete codon (or a Gapped one) with ``table``."""
    return _through_gap(codon, table.get)


def tag(table: GeneticCodeTable, codon: CodonLike):
    return _through_gap(codon, table.get_tag)


def _combine_translations(table: GeneticCodeTable, codon: Codon) -> Stopped[AminoAcid]:
    outcomes = [table.get(c) for c in codon.expand()]
    residues = [o.unwrap() for o in outcomes if o.is_residue()]
    if not residues:
        return Stop
    aa = reduce(AminoAcid.union, residues)
    out = StopOr(aa) if any(o.is_stop() for o in outcomes) else Res(aa)
    if codon.is_redundant:
        _LOG.debug(
            "Resolved %s via %d codons in table %d -> %r",
            codon,
            len(outcomes),
            table.ncbi_id,
            out,
        )
    return out


def _combine_tags(table: GeneticCodeTable, codon: Codon) -> CodonTag:
    return reduce(CodonTag.union, (table.get_tag(c) for c in codon.expand()))


def translate_redundant(table: GeneticCodeTable, codon: CodonLike):
    """Translate a codon that may contain IUPAC ambiguity codes."""
    return _through_gap(codon, lambda c: _combine_translations(table, c))


def tag_redundant(table: GeneticCodeTable, codon: CodonLike):
    return _through_gap(codon, lambda c: _combine_tags(table, c))
