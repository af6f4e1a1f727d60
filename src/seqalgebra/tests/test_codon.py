"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/tests/test_codon.py

Codon construction, rank density and the symbol-stream adapters.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import pytest

from seqalgebra import (
    DNA4,
    AminoAcid,
    Codon,
    CodonTooShort,
    Nucleotide,
    RedundantSymbolNotRepresentable,
    UnrecognizedSymbol,
    iter_codons,
    parse_symbols,
    reverse_complement,
)
from seqalgebra.src.seq import collapse_gaps, parse_gapped
from seqalgebra.src.wrappers import Base, Gap

N = Nucleotide


@pytest.mark.parametrize("alphabet", [DNA4, Nucleotide, AminoAcid])
def test_rank_is_dense_and_follows_variants(alphabet):
    codons = Codon.variants(alphabet)
    assert len(codons) == Codon.cardinality(alphabet) == alphabet.cardinality() ** 3
    assert [c.rank() for c in codons] == list(range(len(codons)))
    assert Codon.from_rank(alphabet, 0) == codons[0]
    assert Codon.from_rank(alphabet, len(codons) - 1) == codons[-1]
    assert Codon.from_rank(alphabet, len(codons)) is None
    assert Codon.from_rank(alphabet, -1) is None


def test_dna4_rank_values():
    assert Codon.parse("AAA", DNA4).rank() == 0
    assert Codon.parse("ACG", DNA4).rank() == 0 * 16 + 1 * 4 + 2
    assert Codon.parse("TTT", DNA4).rank() == 63
    assert Codon.from_rank(DNA4, 14).format() == "ATG"


def test_variants_are_first_symbol_major():
    first = Codon.variants(DNA4)[:5]
    assert [c.format() for c in first] == ["AAA", "AAC", "AAG", "AAT", "ACA"]


def test_parse_and_accessors():
    c = Codon.parse("atgCCC", Nucleotide)
    assert (c.first, c.second, c.third) == (N.A, N.T, N.G)
    assert list(c) == [N.A, N.T, N.G]
    assert str(c) == "ATG"
    assert c.alphabet is Nucleotide
    assert Codon.new(N.A, N.T, N.G) == c
    assert Codon.parse(b"ATG", Nucleotide) == c


def test_parse_too_short():
    with pytest.raises(CodonTooShort) as ei:
        Codon.parse("AT", Nucleotide)
    assert ei.value.n == 2
    with pytest.raises(CodonTooShort):
        Codon.from_symbols([])


def test_parse_bad_symbol():
    with pytest.raises(UnrecognizedSymbol):
        Codon.parse("AXG", Nucleotide)


def test_complement_and_expand():
    c = Codon.parse("ARN", Nucleotide)
    assert c.is_redundant
    assert c.complement().format() == "TYN"
    assert c.reverse_complement().format() == "NYT"
    expanded = c.expand()
    assert len(expanded) == 8
    assert all(e.alphabet is DNA4 for e in expanded)
    assert [e.format() for e in expanded[:4]] == ["AAA", "AAC", "AAG", "AAT"]
    assert [e.rank() for e in expanded] == sorted(e.rank() for e in expanded)
    assert all(c.matches(Codon(*(b.to_nucleotide() for b in e))) for e in expanded)


def test_to_dna4():
    assert Codon.parse("GCA", Nucleotide).to_dna4() == Codon.parse("GCA", DNA4)
    with pytest.raises(RedundantSymbolNotRepresentable):
        Codon.parse("GCN", Nucleotide).to_dna4()


def test_iter_codons_drops_trailing_symbols():
    symbols = parse_symbols("ATGCCCGA", Nucleotide)
    codons = list(iter_codons(symbols))
    assert [c.format() for c in codons] == ["ATG", "CCC"]
    assert list(iter_codons([])) == []


def test_reverse_complement():
    rc = reverse_complement(parse_symbols("AACGTR", Nucleotide))
    assert "".join(s.format() for s in rc) == "YACGTT"


def test_gapped_stream():
    symbols = parse_gapped("ATG---A-G", Nucleotide)
    assert symbols[3] is Gap
    gapped = [collapse_gaps(c) for c in iter_codons(symbols)]
    assert gapped[0] == Base(Codon.parse("ATG", Nucleotide))
    assert gapped[1] is Gap
    assert gapped[2] is Gap
