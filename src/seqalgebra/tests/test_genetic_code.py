"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/tests/test_genetic_code.py

Exhaustive checks of the 27 genetic-code tables plus translate/tag behaviour.

The expected values are written out per table in DNA4 rank order, so they do
not pass through tables.NCBI_CODES or its TCAG reordering.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import pytest

from seqalgebra import (
    DNA4,
    AminoAcid,
    Base,
    Codon,
    CodonTag,
    Gap,
    GeneticCodeTable,
    Nucleotide,
    RedundantSymbolNotRepresentable,
    Res,
    Stop,
    StopOr,
    tag,
    tag_redundant,
    translate,
    translate_redundant,
)
from seqalgebra.src.tables import NCBI_CODES

AA = AminoAcid
TABLES = list(GeneticCodeTable)
NCBI_IDS = [1, 2, 3, 4, 5, 6, 9, 10, 11, 12, 13, 14, 15, 16, 21, 22, 23, 24, 25, 26,
            27, 28, 29, 30, 31, 32, 33]


def _codon(text: str) -> Codon:
    return Codon.parse(text, Nucleotide)


# Expected outcome for every DNA4 codon rank (AAA, AAC, ..., TTT), keyed by NCBI id.
# Translations: upper case is Res, lower case is StopOr, '*' is Stop.
# Tags use the CodonTag display characters.
TRANSLATIONS = {
    1: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSS*CWCLFLF",
    2: "KNKNTTTT*S*SMIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    3: "KNKNTTTTRSRSMIMIQHQHPPPPRRRRTTTTEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    4: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    5: "KNKNTTTTSSSSMIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    6: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVQYQYSSSS*CWCLFLF",
    9: "NNKNTTTTSSSSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    10: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSCCWCLFLF",
    11: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSS*CWCLFLF",
    12: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLSLEDEDAAAAGGGGVVVV*Y*YSSSS*CWCLFLF",
    13: "KNKNTTTTGSGSMIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    14: "NNKNTTTTSSSSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVYY*YSSSSWCWCLFLF",
    15: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*YQYSSSS*CWCLFLF",
    16: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*YLYSSSS*CWCLFLF",
    21: "NNKNTTTTSSSSMIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    22: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*YLY*SSS*CWCLFLF",
    23: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSS*CWC*FLF",
    24: "KNKNTTTTSSKSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSWCWCLFLF",
    25: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSSGCWCLFLF",
    26: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLALEDEDAAAAGGGGVVVV*Y*YSSSS*CWCLFLF",
    27: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVQYQYSSSSwCWCLFLF",
    28: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVqYqYSSSSwCWCLFLF",
    29: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVYYYYSSSS*CWCLFLF",
    30: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVEYEYSSSS*CWCLFLF",
    31: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVeYeYSSSSWCWCLFLF",
    32: "KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*YWYSSSS*CWCLFLF",
    33: "KNKNTTTTSSKSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVVYY*YSSSSWCWCLFLF",
}

TAGS = {
    1: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRR*R*RRRRR*RRRRRSR",
    2: "RRRRRRRR*R*RSSSSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRRR",
    3: "RRRRRRRRRRRRSRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRRR",
    4: "RRRRRRRRRRRRSSSSRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSR*R*RRRRRRRRRSRSR",
    5: "RRRRRRRRRRRRSSSSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRSR",
    6: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRR",
    9: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRRR",
    10: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*R*RRRRRRRRRRRRR",
    11: "RRRRRRRRRRRRSSSSRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSR*R*RRRRR*RRRRRSR",
    12: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRR*R*RRRRR*RRRRRRR",
    13: "RRRRRRRRRRRRSRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRSR",
    14: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRRRRRRRR",
    15: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRR*RRRRRRR",
    16: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRR*RRRRRRR",
    21: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRRR",
    22: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRR*RRR*RRRRRRR",
    23: "RRRRRRRRRRRRRRSSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRR*RRR*RRR",
    24: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRSR",
    25: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRSR*R*RRRRRRRRRRRSR",
    26: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRR*R*RRRRR*RRRRRRR",
    27: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRORRRRRRR",
    28: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRORORRRRRORRRRRRR",
    29: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRR",
    30: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRR*RRRRRRR",
    31: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRRORORRRRRRRRRRRRR",
    32: "RRRRRRRRRRRRSSSSRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSR*RRRRRRR*RRRRRSR",
    33: "RRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRRRRRRRRRRRRRRSRRR*RRRRRRRRRRRSR",
}


def _expected_translation(ch: str):
    if ch == "*":
        return Stop
    if ch.islower():
        return StopOr(AminoAcid.parse(ch))
    return Res(AminoAcid.parse(ch))


def test_table_ids():
    assert [t.ncbi_id for t in GeneticCodeTable] == NCBI_IDS
    assert len(TABLES) == 27
    assert GeneticCodeTable.default() is GeneticCodeTable.STANDARD
    assert GeneticCodeTable.from_ncbi_id(11) is GeneticCodeTable.BACTERIAL_ARCHAEAL_PLASTID
    for retired in (0, 7, 8, 17, 18, 19, 20, 34):
        assert GeneticCodeTable.from_ncbi_id(retired) is None
    with pytest.raises(ValueError):
        GeneticCodeTable(7)
    assert GeneticCodeTable.VERTEBRATE_MITO.full_name == "Vertebrate Mitochondrial"


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_every_translation_matches_ncbi(table):
    expected = TRANSLATIONS[table.ncbi_id]
    assert len(expected) == 64
    for rank, ch in enumerate(expected):
        codon = Codon.from_rank(DNA4, rank)
        assert table.get(codon) == _expected_translation(ch), (table.name, codon.format())


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.name)
def test_every_tag_matches_ncbi(table):
    expected = TAGS[table.ncbi_id]
    assert len(expected) == 64
    got = "".join(t.format() for t in table.tags)
    assert got == expected, table.name


def test_ncbi_codes_line_up_with_tables():
    assert sorted(NCBI_CODES) == NCBI_IDS
    for table in TABLES:
        assert NCBI_CODES[table.ncbi_id].key == table.name


# -------------------- concrete scenarios --------------------


def test_standard_start():
    std = GeneticCodeTable.STANDARD
    assert translate(std, _codon("ATG")) == Res(AA.M)
    assert tag(std, _codon("ATG")) is CodonTag.START


@pytest.mark.parametrize("triple", ["TAA", "TAG", "TGA"])
def test_standard_stops(triple):
    assert translate(GeneticCodeTable.STANDARD, _codon(triple)) is Stop
    assert tag(GeneticCodeTable.STANDARD, _codon(triple)) is CodonTag.STOP


def test_table_specific_divergence():
    assert translate(GeneticCodeTable.VERTEBRATE_MITO, _codon("AGA")) is Stop
    assert translate(GeneticCodeTable.STANDARD, _codon("AGA")) == Res(AA.R)
    assert translate(GeneticCodeTable.VERTEBRATE_MITO, _codon("TGA")) == Res(AA.W)
    assert translate(GeneticCodeTable.YEAST_MITO, _codon("CTG")) == Res(AA.T)


def test_stop_or_residue_tables():
    assert translate(GeneticCodeTable.KARYORELICT, _codon("TGA")) == StopOr(AA.W)
    assert tag(GeneticCodeTable.KARYORELICT, _codon("TGA")) is CodonTag.STOP_RES
    assert translate(GeneticCodeTable.CONDYLOSTOMA, _codon("TAA")) == StopOr(AA.Q)
    assert translate(GeneticCodeTable.BLASTOCRITHIDIA, _codon("TAG")) == StopOr(AA.E)


def test_balanophoraceae_follows_ncbi():
    t = GeneticCodeTable.BALANOPHORACEAE_PLASTID
    assert translate(t, _codon("TAA")) is Stop
    assert translate(t, _codon("TAG")) == Res(AA.W)
    assert translate(t, _codon("TGA")) is Stop


def test_start_and_stop_codons():
    std = GeneticCodeTable.STANDARD
    assert [c.format() for c in std.start_codons()] == ["ATG", "CTG", "TTG"]
    assert [c.format() for c in std.stop_codons()] == ["TAA", "TAG", "TGA"]
    assert [c.format() for c in GeneticCodeTable.VERTEBRATE_MITO.stop_codons()] == [
        "AGA",
        "AGG",
        "TAA",
        "TAG",
    ]


def test_redundant_codon_is_rejected_by_exact_lookup():
    with pytest.raises(RedundantSymbolNotRepresentable):
        translate(GeneticCodeTable.STANDARD, _codon("ATN"))


# -------------------- redundant codons --------------------


@pytest.mark.parametrize(
    "triple,expected",
    [
        ("GCN", Res(AA.A)),
        ("GAY", Res(AA.D)),
        ("RAY", Res(AA.B)),
        ("SAR", Res(AA.Z)),
        ("ATH", Res(AA.I)),
        ("ATN", Res(AA.X)),
        ("TAR", Stop),
        ("TRA", Stop),
        ("TGR", StopOr(AA.W)),
        ("ATG", Res(AA.M)),
    ],
)
def test_translate_redundant(triple, expected):
    assert translate_redundant(GeneticCodeTable.STANDARD, _codon(triple)) == expected


def test_translate_redundant_table_specific():
    assert translate_redundant(GeneticCodeTable.VERTEBRATE_MITO, _codon("TGR")) == Res(AA.W)
    assert translate_redundant(GeneticCodeTable.VERTEBRATE_MITO, _codon("AGR")) is Stop


def test_tag_redundant():
    std = GeneticCodeTable.STANDARD
    assert tag_redundant(std, _codon("HTG")) is CodonTag.START
    assert tag_redundant(std, _codon("NTG")) is CodonTag.START_RES
    assert tag_redundant(std, _codon("ATR")) is CodonTag.START_RES
    assert tag_redundant(std, _codon("TRR")) is CodonTag.STOP_RES
    assert tag_redundant(std, _codon("NNN")) is CodonTag.ANY


def test_gapped_codons_lift():
    std = GeneticCodeTable.STANDARD
    assert translate(std, Gap) is Gap
    assert tag(std, Gap) is Gap
    assert translate(std, Base(_codon("ATG"))) == Base(Res(AA.M))
    assert translate_redundant(std, Base(_codon("TAR"))) == Base(Stop)
    assert tag_redundant(std, Gap) is Gap
