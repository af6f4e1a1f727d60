"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/genetic_code.py

GeneticCodeTable: the 27 NCBI genetic codes, valued by their NCBI id.

Each table owns two immutable 64-entry tuples indexed by DNA4 codon rank,
built once at import from tables.NCBI_CODES:

  translations[rank] -> Res(aa) | StopOr(aa) | Stop
  tags[rank]         -> CodonTag

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from .amino_acid import AminoAcid
from .codon import Codon
from .nucleotide import DNA4
from .tables import NCBI_CODES, NcbiCode, to_rank_order
from .tags import CodonTag
from .wrappers import Res, Stop, StopOr, Stopped


class GeneticCodeTable(Enum):
    STANDARD = 1
    VERTEBRATE_MITO = 2
    YEAST_MITO = 3
    MOLD_PROTOZOAN_COELENTERATE_MITO = 4
    INVERTEBRATE_MITO = 5
    CILIATE_DASYCLADACEAN_HEXAMITA = 6
    ECHINODERM_FLATWORM_MITO = 9
    EUPLOTID = 10
    BACTERIAL_ARCHAEAL_PLASTID = 11
    ALT_YEAST = 12
    ASCIDIAN_MITO = 13
    ALT_FLATWORM_MITO = 14
    BLEPHARISMA_MACRONUCLEAR = 15
    CHLOROPHYCEAN_MITO = 16
    TREMATODE_MITO = 21
    SCENEDESMUS_MITO = 22
    THRAUSTOCHYTRIUM_MITO = 23
    PTEROBRANCHIA_MITO = 24
    SR1_GRACILIBACTERIA = 25
    PACHYSOLEN = 26
    KARYORELICT = 27
    CONDYLOSTOMA = 28
    MESODINIUM = 29
    PERITRICH = 30
    BLASTOCRITHIDIA = 31
    BALANOPHORACEAE_PLASTID = 32
    CEPHALODISCIDAE_MITO = 33

    # ---- identity ----

    @property
    def ncbi_id(self) -> int:
        return self.value

    @property
    def full_name(self) -> str:
        return NCBI_CODES[self.value].name

    @classmethod
    def default(cls) -> "GeneticCodeTable":
        return cls.STANDARD

    @classmethod
    def from_ncbi_id(cls, ncbi_id: int) -> Optional["GeneticCodeTable"]:
        """Table for an NCBI ``transl_table`` number, or None for retired/unknown ids."""
        try:
            return cls(ncbi_id)
        except ValueError:
            return None

    # ---- lookups ----

    @property
    def translations(self) -> Tuple[Stopped[AminoAcid], ...]:
        return _TRANSLATIONS[self]

    @property
    def tags(self) -> Tuple[CodonTag, ...]:
        return _TAGS[self]

    def get(self, codon: Codon) -> Stopped[AminoAcid]:
        """
        Translate one concrete codon. Nucleotide codons are narrowed to DNA4
        first and raise RedundantSymbolNotRepresentable if any base is
        ambiguous; use translate_redundant for those.
        """
        return _TRANSLATIONS[self][_concrete_rank(codon)]

    def get_tag(self, codon: Codon) -> CodonTag:
        return _TAGS[self][_concrete_rank(codon)]

    def start_codons(self) -> Tuple[Codon[DNA4], ...]:
        """Codons that can initiate translation, in rank order."""
        return tuple(c for c, t in zip(_DNA4_CODONS, self.tags) if t.can_start)

    def stop_codons(self) -> Tuple[Codon[DNA4], ...]:
        """Codons that can terminate translation (Stop and StopOr), in rank order."""
        return tuple(c for c, s in zip(_DNA4_CODONS, self.translations) if s.is_stop())


def _concrete_rank(codon: Codon) -> int:
    if codon.alphabet is not DNA4:
        codon = codon.to_dna4()
    return codon.rank()


def _build(code: NcbiCode) -> Tuple[Tuple[Stopped[AminoAcid], ...], Tuple[CodonTag, ...]]:
    translations = []
    tags = []
    for aa, start in zip(to_rank_order(code.aas), to_rank_order(code.starts)):
        if aa == "*":
            translations.append(Stop)
            tags.append(CodonTag.STOP)
        elif start == "*":
            translations.append(StopOr(AminoAcid.parse(aa)))
            tags.append(CodonTag.STOP_RES)
        else:
            translations.append(Res(AminoAcid.parse(aa)))
            tags.append(CodonTag.START if start == "M" else CodonTag.RES)
    return tuple(translations), tuple(tags)


_DNA4_CODONS: Tuple[Codon[DNA4], ...] = Codon.variants(DNA4)
_TRANSLATIONS: Dict[GeneticCodeTable, Tuple[Stopped[AminoAcid], ...]] = {}
_TAGS: Dict[GeneticCodeTable, Tuple[CodonTag, ...]] = {}

if {t.value for t in GeneticCodeTable} != set(NCBI_CODES):
    raise RuntimeError("GeneticCodeTable ids out of sync with NCBI_CODES")
for _table in GeneticCodeTable:
    if NCBI_CODES[_table.value].key != _table.name:
        raise RuntimeError(f"NCBI_CODES[{_table.value}] is not {_table.name}")
    _TRANSLATIONS[_table], _TAGS[_table] = _build(NCBI_CODES[_table.value])
del _table
