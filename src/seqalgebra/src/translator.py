"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/translator.py

Translator: a configured, reusable DNA -> protein string translator.

Input is read as IUPAC nucleotides plus '-' gaps, chunked into codons
(trailing 1-2 bases dropped). A codon with any gap position renders as the
gap character. Ambiguous codons either raise (redundant="error") or are
resolved with translate_redundant (redundant="resolve"). StopOr outcomes
render as their residue; only an unambiguous Stop renders as the stop
character or ends translation when to_stop is set.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from typing import Union

from .config import SeqAlgebraConfig, TranslationConfig
from .errors import UnknownGeneticCode
from .genetic_code import GeneticCodeTable
from .nucleotide import Nucleotide
from .seq import collapse_gaps, iter_codons, parse_gapped
from .translate import translate_redundant
from .wrappers import Stop

_LOG = logging.getLogger("seqalgebra.translator")

_POLICIES = ("error", "resolve")


class Translator:
    def __init__(
        self,
        table: Union[GeneticCodeTable, int] = GeneticCodeTable.STANDARD,
        *,
        redundant: str = "error",
        to_stop: bool = False,
        stop_char: str = "*",
        gap_char: str = "-",
    ) -> None:
        if not isinstance(table, GeneticCodeTable):
            found = GeneticCodeTable.from_ncbi_id(table)
            if found is None:
                raise UnknownGeneticCode(table)
            table = found
        if redundant not in _POLICIES:
            raise ValueError(f"redundant must be one of {_POLICIES}, got {redundant!r}")
        self.table = table
        self.redundant = redundant
        self.to_stop = to_stop
        self.stop_char = stop_char
        self.gap_char = gap_char
        _LOG.debug("Translator ready: %r", self)

    @classmethod
    def from_config(cls, cfg: Union[SeqAlgebraConfig, TranslationConfig]) -> "Translator":
        t = cfg.translation if isinstance(cfg, SeqAlgebraConfig) else cfg
        return cls(
            t.table,
            redundant=t.redundant,
            to_stop=t.to_stop,
            stop_char=t.stop_char,
            gap_char=t.gap_char,
        )

    def __repr__(self) -> str:
        return (
            f"Translator(table={self.table.name}, redundant={self.redundant!r}, "
            f"to_stop={self.to_stop})"
        )

    def translate_codon(self, codon):
        """Stopped outcome for one Nucleotide (or DNA4) codon."""
        if self.redundant == "resolve":
            return translate_redundant(self.table, codon)
        return self.table.get(codon)

    def translate(self, text) -> str:
        out = []
        for triple in iter_codons(parse_gapped(text, Nucleotide)):
            gapped = collapse_gaps(triple)
            if gapped.is_gap():
                out.append(self.gap_char)
                continue
            res = self.translate_codon(gapped.value)
            if res is Stop:
                if self.to_stop:
                    break
                out.append(self.stop_char)
            else:
                out.append(res.value.format())
        return "".join(out)

    __call__ = translate
