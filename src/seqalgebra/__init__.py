"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/__init__.py

Public entry point for seqalgebra.

This module re-exports the stable Python API:

    from seqalgebra import Nucleotide, Codon, GeneticCodeTable, translate

    codon = Codon.parse("ATG", Nucleotide)
    translate(GeneticCodeTable.STANDARD, codon)        # Res(AminoAcid.M)
    Nucleotide.A | Nucleotide.G                         # Nucleotide.R

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

# re-exported API
from .src.amino_acid import AminoAcid  # noqa: F401
from .src.batch import (  # noqa: F401
    codon_ranks,
    encode_dna4,
    translate_dna,
    translate_ranks,
)
from .src.codon import Codon  # noqa: F401
from .src.config import SeqAlgebraConfig, TranslationConfig, load_config  # noqa: F401
from .src.errors import (  # noqa: F401
    CodonTooShort,
    ConfigError,
    RedundantSymbolNotRepresentable,
    SeqAlgebraError,
    UnknownGeneticCode,
    UnrecognizedSymbol,
    ValidationError,
)
from .src.genetic_code import GeneticCodeTable  # noqa: F401
from .src.logging_setup import configure_logging  # noqa: F401
from .src.nucleotide import DNA4, Nucleotide  # noqa: F401
from .src.seq import iter_codons, parse_symbols, reverse_complement  # noqa: F401
from .src.tags import CodonTag  # noqa: F401
from .src.translate import tag, tag_redundant, translate, translate_redundant  # noqa: F401
from .src.translator import Translator  # noqa: F401
from .src.wrappers import Base, Gap, Gapped, Res, Stop, StopOr, Stopped  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "AminoAcid",
    "Base",
    "Codon",
    "CodonTag",
    "CodonTooShort",
    "ConfigError",
    "DNA4",
    "Gap",
    "Gapped",
    "GeneticCodeTable",
    "Nucleotide",
    "RedundantSymbolNotRepresentable",
    "Res",
    "SeqAlgebraConfig",
    "SeqAlgebraError",
    "Stop",
    "StopOr",
    "Stopped",
    "TranslationConfig",
    "Translator",
    "UnknownGeneticCode",
    "UnrecognizedSymbol",
    "ValidationError",
    "codon_ranks",
    "configure_logging",
    "encode_dna4",
    "iter_codons",
    "load_config",
    "parse_symbols",
    "reverse_complement",
    "tag",
    "tag_redundant",
    "translate",
    "translate_dna",
    "translate_ranks",
    "translate_redundant",
]
