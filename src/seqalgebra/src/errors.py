"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/errors.py

Narrow, typed exceptions used across seqalgebra. Parse-time problems derive
from ValidationError so callers can separate bad input from bad configuration.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""


class SeqAlgebraError(Exception):
    """Base class for seqalgebra errors."""
    pass


class ValidationError(SeqAlgebraError):
    """Base class for input validation problems."""
    pass


class UnrecognizedSymbol(ValidationError):
    """A character or byte that is not part of the requested alphabet."""

    def __init__(self, byte, alphabet: str = ""):
        self.byte = byte
        self.alphabet = alphabet
        where = f" in alphabet {alphabet}" if alphabet else ""
        super().__init__(f"Encountered unknown character {byte!r}{where}")


class CodonTooShort(ValidationError):
    def __init__(self, n: int):
        self.n = n
        super().__init__(f"A codon needs 3 symbols, got {n}")


class RedundantSymbolNotRepresentable(ValidationError):
    """A redundant symbol cannot be narrowed to a concrete alphabet."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(
            f"Redundant symbol {symbol!s} cannot be represented by a single concrete base"
        )


class UnknownGeneticCode(ValidationError):
    def __init__(self, ncbi_id):
        self.ncbi_id = ncbi_id
        super().__init__(f"No genetic code table with NCBI id {ncbi_id!r}")


class ConfigError(SeqAlgebraError):
    """Bad or unreadable configuration."""
    pass
