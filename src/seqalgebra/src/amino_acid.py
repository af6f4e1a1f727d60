"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/amino_acid.py

Amino-acid alphabet: the 20 standard residues, pyrrolysine (O) and
selenocysteine (U), the ambiguity codes B (D/N), Z (E/Q), J (I/L) and X (any
residue), and the stop symbol '*'.

Redundancy is not a power set here, so the algebra works on explicit member
sets: a union with no dedicated code widens to X, an empty intersection or
difference is None.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum

from .alphabet import RedundantMixin
from .errors import UnrecognizedSymbol

_RESIDUES = "ACDEFGHIKLMNOPQRSTUVWY"


class AminoAcid(RedundantMixin, Enum):
    # char, covered residues, three-letter code, name, IUPAC
    A = ("A", "A", "Ala", "Alanine", True)
    B = ("B", "DN", "Asx", "Aspartic acid or Asparagine", True)
    C = ("C", "C", "Cys", "Cysteine", True)
    D = ("D", "D", "Asp", "Aspartic acid", True)
    E = ("E", "E", "Glu", "Glutamic acid", True)
    F = ("F", "F", "Phe", "Phenylalanine", True)
    G = ("G", "G", "Gly", "Glycine", True)
    H = ("H", "H", "His", "Histidine", True)
    I = ("I", "I", "Ile", "Isoleucine", True)  # noqa: E741
    J = ("J", "IL", "Xle", "Leucine or Isoleucine", False)
    K = ("K", "K", "Lys", "Lysine", True)
    L = ("L", "L", "Leu", "Leucine", True)
    M = ("M", "M", "Met", "Methionine", True)
    N = ("N", "N", "Asn", "Asparagine", True)
    O = ("O", "O", "Pyl", "Pyrrolysine", False)  # noqa: E741
    P = ("P", "P", "Pro", "Proline", True)
    Q = ("Q", "Q", "Gln", "Glutamine", True)
    R = ("R", "R", "Arg", "Arginine", True)
    S = ("S", "S", "Ser", "Serine", True)
    T = ("T", "T", "Thr", "Threonine", True)
    U = ("U", "U", "Sec", "Selenocysteine", False)
    V = ("V", "V", "Val", "Valine", True)
    W = ("W", "W", "Trp", "Tryptophan", True)
    X = ("X", _RESIDUES, "Xaa", "Any amino acid", True)
    Y = ("Y", "Y", "Tyr", "Tyrosine", True)
    Z = ("Z", "EQ", "Glx", "Glutamic acid or Glutamine", True)
    Stop = ("*", "*", "Ter", "Stop", True)

    def __init__(self, char: str, covers: str, three_letter: str, full_name: str, is_iupac: bool):
        self.char = char
        self.covers = covers
        self.three_letter = three_letter
        self.full_name = full_name
        self.is_iupac = is_iupac

    @property
    def rank(self) -> int:
        return self.index

    @property
    def is_stop(self) -> bool:
        return self is AminoAcid.Stop

    @classmethod
    def from_three_letter(cls, code: str) -> "AminoAcid":
        for aa in cls:
            if aa.three_letter.lower() == code.lower():
                return aa
        raise UnrecognizedSymbol(code, cls.__name__)
