"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/tags.py

CodonTag: the role a codon plays in translation, as a set over
{start, residue, stop}. Every non-empty subset has a member, so the
union/intersection/difference inherited from RedundantMixin are exact.

Display characters:
  S start   R residue   * stop
  M start or residue    E start or stop    O stop or residue    N any

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum

from .alphabet import RedundantMixin

_START, _RES, _STOP = 0b001, 0b010, 0b100
_ROLE_CHARS = ((_START, "S"), (_RES, "R"), (_STOP, "*"))


class CodonTag(RedundantMixin, Enum):
    START = ("S", _START, "Start")
    RES = ("R", _RES, "Residue")
    START_RES = ("M", _START | _RES, "Start or residue")
    STOP = ("*", _STOP, "Stop")
    START_STOP = ("E", _START | _STOP, "Start or stop")
    STOP_RES = ("O", _STOP | _RES, "Stop or residue")
    ANY = ("N", _START | _RES | _STOP, "Any role")

    def __init__(self, char: str, bits: int, full_name: str):
        self.char = char
        self.bits = bits
        self.covers = "".join(c for bit, c in _ROLE_CHARS if bits & bit)
        self.full_name = full_name
        self.is_iupac = False

    @property
    def rank(self) -> int:
        return self.bits - 1

    @property
    def can_start(self) -> bool:
        return bool(self.bits & _START)

    @property
    def can_stop(self) -> bool:
        return bool(self.bits & _STOP)

    @property
    def can_be_residue(self) -> bool:
        return bool(self.bits & _RES)
