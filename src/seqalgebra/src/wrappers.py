"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/wrappers.py

Two small sum types that add one special state to any symbol type:

  Stopped[T] = Res(x) | StopOr(x) | Stop      translation outcomes
  Gapped[T]  = Base(x) | Gap                  alignment columns

`Stop` and `Gap` are singletons and never carry a payload. Operations on the
inner symbol are lifted through the wrapper (see Gapped.union etc.).

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

STOP_CHAR = "*"
GAP_CHAR = "-"


# -------------------- Stopped --------------------


class Stopped(Generic[T]):
    """Result of translating one codon."""

    __slots__ = ()

    def is_residue(self) -> bool:
        """True unless this is an unambiguous Stop (StopOr still encodes a residue)."""
        return self is not Stop

    def is_stop(self) -> bool:
        """True for Stop and for the context-dependent StopOr."""
        return not isinstance(self, Res)

    def into_option(self) -> Optional[T]:
        return None if self is Stop else self.value

    def unwrap(self) -> T:
        if self is Stop:
            raise ValueError("called unwrap() on a Stop value")
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self is Stop else self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn() if self is Stop else self.value

    def map(self, fn: Callable[[T], U]) -> "Stopped[U]":
        if self is Stop:
            return Stop
        return type(self)(fn(self.value))

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return default if self is Stop else fn(self.value)

    def format(self) -> str:
        return STOP_CHAR if self is Stop else str(self.value)

    def __str__(self) -> str:
        return self.format()

    @staticmethod
    def from_option(value: Optional[T]) -> "Stopped[T]":
        return Stop if value is None else Res(value)

    @staticmethod
    def parse(symbol, alphabet) -> "Stopped[Any]":
        """'*' parses as Stop; anything else is handed to ``alphabet.parse``."""
        if symbol in (STOP_CHAR, STOP_CHAR.encode(), ord(STOP_CHAR)):
            return Stop
        return Res(alphabet.parse(symbol))


@dataclass(frozen=True)
class Res(Stopped[T]):
    value: T

    def __repr__(self) -> str:
        return f"Res({self.value!r})"


@dataclass(frozen=True)
class StopOr(Stopped[T]):
    value: T

    def __repr__(self) -> str:
        return f"StopOr({self.value!r})"


class _StopType(Stopped[Any]):
    __slots__ = ()
    _instance: Optional["_StopType"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Stop"

    def __reduce__(self):
        return (_StopType, ())


Stop = _StopType()


# -------------------- Gapped --------------------


class Gapped(Generic[T]):
    """A symbol or an alignment gap."""

    __slots__ = ()

    def is_base(self) -> bool:
        return self is not Gap

    def is_gap(self) -> bool:
        return self is Gap

    def into_option(self) -> Optional[T]:
        return None if self is Gap else self.value

    def unwrap(self) -> T:
        if self is Gap:
            raise ValueError("called unwrap() on a Gap value")
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self is Gap else self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn() if self is Gap else self.value

    def map(self, fn: Callable[[T], U]) -> "Gapped[U]":
        return Gap if self is Gap else Base(fn(self.value))

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return default if self is Gap else fn(self.value)

    def flat_map(self, fn: Callable[[T], "Gapped[U]"]) -> "Gapped[U]":
        return Gap if self is Gap else fn(self.value)

    def complement(self) -> "Gapped[T]":
        return self.map(lambda x: x.complement())

    def format(self) -> str:
        return GAP_CHAR if self is Gap else str(self.value)

    def __str__(self) -> str:
        return self.format()

    # ---- lifted algebra ----

    def matches(self, other: "Gapped[T]") -> bool:
        """Gap matches Gap; a gap never matches a base."""
        if self is Gap or other is Gap:
            return self is other
        return self.value.matches(other.value)

    def _lift(self, other: "Gapped[T]", op: str) -> Optional["Gapped[T]"]:
        if self is Gap and other is Gap:
            return Gap
        if self is Gap or other is Gap:
            return None
        out = getattr(self.value, op)(other.value)
        return None if out is None else Base(out)

    def union(self, other: "Gapped[T]") -> Optional["Gapped[T]"]:
        return self._lift(other, "union")

    def intersection(self, other: "Gapped[T]") -> Optional["Gapped[T]"]:
        return self._lift(other, "intersection")

    def difference(self, other: "Gapped[T]") -> Optional["Gapped[T]"]:
        return self._lift(other, "difference")

    @staticmethod
    def from_option(value: Optional[T]) -> "Gapped[T]":
        return Gap if value is None else Base(value)

    @staticmethod
    def parse(symbol, alphabet) -> "Gapped[Any]":
        """'-' parses as Gap; anything else is handed to ``alphabet.parse``."""
        if symbol in (GAP_CHAR, GAP_CHAR.encode(), ord(GAP_CHAR)):
            return Gap
        return Base(alphabet.parse(symbol))


@dataclass(frozen=True)
class Base(Gapped[T]):
    value: T

    def __repr__(self) -> str:
        return f"Base({self.value!r})"


class _GapType(Gapped[Any]):
    __slots__ = ()
    _instance: Optional["_GapType"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Gap"

    def __reduce__(self):
        return (_GapType, ())


Gap = _GapType()
