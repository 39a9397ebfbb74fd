from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import cfg
from .cfg import Settings
from .stats import DistributionSummary
from .utils.delims import is_valid_delimiter, parse_delimiters

# wartości fabryczne; bieżące domyślne bierzemy z Settings (ENV / .env)
DEFAULT_DELIMITERS: Tuple[str, ...] = (",", ";", "#", "|")
DEFAULT_PROBE_RECORDS = 200


class ProbeConfig(BaseModel):
    """
    Konfiguracja jednego wywołania probe():
    - records_to_probe: ile rekordów maksymalnie czytamy na jeden separator,
    - delimiters: kandydaci, w kolejności prób (duplikaty dozwolone),
    - encoding: dekodowanie bajtów; błędne bajty zastępowane, nie fatalne.
    """
    model_config = ConfigDict(frozen=True)

    records_to_probe: int = Field(default=DEFAULT_PROBE_RECORDS, gt=0)
    delimiters: Tuple[str, ...] = DEFAULT_DELIMITERS
    encoding: str = "utf-8-sig"

    @field_validator("delimiters")
    @classmethod
    def _check_delimiters(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        bad = [d for d in v if not is_valid_delimiter(d)]
        if bad:
            raise ValueError(f"niedozwolone separatory: {bad!r} (wymagany jeden znak, bez \", \\r, \\n)")
        return v

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, v: str) -> str:
        try:
            info = codecs.lookup(v)
        except LookupError:
            raise ValueError(f"nieznane kodowanie: {v!r}") from None
        # np. base64/zlib to kodeki bytes→bytes, TextIOWrapper ich nie przyjmie
        if not getattr(info, "_is_text_encoding", True):
            raise ValueError(f"{v!r} nie jest kodowaniem tekstu")
        return v

    @classmethod
    def from_settings(cls, s: Settings) -> "ProbeConfig":
        return cls(
            records_to_probe=s.PROBE_RECORDS,
            delimiters=parse_delimiters(s.PROBE_DELIMITERS),
            encoding=s.PROBE_ENCODING,
        )


def default_config() -> ProbeConfig:
    """Konfiguracja z bieżących ustawień (cfg.settings)."""
    return ProbeConfig.from_settings(cfg.settings)


@dataclass(frozen=True)
class CandidateProbability:
    delimiter: str
    parsed_records: int
    summary: DistributionSummary
    skipped_records: int = 0

    @property
    def cv(self) -> float:
        return self.summary.cv

    @property
    def is_uniform(self) -> bool:
        return self.summary.min == self.summary.max


@dataclass(frozen=True)
class ProbeResult:
    # posortowane rosnąco wg cv, pierwszy = najbardziej prawdopodobny
    candidates: Tuple[CandidateProbability, ...]
    # ile rekordów faktycznie przeczytano (≤ records_to_probe)
    actual_lines: int

    @property
    def best(self) -> Optional[CandidateProbability]:
        return self.candidates[0] if self.candidates else None

    @property
    def is_perfect(self) -> bool:
        """
        Idealnie ustrukturyzowane dane: zwycięzca ma stałą liczbę pól
        i sparsował wszystkie przeczytane rekordy (Min == Max, parsed == actual_lines).
        W przeciwnym razie czytnik CSV musi użyć heurystyk (co pominąć).
        """
        b = self.best
        return b is not None and b.is_uniform and b.parsed_records == self.actual_lines
