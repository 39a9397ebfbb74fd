"""
csvprober — heurystyczne wykrywanie separatora danych CSV.

Każdy kandydat na separator parsuje ten sam strumień; wygrywa ten, dla którego
liczba pól na rekord ma najmniejszy współczynnik zmienności (stddev / mean).
"""

from .models import (
    DEFAULT_DELIMITERS,
    DEFAULT_PROBE_RECORDS,
    CandidateProbability,
    ProbeConfig,
    ProbeResult,
    default_config,
)
from .prober import Prober, new_prober, probe, rank, run_trial
from .replay import StreamReplay
from .stats import DistributionSummary, summarize

__all__ = [
    "DEFAULT_DELIMITERS",
    "DEFAULT_PROBE_RECORDS",
    "CandidateProbability",
    "DistributionSummary",
    "ProbeConfig",
    "ProbeResult",
    "Prober",
    "StreamReplay",
    "default_config",
    "new_prober",
    "probe",
    "rank",
    "run_trial",
    "summarize",
]
