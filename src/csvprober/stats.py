# stats.py — statystyka rozkładu liczby pól na rekord
# ==============================================================================
# Dla jednej próby (jeden separator) dostajemy listę liczb pól per rekord.
# Z niej liczymy dane „Box and Whisker” oraz średnią i odchylenie standardowe.
#
# UWAGI:
# - Kwartyle i mediana to proste estymaty pozycyjne (indeks n//4, n//2, n*3//4
#   w posortowanej próbce), bez interpolacji. Wynik musi się zgadzać co do
#   indeksu, więc nie podmieniać na np.quantile.
# - Odchylenie standardowe jest populacyjne: sqrt(E[x²] − E[x]²).
# ==============================================================================

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass(frozen=True)
class DistributionSummary:
    min: int
    lq: int
    median: int
    uq: int
    max: int
    mean: float
    stddev: float

    @property
    def cv(self) -> float:
        """Współczynnik zmienności (stddev / mean); niżej = bardziej regularne dane."""
        if self.mean == 0:
            return math.inf
        return self.stddev / self.mean


def summarize(counts: List[int]) -> DistributionSummary:
    """
    Sortuje `counts` w miejscu (destrukcyjnie) i zwraca podsumowanie rozkładu.
    Pusta próbka to błąd wywołującego → ValueError.
    """
    if not counts:
        raise ValueError("summarize: pusta próbka (brak sparsowanych rekordów)")

    arr = np.sort(np.asarray(counts, dtype=np.int64))
    n = arr.size
    # wynik sortowania wraca do listy wywołującego
    counts[:] = arr.tolist()

    total = int(arr.sum())
    squares = int(np.dot(arr, arr))

    mean = total / n
    variance = squares / n - mean * mean
    # zaokrąglenia potrafią dać -1e-16 przy stałej próbce
    stddev = math.sqrt(variance) if variance > 0 else 0.0

    return DistributionSummary(
        min=int(arr[0]),
        lq=int(arr[n // 4]),
        median=int(arr[n // 2]),
        uq=int(arr[n * 3 // 4]),
        max=int(arr[-1]),
        mean=mean,
        stddev=stddev,
    )
