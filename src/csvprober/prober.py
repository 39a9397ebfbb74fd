# prober.py — wybór najbardziej prawdopodobnego separatora CSV
# ==============================================================================
# ROLA MODUŁU
# - Dla każdego kandydata (w kolejności z konfiguracji) parsuje ten sam strumień
#   logiczny (StreamReplay) i zbiera liczbę pól per rekord,
# - z niepustych prób buduje CandidateProbability (statystyka w stats.py),
# - sortuje kandydatów rosnąco wg współczynnika zmienności (cv = stddev/mean).
#
# BŁĘDY:
# - csv.Error (zepsuty rekord) → rekord pominięty, próba trwa dalej,
# - koniec strumienia → normalne zakończenie próby,
# - każdy inny wyjątek (odczyt źródła) → przerywa całe probe() bez wyniku.
# ==============================================================================

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, List, Optional

from .models import CandidateProbability, ProbeConfig, ProbeResult, default_config
from .replay import Source, StreamReplay
from .stats import summarize
from .utils.delims import show_delimiter

log = logging.getLogger("csvprober.prober")


@dataclass
class TrialOutcome:
    delimiter: str
    counts: List[int] = field(default_factory=list)
    consumed: int = 0   # rekordy przeczytane (także pominięte jako zepsute)
    skipped: int = 0


def run_trial(
    stream: BinaryIO,
    delimiter: str,
    max_records: int,
    *,
    encoding: str = "utf-8-sig",
) -> TrialOutcome:
    """
    Jedna próba: parsuje `stream` z separatorem `delimiter`, maks. `max_records` rekordów.
    Parser jest pobłażliwy (strict=False): zmienna liczba pól, „luźne” cudzysłowy.
    Puste linie nie są rekordami.
    """
    out = TrialOutcome(delimiter=delimiter)
    with io.TextIOWrapper(
        io.BufferedReader(stream), encoding=encoding, errors="replace", newline=""
    ) as text:
        reader = csv.reader(text, delimiter=delimiter, strict=False)
        while out.consumed < max_records:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                out.consumed += 1
                out.skipped += 1
                log.debug("trial[%s]: pominięty rekord %d: %s",
                          show_delimiter(delimiter), reader.line_num, e)
                continue
            if not row:
                continue
            out.consumed += 1
            out.counts.append(len(row))
    return out


def rank(candidates: Iterable[CandidateProbability]) -> List[CandidateProbability]:
    # sortowanie stabilne: remisy zostają w kolejności z konfiguracji
    return sorted(candidates, key=lambda c: c.cv)


class Prober:
    def __init__(self, config: Optional[ProbeConfig] = None):
        self.config = config if config is not None else default_config()

    def probe(self, source: Source) -> ProbeResult:
        """
        Sprawdza wszystkich kandydatów na tym samym strumieniu i zwraca ranking.

        ActualLines: największa liczba rekordów przeczytana w pojedynczej próbie;
        może być mniejsza niż records_to_probe, gdy danych jest po prostu mniej.
        Gdy Min == Max i parsed_records == actual_lines, dane są idealnie
        ustrukturyzowane (ProbeResult.is_perfect).
        """
        cfg = self.config
        replay = StreamReplay(source)
        found: List[CandidateProbability] = []
        actual_lines = 0

        for delim in cfg.delimiters:
            trial = run_trial(
                replay.open_pass(), delim, cfg.records_to_probe, encoding=cfg.encoding
            )
            actual_lines = max(actual_lines, trial.consumed)
            log.debug(
                "trial[%s]: sparsowano=%d pominięto=%d przeczytano=%d",
                show_delimiter(delim), len(trial.counts), trial.skipped, trial.consumed,
            )
            if not trial.counts:
                continue
            found.append(CandidateProbability(
                delimiter=delim,
                parsed_records=len(trial.counts),
                summary=summarize(trial.counts),
                skipped_records=trial.skipped,
            ))

        ranked = rank(found)
        log.info(
            "probe: kandydaci=%d/%d, rekordy=%d, bajty=%d",
            len(ranked), len(cfg.delimiters), actual_lines, replay.captured_size,
        )
        return ProbeResult(candidates=tuple(ranked), actual_lines=actual_lines)


def new_prober(**overrides) -> Prober:
    """Prober z domyślną konfiguracją (cfg.settings) i ewentualnymi nadpisaniami pól."""
    base = default_config()
    if not overrides:
        return Prober(base)
    return Prober(ProbeConfig(**{**base.model_dump(), **overrides}))


def probe(source: Source, config: Optional[ProbeConfig] = None) -> ProbeResult:
    return Prober(config).probe(source)
