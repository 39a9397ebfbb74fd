from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from csvprober.cfg import settings
from csvprober.log import log
from csvprober.models import ProbeConfig
from csvprober.prober import Prober
from csvprober.report import format_lines, to_frame
from csvprober.utils.delims import parse_delimiters
from csvprober.utils.timing import timer


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="csvprober",
        description="Wykrywa najbardziej prawdopodobny separator danych CSV czytanych ze STDIN.",
    )
    ap.add_argument("--records", type=int, default=settings.PROBE_RECORDS,
                    help="ile rekordów sprawdzić na jeden separator (domyślnie %(default)s)")
    ap.add_argument("--delimiters", default=settings.PROBE_DELIMITERS,
                    help="kandydaci jako ciąg znaków, np. ',;\\t' (domyślnie %(default)r)")
    ap.add_argument("--encoding", default=settings.PROBE_ENCODING,
                    help="kodowanie wejścia (domyślnie %(default)s)")
    ap.add_argument("--table", action="store_true",
                    help="pełna tabela statystyk (pandas) zamiast linii na kandydata")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        config = ProbeConfig(
            records_to_probe=args.records,
            delimiters=parse_delimiters(args.delimiters),
            encoding=args.encoding,
        )
        with timer("probe: stdin", log):
            result = Prober(config).probe(sys.stdin.buffer)
    except Exception as e:
        log.error("probe: błąd krytyczny: %s", e)
        sys.exit(1)

    if not result.candidates:
        log.warning("probe: brak prawdopodobnego separatora (rekordy=%d)", result.actual_lines)
        return

    if args.table:
        print(to_frame(result).to_string())
    else:
        for line in format_lines(result):
            print(line)

    if result.is_perfect:
        log.info("probe: dane idealnie ustrukturyzowane (%d rekordów)", result.actual_lines)


if __name__ == "__main__":
    main()
