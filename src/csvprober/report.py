# report.py — formatowanie wyniku probe() dla CLI
from __future__ import annotations

from typing import List

import pandas as pd

from .models import ProbeResult
from .utils.delims import show_delimiter

COLUMNS = ["delimiter", "parsed", "skipped", "min", "lq", "median", "uq", "max", "mean", "stddev", "cv"]


def format_lines(result: ProbeResult) -> List[str]:
    """Jedna linia na kandydata, najbardziej prawdopodobny pierwszy."""
    return [
        "Delimiter: %s Min: %d, Mean: %f, Max: %d, Stddev: %f"
        % (c.delimiter, c.summary.min, c.summary.mean, c.summary.max, c.summary.stddev)
        for c in result.candidates
    ]


def to_frame(result: ProbeResult) -> pd.DataFrame:
    rows = []
    for c in result.candidates:
        s = c.summary
        rows.append({
            "delimiter": show_delimiter(c.delimiter),
            "parsed": c.parsed_records,
            "skipped": c.skipped_records,
            "min": s.min,
            "lq": s.lq,
            "median": s.median,
            "uq": s.uq,
            "max": s.max,
            "mean": s.mean,
            "stddev": s.stddev,
            "cv": c.cv,
        })
    df = pd.DataFrame(rows, columns=COLUMNS)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1, name="rank")
    return df
