# tests/test_prober.py
# Testuje próby separatorów i ranking kandydatów (prober.Prober / probe).
import csv
import io

import pytest

from csvprober.models import ProbeConfig
from csvprober.prober import Prober, new_prober, probe, run_trial


def _cfg(*delims, records=200):
    return ProbeConfig(records_to_probe=records, delimiters=delims)


@pytest.fixture
def small_field_limit():
    old = csv.field_size_limit(16)
    try:
        yield 16
    finally:
        csv.field_size_limit(old)


def test_uniform_comma_data_ranks_comma_first():
    data = ("a,b,c,d\n" * 50).encode("utf-8")
    res = probe(data, _cfg(",", ";"))

    assert [c.delimiter for c in res.candidates] == [",", ";"]
    best = res.best
    s = best.summary
    assert (s.min, s.max, s.mean, s.stddev) == (4, 4, 4.0, 0.0)
    assert best.parsed_records == 50
    assert best.cv == 0.0
    assert res.actual_lines == 50
    assert res.is_perfect


def test_lower_variation_wins():
    data = b"1,2,a;b\n3,4,c\n5,6,d;e;f\n7,8,g\n"
    res = probe(data, _cfg(";", ","))

    assert res.best.delimiter == ","
    semi = res.candidates[1]
    assert semi.delimiter == ";"
    assert (semi.summary.min, semi.summary.max) == (1, 3)
    assert semi.cv > 0


def test_absent_delimiter_is_still_ranked():
    data = b"a,b\nc,d\ne,f\n"
    res = probe(data, _cfg("|", ","))

    # oba cv == 0 → remis zostaje w kolejności konfiguracji
    assert [c.delimiter for c in res.candidates] == ["|", ","]
    pipe = res.candidates[0]
    assert pipe.summary.min == pipe.summary.max == 1
    assert pipe.summary.stddev == 0.0


def test_empty_input_gives_empty_result():
    res = probe(b"", _cfg(",", ";", "#", "|"))
    assert res.candidates == ()
    assert res.actual_lines == 0
    assert res.best is None
    assert not res.is_perfect


def test_short_input_reports_actual_lines():
    data = b"".join(b"%d,x,y\n" % i for i in range(5))
    res = probe(data, _cfg(",", ";", records=200))
    assert res.actual_lines == 5
    assert all(c.parsed_records == 5 for c in res.candidates)


def test_budget_caps_records():
    data = b"".join(b"%d,x\n" % i for i in range(50))
    res = probe(data, _cfg(",", ";", records=10))
    assert res.actual_lines == 10
    assert [c.parsed_records for c in res.candidates] == [10, 10]


def test_blank_lines_are_not_records():
    res = probe(b"a,b\n\n\r\nc,d\n\n", _cfg(","))
    assert res.actual_lines == 2
    assert res.best.summary.min == 2


def test_lenient_quotes_do_not_abort_trial():
    data = b'a,"b,c",d\ne,f"g,h\n"i,j\n'
    res = probe(data, _cfg(","))
    assert res.best.parsed_records >= 1


def test_malformed_record_is_skipped(small_field_limit):
    data = b"a,b\n" + b"x" * 40 + b",c\n" + b"d,e\n"
    out = run_trial(io.BytesIO(data), ",", 200)
    assert out.counts == [2, 2]
    assert out.skipped == 1
    assert out.consumed == 3

    res = probe(data, _cfg(","))
    assert res.actual_lines == 3
    assert res.best.parsed_records == 2
    assert res.best.skipped_records == 1


def test_all_records_malformed_drops_candidate(small_field_limit):
    data = (b"y" * 40 + b"\n") * 3
    res = probe(data, _cfg(",", ";"))
    assert res.candidates == ()
    assert res.actual_lines == 3


class _Broken(io.RawIOBase):
    def __init__(self, ok: bytes = b""):
        super().__init__()
        self._ok = ok

    def readable(self):
        return True

    def readinto(self, b):
        if self._ok:
            n = min(len(b), len(self._ok))
            b[:n] = self._ok[:n]
            self._ok = self._ok[n:]
            return n
        raise OSError("odczyt źródła nie powiódł się")


def test_source_io_error_aborts_probe():
    with pytest.raises(OSError):
        probe(_Broken(), _cfg(",", ";"))


def test_io_error_after_some_data_aborts_probe():
    with pytest.raises(OSError):
        probe(_Broken(b"a,b\nc,d\n"), _cfg(",", ";"))


def test_duplicate_delimiters_are_allowed():
    res = probe(b"a;b\nc;d\n", _cfg(";", ";"))
    assert [c.delimiter for c in res.candidates] == [";", ";"]


def test_tab_delimiter():
    data = b"a\tb\tc\nd\te\tf\n1,2\t3\t4\n"
    res = probe(data, _cfg(",", "\t"))
    assert res.best.delimiter == "\t"
    assert res.best.summary.max == 3


def test_new_prober_overrides_defaults():
    p = new_prober(records_to_probe=5, delimiters=[";"])
    assert isinstance(p, Prober)
    assert p.config.records_to_probe == 5
    assert p.config.delimiters == (";",)


def test_default_prober_uses_factory_defaults():
    p = Prober()
    assert p.config.records_to_probe == 200
    assert p.config.delimiters == (",", ";", "#", "|")


def test_undecodable_bytes_are_replaced():
    data = b"\xff\xfe,a,b\n\xc3(,c,d\n"
    res = probe(data, _cfg(",", ";"))
    assert res.best.delimiter == ","
    assert res.best.summary.min == 3
    assert res.actual_lines == 2


def test_utf8_bom_is_accepted():
    data = b"\xef\xbb\xbfa;b;c\nd;e;f\n"
    res = probe(data, _cfg(",", ";"))
    semi = [c for c in res.candidates if c.delimiter == ";"][0]
    assert (semi.summary.min, semi.summary.max) == (3, 3)
    assert semi.parsed_records == res.actual_lines == 2


def test_non_default_encoding():
    data = "a§b§c\nd§e§f\n".encode("latin-1")

    res = probe(data, ProbeConfig(delimiters=("§", ","), encoding="latin-1"))
    assert res.best.delimiter == "§"
    assert res.best.summary.min == 3

    # w UTF-8 bajt 0xA7 to nie „§”, więc separator nie występuje
    res = probe(data, ProbeConfig(delimiters=("§", ",")))
    assert all(c.summary.max == 1 for c in res.candidates)


def test_not_perfect_when_field_counts_vary():
    res = probe(b"a,b\nc,d,e\n", _cfg(","))
    assert not res.best.is_uniform
    assert not res.is_perfect


def test_not_perfect_when_records_were_skipped(small_field_limit):
    data = b"a,b\n" + b"x" * 40 + b",c\n" + b"d,e\n"
    res = probe(data, _cfg(","))
    assert res.best.is_uniform
    assert res.best.parsed_records < res.actual_lines
    assert not res.is_perfect
