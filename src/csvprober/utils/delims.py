from __future__ import annotations

# sekwencje ucieczki dopuszczalne w PROBE_DELIMITERS / --delimiters
_ESCAPES = {"t": "\t", "s": " ", "\\": "\\"}

# znaki, których czytnik CSV nie przyjmie jako separatora
FORBIDDEN = frozenset({'"', "\r", "\n", "\ufffd"})


def parse_delimiters(text: str) -> tuple[str, ...]:
    """
    Zamienia zapis tekstowy listy kandydatów na krotkę znaków.
    Każdy znak to osobny kandydat, np. ",;#|" → (",", ";", "#", "|").
    Obsługiwane ucieczki: \\t (tab), \\s (spacja), \\\\ (backslash).
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                raise ValueError(f"niedokończona sekwencja ucieczki w {text!r}")
            nxt = text[i + 1]
            if nxt not in _ESCAPES:
                raise ValueError(f"nieznana sekwencja ucieczki \\{nxt} w {text!r}")
            out.append(_ESCAPES[nxt])
            i += 2
            continue
        out.append(ch)
        i += 1
    return tuple(out)


def is_valid_delimiter(ch: str) -> bool:
    return len(ch) == 1 and ch not in FORBIDDEN


def show_delimiter(ch: str) -> str:
    """Czytelna postać separatora do logów (tab/spacja nie znikają)."""
    if ch == "\t":
        return "\\t"
    if ch == " ":
        return "\\s"
    return ch
