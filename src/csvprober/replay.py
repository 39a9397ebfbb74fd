"""
replay — wielokrotne odtwarzanie strumienia, który da się czytać tylko raz.

Każdy bajt przeczytany ze źródła trafia od razu (w tym samym wywołaniu read)
do bufora przechwytywania. Kolejne przebiegi (`open_pass`) czytają najpierw
z bufora, a gdy ten się skończy, dalej ze źródła, z tym samym dopisywaniem.
Dzięki temu żaden bajt nie ginie ani się nie dubluje, niezależnie od tego,
w którym miejscu poprzedni przebieg się zatrzymał.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Union

log = logging.getLogger("csvprober.replay")

CHUNK = 64 * 1024

Source = Union[BinaryIO, bytes, bytearray]


class StreamReplay:
    def __init__(self, source: Source):
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._captured = bytearray()
        self._exhausted = False
        self.passes = 0

    @property
    def captured(self) -> bytes:
        return bytes(self._captured)

    @property
    def captured_size(self) -> int:
        return len(self._captured)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def read_at(self, offset: int, size: int) -> bytes:
        """
        Zwraca do `size` bajtów od pozycji `offset` strumienia logicznego.
        Poza buforem → odczyt ze źródła i natychmiastowe dopisanie (tee).
        b"" oznacza koniec strumienia.
        """
        if offset < len(self._captured):
            return bytes(self._captured[offset:offset + size])
        if self._exhausted:
            return b""
        chunk = self._source.read(size)
        if not chunk:
            self._exhausted = True
            log.debug("replay: źródło wyczerpane po %d B", len(self._captured))
            return b""
        self._captured.extend(chunk)
        return bytes(chunk)

    def open_pass(self) -> "ReplayPass":
        self.passes += 1
        return ReplayPass(self)

    def drain(self) -> bytes:
        """Doczytuje źródło do końca i zwraca cały strumień logiczny."""
        while self.read_at(len(self._captured), CHUNK):
            pass
        return self.captured


class ReplayPass(io.RawIOBase):
    """Niezależny kursor po strumieniu logicznym `StreamReplay` (tylko do odczytu)."""

    def __init__(self, replay: StreamReplay):
        super().__init__()
        self._replay = replay
        self._pos = 0

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        data = self._replay.read_at(self._pos, len(b))
        n = len(data)
        b[:n] = data
        self._pos += n
        return n

    def tell(self) -> int:
        return self._pos
