"""Chunked file hashing with progress reporting and cancellation."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from os import PathLike

from .tools import Algorithm

CHUNK_SIZE = 1048576  # file read buffer size


class ShaCalculator:
    """Computes hex digests of files, reading them in chunks."""

    def __init__(
        self,
        algo: Algorithm = Algorithm.SHA256,
        *,
        is_canceled: Callable[[], bool] | None = None,
        on_chunk: Callable[[int], None] | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self.algo = algo
        self.is_canceled = is_canceled
        self.on_chunk = on_chunk
        self.chunk_size = chunk_size

    def _canceled(self) -> bool:
        return self.is_canceled is not None and self.is_canceled()

    def calculate(self, file_path: str | PathLike[str], algo: Algorithm | None = None) -> str | None:
        """Hex digest of the file, or None if the work was canceled.

        ``on_chunk`` is called with the size of every chunk read.
        """
        algorithm = self.algo if algo is None else algo
        hasher = hashlib.new(algorithm.hashlib_name)

        with open(file_path, "rb") as file:
            while not self._canceled():
                chunk = file.read(self.chunk_size)
                if not chunk:
                    return hasher.hexdigest()
                hasher.update(chunk)
                if self.on_chunk is not None:
                    self.on_chunk(len(chunk))

        return None