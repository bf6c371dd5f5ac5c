"""
Persistent multi-process helpers for abbreviation derivation.

This module provides a cross-platform process pool that keeps worker processes
alive across multiple calls. Each worker holds one copy of the character code
table and derives abbreviations for contiguous chunks of words. Chunks come
back in input order and are merged sequentially, so the result matches the
in-process path exactly.
"""

from __future__ import annotations

import pickle
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from multiprocessing import get_all_start_methods, get_context
from typing import TYPE_CHECKING

from moran_abbrev.services.diagnostics import CollectingDiagnostics
from moran_abbrev.types import AbbreviationConfig, Entry, PhoneticCode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from moran_abbrev.services.diagnostics import DiagnosticsSink
    from moran_abbrev.services.inference import CodeInferenceService


_WORKER_INFERENCE: CodeInferenceService | None = None
_WORKER_CONFIG: AbbreviationConfig | None = None
_WORKER_DIAGNOSTICS: CollectingDiagnostics | None = None


def _init_worker(char_codes: dict[str, PhoneticCode], config: AbbreviationConfig) -> None:
    """Initialize one inference service per worker process."""
    from moran_abbrev.services.cache import PinyinCacheService
    from moran_abbrev.services.inference import CodeInferenceService

    global _WORKER_INFERENCE, _WORKER_CONFIG, _WORKER_DIAGNOSTICS
    _WORKER_DIAGNOSTICS = CollectingDiagnostics()
    _WORKER_CONFIG = config
    _WORKER_INFERENCE = CodeInferenceService(char_codes, _WORKER_DIAGNOSTICS, PinyinCacheService(config))


def _derive_chunk(words: list[Entry]) -> tuple[list[tuple[str, Entry]], CollectingDiagnostics]:
    """Derive one chunk inside a worker process; diagnostics travel back with the result."""
    from moran_abbrev.services.abbreviation import derive_abbreviations

    if _WORKER_INFERENCE is None:
        raise RuntimeError("process pool worker is not initialized")
    _WORKER_DIAGNOSTICS.clear()
    pairs = derive_abbreviations(words, _WORKER_INFERENCE, _WORKER_CONFIG)
    return pairs, CollectingDiagnostics(_WORKER_DIAGNOSTICS.messages)


def _chunk_words(words: list[Entry], chunk_size: int) -> list[list[Entry]]:
    """Split a word list into contiguous chunks."""
    return [words[index : index + chunk_size] for index in range(0, len(words), chunk_size)]


class PersistentAbbreviationPool:
    """
    Persistent cross-platform process pool for abbreviation derivation.

    Notes:
    - Uses `spawn` by default for consistent behavior across Windows/macOS/Linux.
    - Keep this pool alive across multiple calls to avoid repeated process start-up.
    """

    def __init__(
        self,
        char_codes: Mapping[str, PhoneticCode],
        *,
        config: AbbreviationConfig | None = None,
        max_workers: int | None = None,
        chunk_size: int | None = None,
        mp_start_method: str = "spawn",
    ) -> None:
        self._config = config or AbbreviationConfig.create_default()
        max_workers = max_workers if max_workers is not None else self._config.max_workers
        chunk_size = chunk_size if chunk_size is not None else self._config.chunk_size
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")

        self._chunk_size = chunk_size
        self._closed = False
        self._char_codes = dict(char_codes)

        self._validate_picklable_state()

        try:
            mp_context = get_context(mp_start_method)
        except ValueError as exc:
            available = ", ".join(get_all_start_methods())
            raise ValueError(
                f"unsupported multiprocessing start method '{mp_start_method}'. Available methods: {available}",
            ) from exc

        self._executor = ProcessPoolExecutor(
            max_workers=max_workers,
            mp_context=mp_context,
            initializer=_init_worker,
            initargs=(self._char_codes, self._config),
        )

    def _validate_picklable_state(self) -> None:
        """Validate the code table and config can be sent to worker processes."""
        try:
            pickle.dumps((self._char_codes, self._config))
        except (pickle.PicklingError, AttributeError, TypeError) as exc:
            raise ValueError(
                "character code table/config are not picklable; cannot initialize multiprocessing workers",
            ) from exc

    @property
    def chunk_size(self) -> int:
        """Chunk size used for worker IPC batching."""
        return self._chunk_size

    @property
    def closed(self) -> bool:
        """Whether the underlying executor has been shut down."""
        return self._closed

    def derive(self, words: list[Entry], diagnostics: DiagnosticsSink | None = None) -> list[tuple[str, Entry]]:
        """
        Gate and infer abbreviations in parallel using persistent worker processes.

        The output list preserves the exact input order. Worker diagnostics are
        replayed into ``diagnostics`` in the same order.
        """
        if self._closed:
            raise RuntimeError("process pool is closed")
        if not words:
            return []

        chunks = _chunk_words(words, self._chunk_size)
        results: list[tuple[str, Entry]] = []
        try:
            for pairs, buffered in self._executor.map(_derive_chunk, chunks, chunksize=1):
                results.extend(pairs)
                if diagnostics is not None:
                    buffered.replay(diagnostics)
        except BrokenProcessPool as exc:
            message = (
                "failed to initialize process workers. On Windows/macOS, call this API "
                "from a module guarded by `if __name__ == '__main__':`."
            )
            raise RuntimeError(message) from exc
        return results

    def close(self) -> None:
        """Shutdown worker processes and release resources."""
        if self._closed:
            return
        self._executor.shutdown(wait=True, cancel_futures=False)
        self._closed = True

    def __enter__(self) -> PersistentAbbreviationPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
