"""
Common-code index.

Groups characters and two-character words by the short composite code they
occupy, highest weight first. The first entry of a bucket is the incumbent
that owns the code by frequency.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from moran_abbrev.services.inference import CodeInferenceService
from moran_abbrev.types import Entry, PhoneticCode


def composite_codes(codes: list[PhoneticCode]) -> list[str]:
    """Composite keys registered for a code sequence; empty for anything but one or two codes."""
    if len(codes) == 1:
        (a,) = codes
        # initial+final, and initial+final+head
        return [a.initial + a.final, a.initial + a.final + a.head]
    if len(codes) == 2:
        a, b = codes
        return [a.initial + a.final + b.final + b.initial]
    return []


@dataclass(frozen=True)
class CommonCodeIndex:
    """Composite code -> entries sharing it, by descending weight."""

    buckets: MappingProxyType

    def __contains__(self, code: str) -> bool:
        return code in self.buckets

    def __len__(self) -> int:
        return len(self.buckets)

    def get(self, code: str) -> tuple[Entry, ...]:
        return self.buckets.get(code, ())

    def incumbent(self, code: str) -> Entry | None:
        """Highest-weight entry occupying ``code``, if any."""
        bucket = self.buckets.get(code)
        return bucket[0] if bucket else None


class CommonCodeIndexService:
    """Build the common-code index from character and word entries."""

    def __init__(self, inference: CodeInferenceService):
        self._inference = inference

    def build(self, entries: Iterable[Entry]) -> CommonCodeIndex:
        buckets: dict[str, list[Entry]] = {}
        for entry in entries:
            codes = self._inference.infer(entry.text)
            if codes is None:
                continue
            for key in composite_codes(codes):
                buckets.setdefault(key, []).append(entry)

        # Stable: equal weights keep registration order
        return CommonCodeIndex(
            buckets=MappingProxyType(
                {key: tuple(sorted(bucket, key=lambda e: e.weight, reverse=True)) for key, bucket in buckets.items()},
            ),
        )
