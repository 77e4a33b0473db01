"""Cast index aggregated across many transcripts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from strip_transcript.models.transcript import Transcript


@dataclass(frozen=True)
class Cast:
    """Distinct character names, split by the uncommon marker.

    Attributes:
        common: Names used without ``~``, sorted.
        uncommon: Names used with ``~``, sorted.
    """

    common: tuple[str, ...] = ()
    uncommon: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.common) + len(self.uncommon)


def build_cast(transcripts: Iterable[Transcript]) -> Cast:
    """Collect every speaking character from *transcripts*.

    Duplicate ``(name, uncommon)`` pairs are dropped.  A name marked
    inconsistently across transcripts shows up in both lists.
    """
    seen: dict[tuple[str, bool], None] = {}
    for transcript in transcripts:
        for entry in transcript.names():
            seen.setdefault(entry, None)

    common = sorted(name for name, uncommon in seen if not uncommon)
    uncommon = sorted(name for name, uncommon in seen if uncommon)
    return Cast(common=tuple(common), uncommon=tuple(uncommon))
