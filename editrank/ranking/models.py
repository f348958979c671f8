"""Data models for ranking results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


@dataclass
class RankedRecord:
    distance: int
    line: str
    index: int
    score: Optional[float] = None

    @property
    def display_value(self) -> Union[int, float]:
        return self.distance if self.score is None else self.score


@dataclass
class Ranking:
    records: List[RankedRecord] = field(default_factory=list)
    min_distance: Optional[int] = None
    max_distance: Optional[int] = None
    scaled: bool = False

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[RankedRecord]:
        return iter(self.records)
