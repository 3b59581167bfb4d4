"""
どこで: `engine.timeline` の区間抽出アダプタ。
何を: アニメーションエンジンのタイムライン要素（offset/delay/duration）を `Interval` 列へ変換する。
      併せて、スタッガー付きの段を積み上げるだけの `TimelineBuilder` を提供する。
なぜ: 行詰め（`pack_rows`）に入る区間の経路をこのモジュールだけに限定し、
      エンジン内部（連結リストや非公開フィールド）を上位へ漏らさないため。

契約:
- `extract_intervals(source)` は有限・一度きり（再走査しない）の列を受け取り、
  ソース順の `tuple[Interval, ...]` を返す。
- 区間は `start = offset + delay`, `end = start + duration`。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, runtime_checkable

from util.utils import config_section

from .intervals import Interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineSegment:
    """タイムライン上の 1 要素（エンジンが記録する配置情報）。"""

    offset: float
    delay: float
    duration: float

    @property
    def start(self) -> float:
        return self.offset + self.delay

    @property
    def end(self) -> float:
        return self.offset + self.delay + self.duration

    def to_interval(self) -> Interval:
        return Interval(self.start, self.end)


@runtime_checkable
class SegmentSource(Protocol):
    """タイムライン要素を順に列挙できるもの（エンジン側アダプタが実装する）。"""

    def iter_segments(self) -> Iterator[TimelineSegment]:
        ...


def extract_intervals(
    source: SegmentSource | Iterable[TimelineSegment],
) -> tuple[Interval, ...]:
    """ソースから区間列を取り出す（ソース順）。

    `SegmentSource` でも、`TimelineSegment` の任意の反復可能オブジェクトでもよい。
    """
    if isinstance(source, SegmentSource):
        segments: Iterable[TimelineSegment] = source.iter_segments()
    else:
        segments = source
    intervals = tuple(seg.to_interval() for seg in segments)
    logger.debug("extracted %d intervals", len(intervals))
    return intervals


class TimelineBuilder:
    """スタッガー付きの段を末尾へ積むタイムライン記述。

    - `add(count, ...)` は現在の終端 `end` を offset として `count` 個の要素を追加する。
    - i 番目の要素の delay は `delay + i * stagger`。
    - 負の delay で前段に食い込ませられるが、開始時刻は 0 未満にならない。
    - `default_duration` 省略時は構成 `timeline.default_duration`（無ければ 800ms）。

    Examples
    --------
    >>> tl = TimelineBuilder(default_duration=300)
    >>> _ = tl.add(3, stagger=100).add(3, stagger=100)
    >>> tl.end
    1000.0
    """

    def __init__(self, *, default_duration: float | None = None) -> None:
        if default_duration is None:
            default_duration = config_section("timeline").get("default_duration", 800.0)
        self._default_duration = float(default_duration)
        self._segments: list[TimelineSegment] = []

    @property
    def end(self) -> float:
        return max((seg.end for seg in self._segments), default=0.0)

    @property
    def segments(self) -> tuple[TimelineSegment, ...]:
        return tuple(self._segments)

    def add(
        self,
        count: int = 1,
        *,
        duration: float | None = None,
        delay: float = 0.0,
        stagger: float = 0.0,
    ) -> "TimelineBuilder":
        if count < 0:
            raise ValueError(f"count は 0 以上である必要があります: {count}")
        dur = self._default_duration if duration is None else float(duration)
        if dur < 0:
            raise ValueError(f"duration は 0 以上である必要があります: {dur}")
        offset = self.end
        for i in range(count):
            d = float(delay) + i * float(stagger)
            if offset + d < 0:
                d = -offset
            self._segments.append(TimelineSegment(offset, d, dur))
        return self

    def iter_segments(self) -> Iterator[TimelineSegment]:
        return iter(tuple(self._segments))


__all__ = [
    "TimelineSegment",
    "SegmentSource",
    "extract_intervals",
    "TimelineBuilder",
]
