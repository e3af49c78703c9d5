import datetime
import time
from dataclasses import dataclass

VISIBLE_EVENTS = 3


@dataclass(frozen=True)
class Event:
    id: int
    date: datetime.date
    title: str


def to_day(value: datetime.date) -> datetime.date:
    # datetime は date のサブクラスなので時刻を落とす
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


class EventStore:
    """
    イベントをメモリ上に追加順で保持する. 削除・更新はしない
    """

    def __init__(self):
        self._events: list[Event] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    def next_id(self) -> int:
        # 作成時刻 (ミリ秒) を ID にする. 同じミリ秒なら +1 して重複させない
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def add(self, event: Event) -> None:
        self._events.append(event)

    def events_on(self, day: datetime.date) -> list[Event]:
        day = to_day(day)
        return [e for e in self._events if to_day(e.date) == day]


def first_n(events: list[Event], n: int = VISIBLE_EVENTS) -> tuple[list[Event], int]:
    """
    表示するのは先頭 n 件だけ. 残りは件数 (+N more) として返す
    """
    return events[:n], max(0, len(events) - n)
