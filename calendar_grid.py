import calendar
import datetime
from dataclasses import dataclass

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class CalendarMonth:
    """
    表示中の月. month は 0 始まり (0 = 1 月, 11 = 12 月)
    """
    year: int
    month: int

    @property
    def number(self) -> int:
        return self.month + 1

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.number]} {self.year}"


@dataclass(frozen=True)
class GridCell:
    # date が None なら 1 日より前の空白セル
    date: datetime.date | None = None

    @property
    def is_blank(self) -> bool:
        return self.date is None


def month_of(day: datetime.date) -> CalendarMonth:
    return CalendarMonth(day.year, day.month - 1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """
    1 日の曜日. 0 = 日曜 ... 6 = 土曜
    calendar.weekday は 0 = 月曜なのでずらす
    """
    return (calendar.weekday(year, month + 1, 1) + 1) % 7


def compute_grid(year: int, month: int) -> list[GridCell]:
    # 1 日の曜日の数だけ空白を置いて, あとは 1 日から月末まで. 後ろは埋めない
    blanks = [GridCell()] * first_weekday(year, month)
    days = [
        GridCell(datetime.date(year, month + 1, d))
        for d in range(1, days_in_month(year, month) + 1)
    ]
    return blanks + days


def weeks(cells: list[GridCell]) -> list[list[GridCell]]:
    # 最終週は 7 未満のままにする
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def next_month(current: CalendarMonth) -> CalendarMonth:
    if current.month == 11:
        return CalendarMonth(current.year + 1, 0)
    return CalendarMonth(current.year, current.month + 1)


def prev_month(current: CalendarMonth) -> CalendarMonth:
    if current.month == 0:
        return CalendarMonth(current.year - 1, 11)
    return CalendarMonth(current.year, current.month - 1)
