import datetime
from dataclasses import dataclass

import calendar_grid
from calendar_grid import CalendarMonth, GridCell
from event_store import VISIBLE_EVENTS, Event, EventStore, first_n, to_day


@dataclass
class CalendarState:
    current: CalendarMonth
    selected_date: datetime.date | None = None
    modal_open: bool = False
    # フォームの入力途中の値
    title_input: str = ""


class CalendarController:
    """
    表示中の月とモーダルの状態を持ち, ユーザ操作をグリッド計算とイベントストアにつなぐ

    today を渡さなければ起動時の日付を使う. 遷移はすべて同期的に完了する
    """

    def __init__(self, today: datetime.date | None = None,
                 store: EventStore | None = None,
                 visible_events: int = VISIBLE_EVENTS):
        self.today = to_day(today) if today else datetime.date.today()
        self.store = store if store is not None else EventStore()
        self.visible_events = visible_events
        self.state = CalendarState(current=calendar_grid.month_of(self.today))

    @property
    def current(self) -> CalendarMonth:
        return self.state.current

    @property
    def modal_open(self) -> bool:
        return self.state.modal_open

    @property
    def selected_date(self) -> datetime.date | None:
        return self.state.selected_date

    # 月の移動. モーダルの状態には触らない

    def prev_month(self) -> CalendarMonth:
        self.state.current = calendar_grid.prev_month(self.state.current)
        return self.state.current

    def next_month(self) -> CalendarMonth:
        self.state.current = calendar_grid.next_month(self.state.current)
        return self.state.current

    def day_clicked(self, day: datetime.date) -> None:
        self.state.selected_date = to_day(day)
        self.state.modal_open = True

    def type_title(self, value: str) -> None:
        # フォームに入力中の値. 送信に成功したら消す
        self.state.title_input = value

    def submit_event(self, title: str) -> Event | None:
        """
        空白だけのタイトルは何もしないで None を返す (エラーにはしない)
        長さの上限は入力側で切っているのでここでは見ない
        """
        title = title.strip()
        if not title:
            return None
        if not self.state.modal_open or self.state.selected_date is None:
            return None

        event = Event(
            id=self.store.next_id(),
            date=self.state.selected_date,
            title=title,
        )
        self.store.add(event)
        self.state.modal_open = False
        self.state.title_input = ""
        return event

    def cancel(self) -> None:
        # selected_date は消さない
        self.state.modal_open = False

    close_modal = cancel

    # 描画用

    def cells(self) -> list[GridCell]:
        return calendar_grid.compute_grid(self.current.year, self.current.month)

    def day_events(self, day: datetime.date) -> tuple[list[Event], int]:
        return first_n(self.store.events_on(day), self.visible_events)

    def is_today(self, day: datetime.date | None) -> bool:
        return day is not None and to_day(day) == self.today
