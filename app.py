import os
import threading
from dotenv import load_dotenv

from datetime import datetime, date

from flask import Flask, render_template, redirect, url_for, request, abort

from zoneinfo import ZoneInfo

from calendar_grid import WEEKDAY_NAMES, weeks
from controller import CalendarController

load_dotenv()

app = Flask(__name__)
app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev")
app.config["CALENDAR_TIMEZONE"] = os.getenv("CALENDAR_TIMEZONE")
app.config["CALENDAR_TITLE_MAX_LENGTH"] = int(os.getenv("CALENDAR_TITLE_MAX_LENGTH", "30"))
app.config["CALENDAR_VISIBLE_EVENTS"] = int(os.getenv("CALENDAR_VISIBLE_EVENTS", "3"))

# flask run はデフォルトでスレッドを使うので, コントローラへの操作は 1 リクエストずつ
calendar_lock = threading.Lock()


def local_today() -> date:
    """
    CALENDAR_TIMEZONE があればそのタイムゾーンの今日, なければマシンの今日
    """
    tz_name = app.config.get("CALENDAR_TIMEZONE")
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()


def clean_title(raw: str) -> str:
    # input の maxlength と同じだけ切る. 中身には手を加えない (表示時は Jinja がエスケープする)
    return raw[:app.config["CALENDAR_TITLE_MAX_LENGTH"]]


def init_calendar(today: date | None = None) -> CalendarController:
    controller = CalendarController(
        today=today or local_today(),
        visible_events=app.config["CALENDAR_VISIBLE_EVENTS"],
    )
    app.extensions["calendar"] = controller
    return controller


def get_calendar() -> CalendarController:
    controller = app.extensions.get("calendar")
    if controller is None:
        controller = init_calendar()
    return controller


@app.route("/")
def index():
    with calendar_lock:
        cal = get_calendar()
        return render_template(
            "index.html",
            cal=cal,
            month=cal.current,
            weekday_names=WEEKDAY_NAMES,
            weeks=weeks(cal.cells()),
            title_max_length=app.config["CALENDAR_TITLE_MAX_LENGTH"],
        )


@app.route("/prev", methods=["POST"])
def prev_month():
    with calendar_lock:
        current = get_calendar().prev_month()
    app.logger.debug("month -> %s", current.label)
    return redirect(url_for("index"))


@app.route("/next", methods=["POST"])
def next_month():
    with calendar_lock:
        current = get_calendar().next_month()
    app.logger.debug("month -> %s", current.label)
    return redirect(url_for("index"))


# 日付クリックでモーダルを開く

@app.route("/day/<date_str>", methods=["POST"])
def day_clicked(date_str: str):
    try:
        target_date = date.fromisoformat(date_str)
    except ValueError:
        abort(404)

    with calendar_lock:
        get_calendar().day_clicked(target_date)
    app.logger.debug("selected %s", target_date.isoformat())
    return redirect(url_for("index"))


@app.route("/events", methods=["POST"])
def add_event():
    title = clean_title(request.form.get("title", ""))
    with calendar_lock:
        cal = get_calendar()
        cal.type_title(title)
        event = cal.submit_event(title)
    if event is None:
        # 空タイトルは黙って無視
        app.logger.debug("empty title ignored")
    else:
        app.logger.debug("added event %d on %s", event.id, event.date.isoformat())
    return redirect(url_for("index"))


@app.route("/cancel", methods=["POST"])
def cancel():
    with calendar_lock:
        get_calendar().cancel()
    return redirect(url_for("index"))


if __name__ == "__main__":
    # イベント処理は 1 つずつ
    app.run(debug=True, threaded=False)
