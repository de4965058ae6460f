import re

_HOURS = re.compile(r"(\d+)h")
_MINUTES = re.compile(r"(\d+)m")
_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})")


def compute_arrival_time(departure_time: str | None, duration: str | None) -> str:
    """出発時刻と所要時間から到着時刻（HH:MM）を算出する

    所要時間は "8h" / "8h 30m" 形式を想定するが、時・分のどちらかが
    欠けていても読み取れた部分だけを使う。24時を超えた場合は日付を
    繰り上げずに時刻だけを折り返す。どちらかの入力がなければ空文字を返す。

    Example:
        >>> compute_arrival_time("21:30", "8h")
        '05:30'
    """
    if not departure_time or not duration:
        return ""
    clock = _CLOCK.match(departure_time.strip())
    if clock is None:
        return ""

    hours = _HOURS.search(duration)
    minutes = _MINUTES.search(duration)
    total = (
        int(clock.group(1)) * 60
        + int(clock.group(2))
        + (int(hours.group(1)) * 60 if hours else 0)
        + (int(minutes.group(1)) if minutes else 0)
    ) % (24 * 60)
    return f"{total // 60:02d}:{total % 60:02d}"
