"""日期时间格式化工具。

提供统一的 `YYYY-MM-DD HH:mm:ss` 格式化方法，方便在各个业务模块复用。
"""

from datetime import date, datetime

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

_SLASH_FORMATS = ("%Y/%m/%d %H:%M:%S", "%Y/%m/%d %H:%M", "%Y/%m/%d")


def _from_millis(value: int | float) -> datetime | None:
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_text(text: str) -> datetime | None:
    text = text.strip()
    if not text:
        return None
    if text.isdigit():
        return _from_millis(int(text))
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _SLASH_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _to_local(value: datetime) -> datetime:
    # 带时区的值换算为本地时间，不带时区的值视为本地时间。
    return value.astimezone() if value.tzinfo is not None else value


def format_datetime(value: str | int | float | datetime | date | None) -> str:
    """将时间值格式化为 `YYYY-MM-DD HH:mm:ss`。

    - `None`、空字符串、`False` 返回空字符串。
    - 数字按毫秒时间戳处理，`0` 会格式化为纪元时间而不是空字符串。
    - 无法解析时原样返回其字符串形式。
    """
    if value is None or value is False or value == "":
        return ""

    parsed: datetime | None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        parsed = _from_millis(value)
    elif isinstance(value, str):
        parsed = _parse_text(value)
    else:
        parsed = None

    if parsed is None:
        return str(value)
    return _to_local(parsed).strftime(DISPLAY_FORMAT)
