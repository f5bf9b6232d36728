from datetime import datetime

# fixed English names, independent of the process locale
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def today_stamp(now: datetime | None = None) -> str:
    """
    Return the local date as ``DD/MM/YYYY``, e.g. ``"17/12/2025"``.

    Parameters
    ----------
    now : datetime, optional
        Moment to format. Defaults to the local system clock.
    """
    now = now or datetime.now()
    return f"{now.day:02d}/{now.month:02d}/{now.year:04d}"


def today_label(now: datetime | None = None) -> str:
    """
    Return the report date label, e.g. ``"17/12/2025 - Wednesday"``.

    The label is computed here rather than by the model, which is not
    reliable about the current date.
    """
    now = now or datetime.now()
    return f"{today_stamp(now)} - {DAY_NAMES[now.weekday()]}"
