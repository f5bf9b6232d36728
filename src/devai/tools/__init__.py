from .dates import today_label, today_stamp

__all__ = ["today_label", "today_stamp"]
