# identifiers.py
import uuid


def parse_row_id(raw: str | None) -> int | None:
    """Return the integer primary key in ``raw``, or None if it is not one."""
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()) or len(value) > 18:
        return None
    return int(value)


def new_entry_id() -> str:
    return uuid.uuid4().hex
