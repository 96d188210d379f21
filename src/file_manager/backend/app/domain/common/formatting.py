from __future__ import annotations

_UNITS = ("Bytes", "KB", "MB", "GB")


def format_bytes(num_bytes: int) -> str:
    """
    Human readable size, e.g. 1536 -> "1.5 KB".
    Values above the largest unit stay in GB.
    """
    if num_bytes <= 0:
        return "0 Bytes"

    value = float(num_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(_UNITS) - 1:
        value /= 1024
        unit_index += 1

    return f"{round(value, 2):g} {_UNITS[unit_index]}"
