"""
Shared formatting helpers used by the admin and API representations.
"""

import re


def format_rupiah(amount: int) -> str:
    """Format an integer amount the way id-ID locales do, e.g. ``Rp 15.000``."""
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(int(amount)):,}".replace(",", ".")
    return f"Rp {sign}{grouped}"


def format_phone_number(phone: str) -> str:
    """Normalize an Indonesian phone number to the +62 international form."""
    cleaned = re.sub(r"\D", "", phone or "")
    if cleaned.startswith("08"):
        return f"+62{cleaned[1:]}"
    if cleaned.startswith("62"):
        return f"+{cleaned}"
    return f"+62{cleaned}"
