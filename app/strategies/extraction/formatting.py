"""Amount formatting for responses."""


def format_amount(value: float) -> str:
    """Render an amount the way en-CA locale formatting does.

    Comma thousands separators, a period decimal mark, at most three
    fraction digits and no trailing zeros: 186000 -> "$186,000",
    1234.5 -> "$1,234.5".
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"${text}"


def json_number(value: float) -> int | float:
    """Return integral amounts as ints so they serialise without ".0"."""
    if float(value).is_integer():
        return int(value)
    return value
