"""A1 notation helpers."""


def col_letter_to_index(col: str) -> int:
    """Convert column letter(s) to 0-based index. A=0, B=1, ..., Z=25, AA=26, etc."""
    if not col or not col.isalpha():
        raise ValueError(f"Invalid column letters: {col!r}")
    result = 0
    for char in col.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def index_to_col_letter(index: int) -> str:
    """Convert 0-based index to column letter(s)."""
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    result = ""
    index += 1
    while index > 0:
        index -= 1
        result = chr(ord("A") + (index % 26)) + result
        index //= 26
    return result


def quote_sheet_name(sheet_name: str) -> str:
    """Quote a sheet name for use in a range, doubling embedded quotes."""
    return "'" + sheet_name.replace("'", "''") + "'"
