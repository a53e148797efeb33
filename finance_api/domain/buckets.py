"""Month bucket keys used to tag and aggregate financial records"""

from datetime import date


def bucket_key(value: date) -> str:
    """Derive the "YYYY-MM" bucket a record dated `value` belongs to"""
    return f"{value.year:04d}-{value.month:02d}"


def month_bucket(month: int, year: int) -> str:
    """Bucket for an explicit month/year pair, e.g. (5, 2024) -> "2024-05" """
    return f"{int(year):04d}-{int(month):02d}"


def year_prefix(year: str) -> str:
    """Prefix shared by every bucket of a year: "2023" -> "2023-" """
    return f"{year}-"
