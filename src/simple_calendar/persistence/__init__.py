from .csv_store import CsvEventStore, sanitize_title

__all__ = [
    "CsvEventStore",
    "sanitize_title",
]
