# src/lsa/utils/format.py

KB = 1024
MB = KB * 1024
GB = MB * 1024


def format_size(size: int) -> str:
    """Human-readable byte count, one decimal place above 1 KB."""
    if size >= GB:
        return f"{size / GB:.1f} GB"
    if size >= MB:
        return f"{size / MB:.1f} MB"
    if size >= KB:
        return f"{size / KB:.1f} KB"
    return f"{size} B"
