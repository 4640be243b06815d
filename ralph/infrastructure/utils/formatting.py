def format_duration_ms(duration_ms: int) -> str:
    """Convert milliseconds to a short duration string like '1m 5s' or '250ms'."""
    if duration_ms < 0:
        raise ValueError("duration_ms must be non-negative")

    if duration_ms < 1000:
        return f"{duration_ms}ms"

    seconds = duration_ms // 1000
    if seconds < 60:
        return f"{duration_ms / 1000:.1f}s"

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    parts: list[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")

    return " ".join(parts)
