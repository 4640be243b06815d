from ralph.cli.formatters.status_formatter import (
    CHECK_STATUS_STYLES,
    LOOP_STATUS_STYLES,
    format_status,
    render_iteration,
    render_status,
    status_payload,
)

__all__ = [
    "CHECK_STATUS_STYLES",
    "LOOP_STATUS_STYLES",
    "format_status",
    "render_iteration",
    "render_status",
    "status_payload",
]
