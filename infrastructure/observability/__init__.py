"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and pipeline stage
- Optional rotating file logs
"""

from infrastructure.observability.logging import (
    clear_stage_context,
    configure_logging,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_stage_context",
    "make_run_tag",
]
