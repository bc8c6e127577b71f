"""Human/JSON output for ServiceResult.

Human mode prints exactly the result's output lines, or the diagnostic
message for a failed result. JSON mode prints the whole result on one
line so a session produces JSON lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstore.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Returns an empty string for a successful result with no output lines.
    """
    if json_output:
        return result.model_dump_json()
    if result.ok:
        return "\n".join(result.lines)
    return result.error.message if result.error else f"{result.op} failed"
