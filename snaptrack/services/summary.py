from __future__ import annotations

from ..models.summary import Summary

"""Summary line rendering.

Format:
SUMMARY total={total} changed={changed} new={new}
"""

SUMMARY_PREFIX = "SUMMARY "


def render_summary_line(summary: Summary) -> str:
    """Render the SUMMARY line for a session's unfiltered diff.

    Examples:
        >>> render_summary_line(Summary(total=3, changed=1, new=1))
        'SUMMARY total=3 changed=1 new=1'
    """
    return (
        f"{SUMMARY_PREFIX}total={summary.total} "
        f"changed={summary.changed} "
        f"new={summary.new}"
    )
