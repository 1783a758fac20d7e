"""
Priority Percentile - "Top N% priority" figure for a ranked attendee.

Display only: the rank itself is the ordering signal. Computed with integer
arithmetic so exact percentages do not pick up float error (129/129 -> 100,
not 101).
"""

from typing import Optional

from attendee_intel.insights.numeric import to_int_or_zero


def priority_percentile(rank, total) -> Optional[int]:
    """ceil(rank / total * 100) clamped to 1..100, or None without rank/total."""
    rank_num = to_int_or_zero(rank)
    total_num = to_int_or_zero(total)
    if not rank_num or not total_num:
        return None
    percent = -((-rank_num * 100) // total_num)
    return max(1, min(100, percent))
