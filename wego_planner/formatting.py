"""Display helpers shared with the presentation layer."""
from __future__ import annotations

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict


def format_inr(amount: float) -> str:
    """Format ``amount`` as whole rupees with Indian digit grouping (₹1,59,999)."""
    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    digits = str(abs(rounded))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}₹{digits}"


def planner_defaults(today: date | None = None) -> Dict[str, Any]:
    """Initial planner form values: a week-long domestic trip starting today."""
    start = today or date.today()
    return {
        "destination": "",
        "trip_type": "Domestic",
        "nights": 4,
        "budget": 50000,
        "travelers": 2,
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(days=7)).isoformat(),
        "interests": ["Beaches", "Food"],
    }
