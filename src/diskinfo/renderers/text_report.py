"""Human-readable text report."""

import sys
from typing import List, Optional, TextIO

from ..models import DiskUsageRecord
from ..styles import Styler, get_styler

# Free space below this percentage is highlighted
LOW_FREE_PCT = 10


def free_role(free_pct: float) -> str:
    """Style role for the free space line."""
    if free_pct < LOW_FREE_PCT:
        return "alert"
    return "ok"


def render_text(
    records: List[DiskUsageRecord],
    out: Optional[TextIO] = None,
    styler: Optional[Styler] = None,
) -> None:
    """Write one block per disk, preceded by a banner."""
    if out is None:
        out = sys.stdout
    if styler is None:
        styler = get_styler(out)

    print(styler.style("\n📦 Disk Usage Summary\n", "title"), file=out)

    for info in records:
        print(styler.style(f"🔹 Device: {info.device}", "header"), file=out)
        print(f"   Mountpoint: {styler.style(info.mountpoint, 'info')}", file=out)
        print(f"   Total:      {styler.style(f'{info.total_gb:.2f} GB', 'header')}", file=out)
        free = f"{info.free_gb:.2f} GB ({info.free_pct:.2f}%)"
        print(f"   Free:       {styler.style(free, free_role(info.free_pct))}", file=out)
        print(file=out)
