"""JSON report."""

import json
import sys
from typing import List, Optional, TextIO

from ..errors import RenderError
from ..models import DiskUsageRecord


def render_json(records: List[DiskUsageRecord], out: Optional[TextIO] = None) -> None:
    """
    Write records as an indented JSON array.

    Raises:
        RenderError: If the records cannot be serialized (e.g. NaN values)
    """
    if out is None:
        out = sys.stdout

    try:
        data = json.dumps([r.to_dict() for r in records], indent=2, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RenderError(f"Error encoding JSON: {e}") from e

    out.write(data + "\n")
