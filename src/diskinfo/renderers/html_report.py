"""Static HTML report."""

import sys
from typing import List, Optional, TextIO

from jinja2 import Environment, TemplateError

from ..errors import RenderError
from ..models import DiskUsageRecord

HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Disk Usage</title>
    <style>
        table { border-collapse: collapse; width: 60%; }
        th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }
        th { background-color: #f2f2f2; }
    </style>
</head>
<body>
    <h2>Disk Usage Summary</h2>
    <table>
        <tr>
            <th>Device</th>
            <th>Mountpoint</th>
            <th>Total (GB)</th>
            <th>Free (GB)</th>
            <th>Free (%)</th>
        </tr>
{%- for disk in disks %}
        <tr>
            <td>{{ disk.device }}</td>
            <td>{{ disk.mountpoint }}</td>
            <td>{{ "%.2f"|format(disk.total_gb) }}</td>
            <td>{{ "%.2f"|format(disk.free_gb) }}</td>
            <td>{{ "%.0f"|format(disk.free_pct) }}%</td>
        </tr>
{%- endfor %}
    </table>
</body>
</html>
"""

_env = Environment(autoescape=True, keep_trailing_newline=True)


def render_html(records: List[DiskUsageRecord], out: Optional[TextIO] = None) -> None:
    """
    Write records as an HTML table.

    Device and mountpoint values are escaped.

    Raises:
        RenderError: If the template fails to render
    """
    if out is None:
        out = sys.stdout

    try:
        document = _env.from_string(HTML_TEMPLATE).render(disks=records)
    except TemplateError as e:
        raise RenderError(f"Error generating HTML: {e}") from e

    out.write(document)
