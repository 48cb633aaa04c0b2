"""Report builder — text and JSON output for wcagcontrast results."""

import json
from typing import Any

from wcagcontrast.core.types import Report


def _fmt(value: float, precision: int) -> str:
    return f'{value:.{precision}f}'


def format_text(report: Report, precision: int = 2) -> str:
    """Format report as human-readable text."""
    lines = []
    for entry in report.entries:
        if 'matrix' in entry:
            lines.extend(_format_matrix(entry['colors'], entry['matrix'], precision))
        elif 'ratio' in entry:
            a, b = entry['colors']
            lines.append(f'{a} on {b}  contrast {_fmt(entry["ratio"], precision)}:1')
        elif 'luminance' in entry:
            lines.append(f'{entry["color"]}  luminance {_fmt(entry["luminance"], precision)}')
        else:
            # Generic fallback
            lines.append('  '.join(f'{k}={v}' for k, v in entry.items()))
    return '\n'.join(lines)


def _format_matrix(colors: list[str], matrix: list[list[float]], precision: int) -> list[str]:
    cells = [[_fmt(v, precision) for v in row] for row in matrix]
    width = max([len(c) for c in colors] + [len(v) for row in cells for v in row])
    lines = [' ' * 7 + ' ' + ' '.join(c.rjust(width) for c in colors)]
    for name, row in zip(colors, cells):
        lines.append(name.ljust(7) + ' ' + ' '.join(v.rjust(width) for v in row))
    return lines


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': report.entries,
    }
    return json.dumps(obj, indent=2)
