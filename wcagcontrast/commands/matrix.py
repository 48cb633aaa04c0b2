"""Pairwise contrast ratios for a set of colours.

Computes every pair at once with numpy. The grid is symmetric with 1.00 on
the diagonal.

Example:
    wcagcontrast matrix '#000000' '#777777' '#ffffff'
"""

from wcagcontrast.core import batch
from wcagcontrast.core.types import Command, Report

command = Command(name='matrix', help='Pairwise contrast ratio grid (vectorised).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colors', nargs='+', metavar='COLOR', help='Colour as #RRGGBB')


@command.run
def run(colors, report: Report, args) -> None:
    grid = batch.contrast_matrix(batch.to_array(colors))
    report.add({'colors': [c.hex() for c in colors], 'matrix': grid.tolist()})
