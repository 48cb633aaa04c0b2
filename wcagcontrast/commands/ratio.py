"""Contrast ratio between two colours.

Order does not matter: the lighter colour is always the numerator, so the
result is in 1.0..21.0.

Example:
    wcagcontrast ratio '#000000' '#ffffff'   # 21.00:1
"""

from wcagcontrast.core.types import Command, Report

command = Command(name='ratio', help='Contrast ratio between two colours.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colors', nargs=2, metavar='COLOR', help='Colour as #RRGGBB')


@command.run
def run(colors, report: Report, args) -> None:
    a, b = colors
    report.add({'colors': [a.hex(), b.hex()], 'ratio': a.contrast_ratio(b)})
