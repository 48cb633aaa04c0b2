"""Relative luminance of one or more colours.

Prints the WCAG relative luminance (0.0 for black, 1.0 for white) of each
colour given on the command line.

Example:
    wcagcontrast luminance '#336699' '#ffffff'
    wcagcontrast luminance '#336699' --json
"""

from wcagcontrast.core.types import Command, Report

command = Command(name='luminance', help='Relative luminance of each colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colors', nargs='+', metavar='COLOR', help='Colour as #RRGGBB')


@command.run
def run(colors, report: Report, args) -> None:
    for color in colors:
        report.add({'color': color.hex(), 'luminance': color.relative_luminance()})
