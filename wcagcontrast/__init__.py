"""WCAG 2.0 relative luminance and contrast ratio for sRGB colours."""

from wcagcontrast.core.color import Color, InvalidColorFormat

__all__ = ['Color', 'InvalidColorFormat']
__version__ = '0.1.0'
