"""wcagcontrast.core — Foundation layer.

Contains the Color value type, the numpy batch functions, type definitions,
environment loading and the report builder.
This module has NO dependencies on wcagcontrast.commands or wcagcontrast.registry.
Only stdlib and numpy are allowed here.
"""
