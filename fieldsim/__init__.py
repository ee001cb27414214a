"""
Field Scenario Simulator

A Python-based visualization tool that generates synthetic temperature
(scalar) and wind (vector) fields over a fixed grid, renders them with a
colormap or arrow glyphs, and reports per-cell values on hover.
"""

__version__ = "1.0.0"
__author__ = "Field Scenario Simulator Project"
