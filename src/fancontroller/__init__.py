"""
Fan Controller: a circular fan-speed dial widget for PyQt6.
"""
