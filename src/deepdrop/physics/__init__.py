"""
Drop Physics
============
Closed-form model of a dropped object: free fall under constant gravity,
followed by the impact sound travelling back up at a temperature-dependent
speed.

Note: This package should be pure Python/NumPy and should NOT import any GUI
toolkit.
"""
