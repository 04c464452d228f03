"""Shift wage package.

Feature modules: intervals (time-span algebra), payroll (night premium wage
engine), records (persistence + Flask controllers) and export (CSV).
"""
