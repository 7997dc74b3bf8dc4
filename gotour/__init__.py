"""
gotour - Client-side services for an interactive Go tour.

Runs snippets against a remote execution backend, formats code, walks the
lesson table and keeps the student's edits locally.
"""

__version__ = "0.1.0"
