"""
Jira Tickets - Main Package

Fetches Jira tickets through the REST API and prints them as a console report.
"""

__version__ = "1.0.0"

# Main package exports
__all__ = [
    "adapters",
    "cli",
    "configs",
    "models",
    "ui",
    "utils",
]
