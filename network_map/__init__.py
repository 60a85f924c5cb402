"""Organizer network map: force graph plus linked contact-count bar chart."""

__version__ = "0.1.0"
