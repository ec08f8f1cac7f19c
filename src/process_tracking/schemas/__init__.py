# This project was developed with assistance from AI tools.
"""Pydantic schemas for the tracking subsystem."""
