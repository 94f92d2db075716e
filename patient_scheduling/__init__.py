"""
Patient Scheduling Service

A FastAPI-based system for keeping patient records and their scheduled
appointments, with one appointment per patient per date and time slot.
"""

__version__ = "1.0.0"
