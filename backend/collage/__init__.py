"""Justified image-grid layout and collage rendering."""

__version__ = "0.1.0"
