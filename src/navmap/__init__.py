"""Navmap: navigation structure inference for wireframe sites."""

__version__ = "0.1.0"
