"""Builders and parsers for the bulk and control command payloads of Hantek USB oscilloscopes."""

__version__ = "0.1.0"