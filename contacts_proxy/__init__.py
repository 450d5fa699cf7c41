"""Normalizing proxy in front of the Wix Contacts REST API."""

__version__ = "0.1.0"
