"""Configuration, enumerations, default templates, index loading and output generation for Markdown documentation from Doxygen XML."""

__version__ = "0.1.0"