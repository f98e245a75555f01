"""Library location, status codes, value types and image-to-tensor conversion for an inference runtime."""

__version__ = "0.9.1"