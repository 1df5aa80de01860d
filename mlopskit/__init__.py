"""Command-line tools, Flask microservices, event handlers, a duplicate-file finder and a CSV explorer."""

__version__ = "0.1.0"