"""Telugu-language chat relay and conversation client."""

__version__ = "0.1.0"
