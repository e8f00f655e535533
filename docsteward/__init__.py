"""docsteward: upstream documentation mirroring and AI-assisted stewardship."""

__version__ = "0.1.0"
