"""skeletor - template manifest engine for project scaffolding."""

__version__ = "0.1.0"
