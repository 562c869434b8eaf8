"""AArch64 instruction encoders, delegates, JSON configuration and chained log sinks."""

__version__ = "0.1.0"