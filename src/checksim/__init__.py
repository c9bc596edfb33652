"""Off-chain composite simulation for Checks."""
from .errors import ChecksimError, InvalidDepth, MalformedInputRecord, MissingVirtualMapEntry

__version__ = "0.1.0"

__all__ = ["ChecksimError", "InvalidDepth", "MalformedInputRecord", "MissingVirtualMapEntry", "__version__"]
