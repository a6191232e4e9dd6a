"""KVision project wizard: scaffolds multi-module KVision projects."""

__version__ = "0.1.0"
