"""Local/cloud hybrid summarization pipelines."""

__version__ = "0.1.0"
