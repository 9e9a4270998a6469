"""taskflow: flow flattening and navigation for multi-phase language-learning tasks."""

__version__ = "0.1.0"
