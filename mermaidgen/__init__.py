"""Build Mermaid flowchart, sequence and state diagram source from Python objects."""

__version__ = "0.1.0"