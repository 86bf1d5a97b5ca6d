"""MDEdit: a single-document Markdown editor with live HTML preview."""

__version__ = "1.0.0"
