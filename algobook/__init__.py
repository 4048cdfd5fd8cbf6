"""Classic algorithms and data structures: graphs, number theory, linear algebra, strings and more."""

__version__ = "0.1.0"