"""Thread Stage: discussion topics, two-level reply threads and reply ranking."""

__version__ = "0.1.0"
