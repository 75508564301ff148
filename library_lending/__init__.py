"""Library lending service.

Tracks which books are available, who holds them and until when, and keeps
borrowing records consistent when authors, books or customers are removed.
"""

__version__ = "0.1.0"
