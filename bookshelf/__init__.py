"""
bookshelf - repository and retry/backoff pump exercises over a book catalog.
"""

__version__ = "0.1.0"
