"""vocabdeck - vocabulary flashcard consolidation and training setup."""

__version__ = "0.1.0"
