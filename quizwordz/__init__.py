"""QuizWordz 5x5: a timed word-finding puzzle."""

__version__ = "0.1.0"
