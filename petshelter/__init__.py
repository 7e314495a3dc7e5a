"""Records for a pet shelter: animals, adopters, file storage and a console menu."""

__version__ = "0.1.0"