"""PreviewFit - camera preview resolution selection and fit transforms."""

__version__ = "0.1.0"
