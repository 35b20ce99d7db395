"""
Domain exceptions.
Both surface to the HTTP caller as a server error and are never retried.
"""


class PromptLoadError(RuntimeError):
    """A prompt template could not be read from the template directory."""


class ReportGenerationError(RuntimeError):
    """The language model returned no report content."""
