"""Error taxonomy shared by the index, the aligner and the CLI."""


class ConfigurationError(ValueError):
    """Raised when the corpus or a user-supplied setting is unusable."""


class AlignmentNotFound(LookupError):
    """Raised when a context phrase does not occur in its quotation."""
