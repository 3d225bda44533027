class FatalConfigurationError(Exception):
    """Raised when a DWN configuration cannot be built."""

    pass


class KeyGenerationError(FatalConfigurationError):
    """Raised when a key pair cannot be generated for the requested algorithm or key id."""

    pass
