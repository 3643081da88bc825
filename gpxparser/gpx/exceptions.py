"""GPX parsing errors."""


class InvalidGPXError(ValueError):
    """The input could not be turned into an XML tree."""
