"""Exceptions raised by the metadata loader and generator."""


class PropdocsError(Exception):
    """Base class for propdocs errors."""


class MetadataUnavailableError(PropdocsError):
    """The metadata file could not be found, read, or parsed."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Could not load the spring configuration file '{path}'!")
