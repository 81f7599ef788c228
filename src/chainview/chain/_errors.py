class ChainLoadError(Exception):
    """The options chain file could not be read or parsed."""


class ChainFormatError(ChainLoadError):
    """The options chain document does not match the expected schema."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
