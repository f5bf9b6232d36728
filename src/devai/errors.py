class DevAIError(Exception):
    """Base class for every failure surfaced by the CLI."""


class ConfigurationError(DevAIError):
    pass


class ModelRequestFailed(DevAIError):
    """The chat model call raised; the provider's message is kept verbatim."""


class PathIsDirectory(DevAIError):
    def __init__(self, path) -> None:
        self.path = path
        super().__init__(
            f"Output path '{path}' is a directory. "
            f"Pass a file path instead, e.g. '{path}/standup.txt'."
        )


class FileSystemError(DevAIError):
    pass


class SpeechFailed(DevAIError):
    pass
