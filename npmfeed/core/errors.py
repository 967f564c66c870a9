from __future__ import annotations


class FeedSetupError(Exception):
    pass


class ConfigurationError(FeedSetupError):
    pass


class MissingTokenError(FeedSetupError):
    def __init__(self, feed: str):
        super().__init__(
            f'Although a feed "{feed}" was configured, '
            "no token has been found to use for this feed."
        )
        self.feed = feed


class MissingRegistryError(FeedSetupError):
    def __init__(self, feed: str, scope: str):
        super().__init__(
            f"For the feed {feed} and scope {scope}, no registry value was configured."
        )
        self.feed = feed
        self.scope = scope


class RegistryDerivationError(FeedSetupError):
    pass


class UnderivableRegistryError(RegistryDerivationError):
    def __init__(self, feed: str):
        super().__init__(
            f'Could not automatically generate a registry URL for the feed "{feed}".'
        )
        self.feed = feed


class InvalidFeedFormatError(FeedSetupError):
    def __init__(self, feed: str):
        super().__init__(f'The feed "{feed}" does not match the expected prefix of //.')
        self.feed = feed


class RunControlWriteError(FeedSetupError):
    pass


class CommandExitError(FeedSetupError):
    def __init__(self, code: int, command: str):
        super().__init__(f"The exit code of {code} was non-zero from {command}")
        self.code = code
        self.command = command


class CommandSpawnError(FeedSetupError):
    def __init__(self, command: str, reason: str):
        super().__init__(f"Unable to start {command}: {reason}")
        self.command = command
