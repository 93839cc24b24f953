"""Failures the reader knows how to report. PRAW errors are translated into these at the session boundary."""


class RedditReaderError(RuntimeError):
    pass


class AuthenticationError(RedditReaderError):
    """Reddit rejected the configured credentials."""


class ConnectivityError(RedditReaderError):
    """Reddit could not be reached while starting the session."""


class CommunityNotFound(RedditReaderError):
    """No subreddit with the requested name can be read."""

    def __init__(self, name: str) -> None:
        super().__init__(f"There is no subreddit named {name!r}")
        self.name = name


class NetworkUnavailable(RedditReaderError):
    """The connection dropped during a fetch; the caller may retry."""
