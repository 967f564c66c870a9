from __future__ import annotations

from .errors import InvalidFeedFormatError, UnderivableRegistryError

PROTOCOL_PREFIXES = ("http:", "https:")


def derive_registry(feed: str) -> str:
    """
    Guess the registry URL of a feed: usually the feed URL + "registry".

    A protocol-relative feed (//host/path) is treated as https.
    Raises UnderivableRegistryError for any other scheme.
    """
    original = feed
    if feed.startswith("//"):
        feed = "https:" + feed
    for prefix in PROTOCOL_PREFIXES:
        if not feed.startswith(prefix):
            continue
        if feed.endswith("registry"):
            return feed
        if not feed.endswith("/"):
            feed += "/"
        return feed + "registry"
    raise UnderivableRegistryError(original)


def strip_protocol(feed: str) -> str:
    for prefix in PROTOCOL_PREFIXES:
        if feed.startswith(prefix):
            feed = feed[len(prefix) :]
    return feed


def auth_token_line(feed: str, token: str) -> str:
    # .npmrc expects: //domain/feedPrefix:_authToken=TOKENVALUE
    suffix = strip_protocol(feed)
    if not suffix.startswith("//"):
        raise InvalidFeedFormatError(suffix)
    return f"{suffix}:_authToken={token}"
