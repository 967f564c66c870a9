from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import Configuration
from .action import Action, AppendAuthToken, ConfigureScope, Runner
from .errors import MissingRegistryError, MissingTokenError
from .executor import Executor
from .registry import derive_registry


def plan_feed_actions(
    config: Configuration, runner: Optional[Runner] = None
) -> List[Action]:
    """
    Turn the configuration into the ordered list of setup actions.

    Token storage always comes first; scope mapping follows only when a
    scope is configured. Without a feed there is nothing to do.
    """
    feed = config.feed
    if not feed:
        return []
    if not config.token:
        raise MissingTokenError(feed)

    actions: List[Action] = [AppendAuthToken(config.npmrc, feed, config.token)]

    scope = config.scope
    if scope:
        # If no registry is provided, it usually is the feed + "registry"
        registry = config.registry or derive_registry(feed)
        if not registry:
            raise MissingRegistryError(feed, scope)
        print({scope: registry})
        actions.append(ConfigureScope(config.npm_cmd, scope, registry, runner))

    return actions


def configure_feed(
    config: Configuration,
    executor: Optional[Executor] = None,
    runner: Optional[Runner] = None,
) -> Tuple[bool, str]:
    actions = plan_feed_actions(config, runner)
    return (executor or Executor()).run(actions)
