from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import LINE_ENDING
from ..utils.fs import append_text
from ..utils.sysutils import run_npm
from .errors import CommandExitError, FeedSetupError, RunControlWriteError
from .registry import auth_token_line, strip_protocol

Runner = Callable[[str, Sequence[str]], int]


class Action(ABC):
    @abstractmethod
    def run(self) -> None: ...

    def describe(self) -> str:
        return self.__class__.__name__


# -------- Run-control actions --------
class AppendAuthToken(Action):
    """Append `//feed:_authToken=TOKEN` to the .npmrc file, never rewriting it."""

    def __init__(
        self, npmrc: str | Path, feed: str, token: str, line_ending: str = LINE_ENDING
    ) -> None:
        self.npmrc = Path(npmrc)
        self.feed = feed
        self.token = token
        self.line_ending = line_ending

    def run(self) -> None:
        line = auth_token_line(self.feed, self.token)
        suffix = strip_protocol(self.feed)
        try:
            append_text(self.npmrc, self.line_ending + line + self.line_ending)
        except (OSError, UnicodeError) as e:
            print(f"Unable to store the token for the private feed {suffix}", file=sys.stderr)
            raise RunControlWriteError(f"Cannot append to {self.npmrc}: {e}") from e
        print(f"Stored a token for the private feed {suffix}")

    def describe(self) -> str:
        # never echo the token
        return f"store token for {strip_protocol(self.feed)} in {self.npmrc}"


# -------- npm actions --------
class NpmConfigSet(Action):
    def __init__(
        self,
        command: str,
        key: str,
        value: str,
        runner: Optional[Runner] = None,
    ) -> None:
        self.command = command
        self.key = key
        self.value = value
        self.runner = runner or run_npm

    @property
    def args(self) -> list[str]:
        return ["config", "set", self.key, self.value]

    def run(self) -> None:
        code = self.runner(self.command, self.args)
        if code:
            raise CommandExitError(code, self.command)

    def describe(self) -> str:
        return f"run command: {self.command} {' '.join(self.args)}"


class ConfigureScope(Action):
    """Point @scope at a registry: always-auth first, then the registry itself."""

    def __init__(
        self,
        command: str,
        scope: str,
        registry: str,
        runner: Optional[Runner] = None,
    ) -> None:
        self.scope = f"@{scope.lstrip('@')}"
        self.registry = registry
        self.steps = [
            NpmConfigSet(command, f"{self.scope}:always-auth", "true", runner),
            NpmConfigSet(command, f"{self.scope}:registry", registry, runner),
        ]

    def run(self) -> None:
        self.steps[0].run()
        try:
            self.steps[1].run()
        except FeedSetupError:
            print(
                f"Could not configure the scope {self.scope} for the registry {self.registry}",
                file=sys.stderr,
            )
            raise
        print(f"Configured the scope {self.scope} for the registry {self.registry}")

    def describe(self) -> str:
        steps = "; ".join(step.describe() for step in self.steps)
        return f"configure scope {self.scope} for registry {self.registry} ({steps})"
