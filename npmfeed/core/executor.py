from __future__ import annotations

import sys
from typing import Iterable, Tuple

from .action import Action
from .errors import FeedSetupError


class Executor:
    """
    Execute actions strictly in order.
    - The first failing action stops the run; nothing is retried.
    """

    def run(self, actions: Iterable[Action]) -> Tuple[bool, str]:
        for act in actions:
            try:
                act.run()
            except FeedSetupError as e:
                print(f"Action failed: {act.describe()}", file=sys.stderr)
                return False, str(e)
        return True, ""
