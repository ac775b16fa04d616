"""Step definitions shared by the scenario modules in ``tests``."""

from .documentation import *  # noqa: F403
from .normalization import *  # noqa: F403

_NOT_STEPS = frozenset({"annotations", "documentation", "normalization"})

# pytest-bdd registers each step as a generated fixture in this namespace;
# scenario modules pick those up through ``from tests.steps import *``.
__all__ = sorted(
    name for name in dir() if not name.startswith("_") and name not in _NOT_STEPS
)
