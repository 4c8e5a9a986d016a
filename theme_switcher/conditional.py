"""
Conditional Overrides

A small registry of candidate override values (theme stylesheets) paired
with lazily evaluated conditions, plus a request-scoped session that
resolves the registry at most once.

Usage:
    registry = OverrideRegistry()
    registry.set_option('persistent', False)
    registry.register('dark', always)

    session = OverrideSession(registry)
    session.get_switched()   # 'dark'
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple


def always():
    """Condition that is always satisfied."""
    return True


class Candidate(NamedTuple):
    """A registered (value, condition) pair."""
    value: str
    condition: Callable[[], bool]


# =============================================================================
# REGISTRY
# =============================================================================

class OverrideRegistry:
    """
    Ordered store of override candidates and registry options.

    Conditions are evaluated in registration order and the first one that
    holds wins. Conditions should be cheap and free of side effects, as
    `resolve()` may call several of them and stops at the first match.
    """

    def __init__(self):
        self._candidates: List[Candidate] = []
        self._options: Dict[str, Any] = {}

    def __len__(self):
        return len(self._candidates)

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        return tuple(self._candidates)

    def register(self, value: str, condition: Callable[[], bool]) -> Candidate:
        """
        Add a candidate override.

        The value is stored as given; an empty string is accepted and
        resolves to "no effective override" downstream.

        Raises:
            TypeError: if condition is missing or not callable.
        """
        if condition is None or not callable(condition):
            raise TypeError(
                f"Override condition must be callable, got {type(condition).__name__}"
            )

        candidate = Candidate(value, condition)
        self._candidates.append(candidate)
        return candidate

    def set_option(self, key: str, value: Any) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("Option key must be a non-empty string")
        self._options[key] = value

    def get_option(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def resolve(self) -> Optional[str]:
        """
        Return the value of the first candidate whose condition holds.

        Returns None when nothing is registered or no condition holds.
        Exceptions raised by a condition propagate to the caller.
        """
        for candidate in self._candidates:
            if candidate.condition():
                return candidate.value
        return None


# =============================================================================
# SESSION
# =============================================================================

class OverrideSession:
    """
    Request-scoped view of a registry's resolution.

    The registry is resolved on the first call to `get_switched()` or
    `is_switched()` and the outcome, including "no override", is kept for
    the lifetime of the session. Build a new session for every request.
    """

    def __init__(self, registry: OverrideRegistry):
        self.registry = registry
        self._resolved = False
        self._switched: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    def get_switched(self) -> Optional[str]:
        if not self._resolved:
            self._switched = self.registry.resolve()
            self._resolved = True
        return self._switched

    def is_switched(self) -> bool:
        return bool(self.get_switched())

    def is_persistent(self) -> bool:
        """Whether a switch should outlive the current request."""
        return bool(self.registry.get_option('persistent', True))
