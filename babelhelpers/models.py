from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

# A plugin is a module reference string or an inline implementation that may carry a ``name``.
BabelPlugin = Union[str, Mapping[str, Any], Any]

# Configuration is the bare plugin or a ``(plugin, options, unique_id)`` tuple/list.
BabelPluginConfig = Union[BabelPlugin, Sequence[Any]]


@dataclass(frozen=True)
class ScopedName:
    """A package name split into its ``@scope`` (``None`` when unscoped) and remainder."""
    scope: Optional[str]
    name: str


@dataclass(frozen=True)
class PlacementConstraints:
    """Names a new plugin must appear before and/or after."""
    before: Tuple[str, ...] = field(default_factory=tuple)
    after: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_names(
        cls,
        before: Optional[Iterable[str]] = None,
        after: Optional[Iterable[str]] = None,
    ) -> "PlacementConstraints":
        return cls(before=tuple(before or ()), after=tuple(after or ()))


@dataclass(frozen=True)
class PlacementBounds:
    """Range of indices allowed by a set of constraints; ``None`` means unconstrained."""
    earliest: Optional[int] = None
    latest: Optional[int] = None

    @property
    def is_satisfiable(self) -> bool:
        if self.earliest is None or self.latest is None:
            return True
        return self.earliest <= self.latest

    def target_index(self, length: int) -> int:
        """Pick the insertion index: as late as allowed, else as early as allowed, else the end."""
        if self.latest is not None:
            return self.latest
        if self.earliest is not None:
            return self.earliest
        return length


def indices_to_bounds(after_indices: List[int], before_indices: List[int]) -> PlacementBounds:
    return PlacementBounds(
        earliest=max(after_indices) + 1 if after_indices else None,
        latest=min(before_indices) if before_indices else None,
    )
