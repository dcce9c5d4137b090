"""The aggregate view over all helper groups."""

from dataclasses import dataclass, fields
from types import ModuleType


@dataclass(frozen=True)
class Toolkit:
    """Every helper group, reachable by attribute or by key.

    The groups are the modules themselves, so ``toolkit.array.chunk`` is the
    very function object ``utilkit.array_utils.chunk``.

    Examples:
        >>> from utilkit import default
        >>> default.array.chunk([1, 2, 3], 2)
        [[1, 2], [3]]
        >>> default["string"].capitalize("hello")
        'Hello'
    """

    string: ModuleType
    array: ModuleType
    date: ModuleType
    dom: ModuleType
    verify: ModuleType

    def keys(self) -> tuple[str, ...]:
        """Group names, in declaration order."""
        return tuple(f.name for f in fields(self))

    def __getitem__(self, group: str) -> ModuleType:
        if group not in self.keys():
            raise KeyError(group)
        return getattr(self, group)

    def __contains__(self, group: object) -> bool:
        return group in self.keys()
