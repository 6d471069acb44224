"""Substitution Registry — immutable catalog mapping substitution names to strategies.

Invariants:
    - Built once, read-only afterwards (MappingProxyType over a private copy)
    - Lookup is exact and case-sensitive: "Base" is not "base"
    - names() preserves registration order
    - Duplicate names at construction time are rejected

Design Decisions:
    - Explicit object passed into the Evaluator over a module-level global table:
      tests and alternate catalogs build their own registry
    - Every mapping visible in build_default_registry(): adding a strategy
      requires editing that one list, no auto-discovery
"""

from types import MappingProxyType
from typing import Iterable

from assignment_api.core import substitutions
from assignment_api.core.domain_types import Strategy, SubstitutionName
from assignment_api.core.errors import UnknownSubstitutionError


class SubstitutionRegistry:
    """Read-only name -> strategy table."""

    __slots__ = ("_strategies",)

    def __init__(self, entries: Iterable[tuple[str, Strategy]]):
        table: dict[str, Strategy] = {}
        for name, strategy in entries:
            if name in table:
                raise ValueError(f"Substitution '{name}' registered twice")
            table[name] = strategy
        self._strategies = MappingProxyType(table)

    def resolve(self, name: str) -> Strategy:
        """Return the strategy for name or raise UnknownSubstitutionError."""
        strategy = self._strategies.get(name)
        if strategy is None:
            raise UnknownSubstitutionError(name, self.names())
        return strategy

    def names(self) -> list[str]:
        return list(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def build_default_registry() -> SubstitutionRegistry:
    """The built-in catalog, one entry per SubstitutionName."""
    return SubstitutionRegistry([
        (SubstitutionName.BASE.value, substitutions.base),
        (SubstitutionName.NEGATE.value, substitutions.negate),
        (SubstitutionName.COUNT.value, substitutions.count),
        (SubstitutionName.ALL.value, substitutions.all_true),
        (SubstitutionName.ANY.value, substitutions.any_true),
        (SubstitutionName.CLASSIFY.value, substitutions.classify),
        (SubstitutionName.CLASSIFY_CUSTOM2.value, substitutions.classify_custom2),
    ])
