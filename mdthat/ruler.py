"""Ordered rule registry with dependency resolution."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, Set, TypeVar

M = TypeVar("M", bound=Hashable)
T = TypeVar("T")


class CyclicDependencyError(RuntimeError):
    """Raised when rule constraints form a cycle."""


class MissingDependencyError(RuntimeError):
    """Raised when a rule requires a mark that no rule carries."""


class _Priority(enum.Enum):
    NORMAL = "normal"
    BEFORE_ALL = "before_all"
    AFTER_ALL = "after_all"


class _ConstraintKind(enum.Enum):
    BEFORE = "before"
    AFTER = "after"
    REQUIRE = "require"


@dataclass(frozen=True)
class _Constraint:
    kind: _ConstraintKind
    mark: Hashable


class RuleItem(Generic[M, T]):
    """A rule added to a ``Ruler``; its methods adjust where it is placed.

    Every method returns the item itself, so calls can be chained.
    """

    def __init__(self, mark: M, value: T, on_change: Callable[[], None]) -> None:
        self.marks: List[M] = [mark]
        self.value = value
        self._priority = _Priority.NORMAL
        self._constraints: List[_Constraint] = []
        self._on_change = on_change

    def _add_constraint(self, kind: _ConstraintKind, mark: M) -> RuleItem[M, T]:
        self._constraints.append(_Constraint(kind, mark))
        self._on_change()
        return self

    def before(self, mark: M) -> RuleItem[M, T]:
        """Place this rule before every rule identified by ``mark``, if any exist."""
        return self._add_constraint(_ConstraintKind.BEFORE, mark)

    def after(self, mark: M) -> RuleItem[M, T]:
        """Place this rule after every rule identified by ``mark``, if any exist."""
        return self._add_constraint(_ConstraintKind.AFTER, mark)

    def before_all(self) -> RuleItem[M, T]:
        """Place this rule as early as its constraints allow."""
        self._priority = _Priority.BEFORE_ALL
        self._on_change()
        return self

    def after_all(self) -> RuleItem[M, T]:
        """Place this rule as late as its constraints allow."""
        self._priority = _Priority.AFTER_ALL
        self._on_change()
        return self

    def alias(self, mark: M) -> RuleItem[M, T]:
        """Give this rule another identifier, e.g. to group related rules."""
        self.marks.append(mark)
        self._on_change()
        return self

    def require(self, mark: M) -> RuleItem[M, T]:
        """Demand that some rule identified by ``mark`` exists."""
        return self._add_constraint(_ConstraintKind.REQUIRE, mark)

    def __repr__(self) -> str:
        return (
            f"RuleItem(marks={self.marks!r}, priority={self._priority.value}, "
            f"constraints={[(c.kind.value, c.mark) for c in self._constraints]!r})"
        )


class Ruler(Generic[M, T]):
    """Holds values identified by marks and yields them in dependency order."""

    def __init__(self) -> None:
        self._items: List[RuleItem[M, T]] = []
        self._compiled: Optional[List[int]] = None

    def _invalidate(self) -> None:
        self._compiled = None

    def add(self, mark: M, value: T) -> RuleItem[M, T]:
        """Add a rule identified by ``mark`` holding ``value``."""
        item = RuleItem(mark, value, self._invalidate)
        self._items.append(item)
        self._invalidate()
        return item

    def remove(self, mark: M) -> None:
        """Remove every rule identified by ``mark``."""
        self._items = [item for item in self._items if mark not in item.marks]
        self._invalidate()

    def contains(self, mark: M) -> bool:
        """Check whether any rule is identified by ``mark``."""
        return any(mark in item.marks for item in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.compile())

    def compile(self) -> List[T]:
        """Return the rule values in resolved order.

        Raises MissingDependencyError or CyclicDependencyError when the
        constraints cannot be satisfied.
        """
        if self._compiled is None:
            self._compiled = self._resolve()
        return [self._items[idx].value for idx in self._compiled]

    def _resolve(self) -> List[int]:
        items = self._items
        by_mark: Dict[Hashable, List[int]] = {}
        order: List[int] = []
        before_all_count = 0
        after_all_count = 0

        for idx, item in enumerate(items):
            if item._priority is _Priority.NORMAL:
                order.insert(len(order) - after_all_count, idx)
            elif item._priority is _Priority.BEFORE_ALL:
                order.insert(before_all_count, idx)
                before_all_count += 1
            else:
                order.append(idx)
                after_all_count += 1
            for mark in item.marks:
                by_mark.setdefault(mark, []).append(idx)

        # graph[i] holds the rules that must come before rule i.
        graph: List[Set[int]] = [set() for _ in items]
        for idx in order:
            item = items[idx]
            for constraint in item._constraints:
                if constraint.kind is _ConstraintKind.BEFORE:
                    for other in by_mark.setdefault(constraint.mark, []):
                        graph[other].add(idx)
                elif constraint.kind is _ConstraintKind.AFTER:
                    graph[idx].update(by_mark.setdefault(constraint.mark, []))
                elif constraint.mark not in by_mark:
                    raise MissingDependencyError(
                        f"missing dependency: {item.marks[0]!r} requires {constraint.mark!r}"
                    )

        result: List[int] = []
        inserted: Set[int] = set()
        while len(result) < len(items):
            ready = next(
                (idx for idx in order if idx not in inserted and not graph[idx]),
                None,
            )
            if ready is None:
                raise CyclicDependencyError(self._describe_cycle(order, graph))
            result.append(ready)
            inserted.add(ready)
            for deps in graph:
                deps.discard(ready)
        return result

    def _describe_cycle(self, order: List[int], graph: List[Set[int]]) -> str:
        for start in order:
            seen: Dict[int, int] = {}
            stack = [start]
            while stack:
                current = stack.pop()
                for dep in sorted(graph[current]):
                    if dep in seen:
                        continue
                    stack.append(dep)
                    seen[dep] = current
                    if dep == start:
                        backtrack: List[int] = []
                        node = start
                        while node not in backtrack:
                            backtrack.append(node)
                            node = seen[node]
                        backtrack.append(node)
                        path = " < ".join(
                            repr(self._items[idx].marks[0]) for idx in reversed(backtrack)
                        )
                        return f"cyclic dependency: {path}"
        return "cyclic dependency"

    def __repr__(self) -> str:
        try:
            compiled = [(idx, self._items[idx].marks[0]) for idx in (self._resolve_cached())]
        except (CyclicDependencyError, MissingDependencyError) as exc:
            compiled = str(exc)
        return f"Ruler(deps={self._items!r}, compiled={compiled!r})"

    def _resolve_cached(self) -> List[int]:
        if self._compiled is None:
            self._compiled = self._resolve()
        return self._compiled