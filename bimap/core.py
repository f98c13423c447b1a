from __future__ import annotations
import logging
from functools import cached_property, reduce

from typing import (
    Dict,
    Hashable,
    Iterable,
    Iterator,
    ItemsView,
    KeysView,
    List,
    Mapping,
    Tuple,
    TypeVar,
    Union,
    ValuesView,
    overload,
)
from typing_extensions import Protocol
from more_itertools import consume

logger = logging.getLogger(__name__)

_L = TypeVar("_L", bound=Hashable)
_R = TypeVar("_R", bound=Hashable)
_A = TypeVar("_A")

_Indices = Tuple[Dict[_L, _R], Dict[_R, _L]]

_L_contra = TypeVar("_L_contra", contravariant=True)
_R_contra = TypeVar("_R_contra", contravariant=True)


class Combiner(Protocol[_A, _L_contra, _R_contra]):
    def __call__(self, __acc: _A, __left: _L_contra, __right: _R_contra) -> _A:
        ...


class Action(Protocol[_L_contra, _R_contra]):
    def __call__(self, __left: _L_contra, __right: _R_contra) -> object:
        ...


class Predicate(Protocol[_L_contra, _R_contra]):
    def __call__(self, __left: _L_contra, __right: _R_contra) -> bool:
        ...


class NotFound(KeyError):
    """Raised when a left or right value is not present in a BiMap."""

    def __init__(self, side: str, key: object) -> None:
        super().__init__(key)
        self.side = side
        self.key = key

    def __str__(self) -> str:
        return f"{self.key!r} is not a {self.side} value of this BiMap"


def _delete_left(forward: Dict[_L, _R], reverse: Dict[_R, _L], left: _L) -> None:
    if left in forward:
        del reverse[forward.pop(left)]


def _delete_right(forward: Dict[_L, _R], reverse: Dict[_R, _L], right: _R) -> None:
    if right in reverse:
        del forward[reverse.pop(right)]


def _insert(forward: Dict[_L, _R], reverse: Dict[_R, _L], left: _L, right: _R) -> None:
    """Adds `(left, right)` in place, first dropping whatever pair owns `left`
    and whatever pair owns `right`.

    Both owners are looked up in the indices as they are on entry. If one pair
    owns both, the second deletion finds nothing left to do.
    """
    if logger.isEnabledFor(logging.DEBUG):
        if left in forward and forward[left] != right:
            logger.debug("Displacing %r <-> %r", left, forward[left])
        if right in reverse and reverse[right] != left:
            logger.debug("Displacing %r <-> %r", reverse[right], right)

    _delete_left(forward, reverse, left)
    _delete_right(forward, reverse, right)
    forward[left] = right
    reverse[right] = left


class BiMap(Mapping[_L, _R]):
    """An immutable one-to-one mapping between left and right values.

    Lookups work from either side. Every "mutating" method returns a new
    BiMap and leaves the receiver untouched. As a `Mapping`, a BiMap behaves
    like the dict of its left -> right pairs.

        >>> m = BiMap([("a", 1), ("b", 2)])
        >>> m.get_by_right(2)
        'b'
        >>> m.insert("c", 2).to_forward_map()
        {'a': 1, 'c': 2}
    """

    @overload
    def __init__(self) -> None:
        ...

    @overload
    def __init__(self, __pairs: Iterable[Tuple[_L, _R]]) -> None:
        ...

    @overload
    def __init__(self, __dict: Mapping[_L, _R]) -> None:
        ...

    def __init__(
        self,
        __item: Union[Iterable[Tuple[_L, _R]], Mapping[_L, _R], None] = None,
    ) -> None:
        self._forward: Dict[_L, _R] = {}
        self._reverse: Dict[_R, _L] = {}
        if __item is None:
            return

        if isinstance(__item, Mapping):
            self._forward = dict(__item)
            for left, right in self._forward.items():
                if right in self._reverse:
                    logger.debug(
                        "Source mapping is not injective: %r and %r both map to %r,"
                        " keeping %r in the reverse index",
                        self._reverse[right],
                        left,
                        right,
                        left,
                    )
                self._reverse[right] = left
        else:
            for left, right in __item:
                _insert(self._forward, self._reverse, left, right)

    @classmethod
    def _of(cls, forward: Dict[_L, _R], reverse: Dict[_R, _L]) -> BiMap[_L, _R]:
        bimap: BiMap[_L, _R] = cls.__new__(cls)
        bimap._forward = forward
        bimap._reverse = reverse
        return bimap

    @classmethod
    def new(cls) -> BiMap[_L, _R]:
        return cls()

    @classmethod
    def from_list(cls, pairs: Iterable[Tuple[_L, _R]]) -> BiMap[_L, _R]:
        """Inserts `pairs` in order into an empty BiMap.

        When pairs collide on either side the last one wins and every earlier
        pair it collides with is dropped entirely.
        """
        return cls(pairs)

    @classmethod
    def from_dict(cls, mapping: Mapping[_L, _R]) -> BiMap[_L, _R]:
        """Copies `mapping` as the forward index and derives the reverse one.

        `mapping` should be injective. If two keys share a value, the key seen
        last in the mapping's iteration order owns that value in the reverse
        index and the other key's reverse entry is silently lost.
        """
        return cls(mapping)

    # Lookups

    def size(self) -> int:
        return len(self._forward)

    def get_by_left(self, key: _L) -> _R:
        try:
            return self._forward[key]
        except KeyError:
            raise NotFound("left", key) from None

    def get_by_right(self, key: _R) -> _L:
        try:
            return self._reverse[key]
        except KeyError:
            raise NotFound("right", key) from None

    def has_left(self, key: object) -> bool:
        return key in self._forward

    def has_right(self, key: object) -> bool:
        return key in self._reverse

    # Transformations

    def insert(self, left: _L, right: _R) -> BiMap[_L, _R]:
        """Returns a copy holding `(left, right)`.

        Any pair that already used `left` or `right` is removed from both
        indices first, so the size can shrink by one, stay the same, or grow
        by one.
        """
        forward = dict(self._forward)
        reverse = dict(self._reverse)
        _insert(forward, reverse, left, right)
        return self._of(forward, reverse)

    def delete_by_left(self, key: _L) -> BiMap[_L, _R]:
        if key not in self._forward:
            return self
        forward = dict(self._forward)
        reverse = dict(self._reverse)
        _delete_left(forward, reverse, key)
        return self._of(forward, reverse)

    def delete_by_right(self, key: _R) -> BiMap[_L, _R]:
        if key not in self._reverse:
            return self
        forward = dict(self._forward)
        reverse = dict(self._reverse)
        _delete_right(forward, reverse, key)
        return self._of(forward, reverse)

    def filter(self, predicate: Predicate[_L, _R]) -> BiMap[_L, _R]:
        def keep(acc: _Indices[_L, _R], left: _L, right: _R) -> _Indices[_L, _R]:
            if predicate(left, right):
                _insert(acc[0], acc[1], left, right)
            return acc

        forward, reverse = self.fold(({}, {}), keep)
        return self._of(forward, reverse)

    @cached_property
    def inverse(self) -> BiMap[_R, _L]:
        """The same pairs with the sides swapped."""
        return BiMap._of(dict(self._reverse), dict(self._forward))

    # Conversions and traversal

    def to_list(self) -> List[Tuple[_L, _R]]:
        return list(self._forward.items())

    def to_forward_map(self) -> Dict[_L, _R]:
        return dict(self._forward)

    def to_reverse_map(self) -> Dict[_R, _L]:
        return dict(self._reverse)

    def left_values(self) -> List[_L]:
        return list(self._forward)

    def right_values(self) -> List[_R]:
        return list(self._reverse)

    def fold(self, initial: _A, combine: Combiner[_A, _L, _R]) -> _A:
        return reduce(
            lambda acc, pair: combine(acc, pair[0], pair[1]),
            self._forward.items(),
            initial,
        )

    def for_each(self, action: Action[_L, _R]) -> None:
        consume(action(left, right) for left, right in self._forward.items())

    def describe(self) -> str:
        """Human readable listing of the pairs. Not meant to be parsed."""
        pairs = ", ".join(
            f"{left!r} <-> {right!r}" for left, right in self._forward.items()
        )
        return f"BiMap {{{pairs}}}"

    # Mapping protocol, keyed by left values

    def __getitem__(self, key: _L) -> _R:
        return self.get_by_left(key)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __iter__(self) -> Iterator[_L]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def items(self) -> ItemsView[_L, _R]:
        return self._forward.items()

    def keys(self) -> KeysView[_L]:
        return self._forward.keys()

    def values(self) -> ValuesView[_R]:
        return self._forward.values()

    def __eq__(self, o: object) -> bool:
        return isinstance(o, BiMap) and self._forward == o._forward

    def __hash__(self) -> int:
        return hash(frozenset(self._forward.items()))

    def __repr__(self) -> str:
        return f"BiMap({list(self._forward.items())})"
