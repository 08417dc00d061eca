"""
ByteUnit Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Iterable, Iterator, KeysView, ValuesView, ItemsView
from typing import Any, TypeVar, Generic

# Classes --------------------------------------------------------------------------------------------------------------

K = TypeVar("K")
V = TypeVar("V")


class FrozenBiMap(Mapping[K, V], Generic[K, V]):
    """
    An immutable bidirectional map with Mapping-compatible API on the forward direction.

    - Forward direction (key -> value) implements the stdlib Mapping protocol:
      __getitem__, __iter__, __len__, keys(), values(), items(), get().
      Membership (x in bimap) applies to KEYS only, like dict.
    - Reverse direction (value -> key) available via get_key(value).
    - Both keys and values must be unique and hashable; the contents are fixed at construction.

    Used for static lookup tables such as unit prefix <-> exponent.
    """

    __slots__ = ("_forward_map", "_backward_map")

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        forward: dict[K, V] = {}
        backward: dict[V, K] = {}
        pairs = initial.items() if isinstance(initial, Mapping) else initial
        for key, value in pairs:
            if key in forward:
                raise ValueError(f"Key {key!r} already exists (maps to {forward[key]!r})")
            if value in backward:
                raise ValueError(f"Value {value!r} already exists (mapped from {backward[value]!r})")
            forward[key] = value
            backward[value] = key
        self._forward_map = forward
        self._backward_map = backward

    # ----- Mapping required methods -----

    def __getitem__(self, key: K) -> V:
        return self._forward_map[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward_map)

    def __len__(self) -> int:
        return len(self._forward_map)

    # ----- Mapping helpers (typed views) -----

    def keys(self) -> KeysView[K]:
        return self._forward_map.keys()

    def values(self) -> ValuesView[V]:
        return self._forward_map.values()

    def items(self) -> ItemsView[K, V]:
        return self._forward_map.items()

    # ----- Bidirectional operations -----

    def get_key(self, value: V) -> K:
        """Lookup key by value. Raises KeyError if the value is absent."""
        return self._backward_map[value]

    # ----- Equality and representation -----

    def __repr__(self) -> str:
        return f"FrozenBiMap({self._forward_map!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Mapping):
            return dict(self._forward_map.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._forward_map.items()))
