# variables.py

from typing import Dict, Iterator, Optional, Tuple


class VariableTable:
    """Named integer bindings for one calculator session.

    Identifiers are case-sensitive letter runs; values are Python ints, so
    there is no range limit. Bindings can be overwritten but never removed.

    The table is plain mutable state with no locking. It is not designed for
    concurrent access; give each thread its own table if the core is reused
    in a multi-threaded host.
    """

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._values: Dict[str, int] = dict(initial or {})

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        bindings = ", ".join(f"{name}={value}" for name, value in self.items())
        return f"VariableTable({bindings})"

    def get(self, name: str) -> Optional[int]:
        return self._values.get(name)

    def bind(self, name: str, value: int) -> None:
        self._values[name] = value

    def items(self) -> Iterator[Tuple[str, int]]:
        """Bindings in name order; used for display and for comparing snapshots."""
        return iter(sorted(self._values.items()))
