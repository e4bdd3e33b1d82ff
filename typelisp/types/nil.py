from __future__ import annotations


class NilType:
    """The empty list, also the only false value."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        # a single instance per process
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False
    def __iter__(self): return iter(())
    def __len__(self): return 0

    def __reduce__(self):
        return NilType, ()


Nil = NilType()
