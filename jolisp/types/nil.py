from __future__ import annotations


class NilType:
    _instance = None

    def __new__(cls):
        # Singleton: `is Nil` checks must hold for every Nil ever created
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
