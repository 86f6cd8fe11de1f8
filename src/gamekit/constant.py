# gamekit/constant.py

class VectorConstant:
    """
    Class-level named vector. Every access builds a fresh instance of the
    owning class, so callers can mutate what they get back without
    touching the constant.
    """
    def __init__(self, *components: float):
        self.components = components

    def __get__(self, instance, owner):
        return owner(*self.components)
