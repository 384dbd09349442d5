class Environment:
    def __init__(self, outer=None):
        self._outer = outer
        self._store = {}

    def get(self, name):
        if name in self._store:
            return self._store[name]
        elif self._outer is not None:
            return self._outer.get(name)
        else:
            return None

    def set(self, name, val):
        self._store[name] = val
        return val
