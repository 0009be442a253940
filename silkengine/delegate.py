"""Single- and multi-target callback delegates."""

from __future__ import annotations


class UnicastDelegate:
    """Holds one callback that can be executed."""

    __slots__ = ("_callback",)

    def __init__(self):
        self._callback = None

    def bind(self, callback):
        """Replace the bound callback."""
        self._callback = callback

    def unbind(self):
        """Remove the bound callback."""
        self._callback = None

    def is_bound(self):
        """Whether a callback is bound."""
        return self._callback is not None

    def execute(self, *args):
        """Call the bound callback, returning its result, or None if unbound."""
        if self._callback is None:
            return None
        return self._callback(*args)

    def __call__(self, *args):
        return self.execute(*args)


class MulticastDelegate:
    """Holds a list of distinct callbacks that are all called on broadcast."""

    __slots__ = ("_callbacks",)

    def __init__(self):
        self._callbacks = []

    def add(self, callback):
        """Add a callback unless an equal one is already present."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove(self, callback):
        """Remove the first callback equal to the given one, if any."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def broadcast(self, *args):
        """Call every callback in the order they were added."""
        for callback in list(self._callbacks):
            callback(*args)

    def __call__(self, *args):
        self.broadcast(*args)

    def __len__(self):
        return len(self._callbacks)