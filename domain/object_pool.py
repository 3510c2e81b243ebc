# domain/object_pool.py
import threading


class PoolError(ValueError):
    """Raised by a strict pool when asked to release a resource it has not leased."""


class PooledObjectMixin:
    """
    A mixin for domain objects that are managed by a ResourcePool.

    Every instance gets an explicit `resource_id` at construction time. The id
    comes from a class-level counter, so it is never reused while the process
    lives. The ResourcePool is responsible for setting the `pool` attribute.
    """

    id_counter = 0
    _id_lock = threading.Lock()

    def __init__(self, *args, **kwargs):
        # This allows the mixin to be safely used with classes that have their own __init__
        super().__init__(*args, **kwargs)
        with PooledObjectMixin._id_lock:
            self.resource_id = PooledObjectMixin.id_counter
            PooledObjectMixin.id_counter += 1
        self.pool = None

    def release(self):
        """Returns this object to the pool it originated from."""
        if not self.pool:
            raise RuntimeError("This object does not belong to a pool.")
        return self.pool.release(self)


class ResourcePool:
    """
    An unbounded object pool that hands out reusable resources.

    Resources live in exactly one of two collections, `free` or `busy`, both
    keyed by `resource_id`. New resources are only created when nothing is free.
    """

    def __init__(self, factory, strict=False):
        """
        Initializes the pool.

        Args:
            factory (callable): A no-argument function that returns a new object
                                instance when no free object is available. The
                                object should inherit from PooledObjectMixin.
            strict (bool): If True, releasing an object that is not currently
                           busy raises PoolError instead of being ignored.
        """
        self._factory = factory
        self.strict = strict
        self._free = {}
        self._busy = {}
        self._lock = threading.Lock()

    def acquire(self, *args, **kwargs):
        """
        Leases an object from the pool.

        A free object is recycled when one exists, otherwise the factory builds
        a new one. Either way the object's `reset(*args, **kwargs)` method, if
        it has one, is called before the object is marked busy. If `reset`
        raises, the object is kept as free and the error propagates.

        Returns:
            The leased object.
        """
        with self._lock:
            if self._free:
                _, obj = self._free.popitem()
            else:
                obj = self._factory()
                obj.pool = self

            reset = getattr(obj, "reset", None)
            if callable(reset):
                try:
                    reset(*args, **kwargs)
                except Exception:
                    self._free[obj.resource_id] = obj
                    raise

            self._busy[obj.resource_id] = obj
            return obj

    def release(self, obj) -> bool:
        """
        Returns a leased object to the pool, making it available for reuse.

        Objects the pool does not currently hold as busy (double release, or
        an object from somewhere else) are ignored, unless the pool is strict.

        Returns:
            True if the object moved from busy to free.
        """
        resource_id = getattr(obj, "resource_id", None)
        with self._lock:
            if self._busy.get(resource_id) is not obj:
                if self.strict:
                    raise PoolError(
                        f"Resource {resource_id} is not leased from this pool."
                    )
                return False
            del self._busy[resource_id]
            self._free[resource_id] = obj
            return True

    def report(self) -> int:
        """Total number of objects the pool has created (free + busy)."""
        with self._lock:
            return len(self._free) + len(self._busy)

    def free_count(self) -> int:
        with self._lock:
            return len(self._free)

    def busy_count(self) -> int:
        with self._lock:
            return len(self._busy)

    def find_busy(self, resource_id):
        """Returns the leased object with the given id, or None."""
        with self._lock:
            return self._busy.get(resource_id)

    def busy_resources(self) -> list:
        with self._lock:
            return [self._busy[key] for key in sorted(self._busy)]
