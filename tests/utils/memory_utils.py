"""
Memory testing utilities.

These helpers check that tracked maps hold no hidden references and are
released like any other Python object.

Examples:
    Single object:

        >>> from tests.utils.memory_utils import assert_cleaned_up
        >>> assert_cleaned_up(lambda: TrackedMap({"a": 1}))

    Repeated operation:

        >>> def operation():
        ...     row = TrackedMap()
        ...     row["a"] = [1, 2, 3]
        ...     row.reset()
        >>> assert_no_object_leak(operation, "TrackedMap")
"""

import gc
import weakref
from collections import defaultdict
from typing import Any, Callable, Dict, Optional


def assert_cleaned_up(
    factory: Callable[[], Any], description: str = "Object should be cleaned up"
) -> None:
    """Assert that an object gets garbage collected after deletion.

    Args:
        factory: Builds the object to test; no other reference may survive
        description: Custom description for the assertion failure
    """
    obj = factory()
    obj_ref = weakref.ref(obj)

    del obj
    gc.collect()

    assert obj_ref() is None, f"{description}: object was not cleaned up"


def count_types() -> Dict[str, int]:
    """Count instances of each object type currently tracked by the collector."""
    gc.collect()
    counts = defaultdict(int)
    for obj in gc.get_objects():
        counts[type(obj).__name__] += 1
    return counts


def assert_no_object_leak(
    operation: Callable[[], None],
    type_name: str,
    tolerance: int = 0,
    description: Optional[str] = None,
) -> None:
    """Assert that an operation doesn't leave objects of a type behind.

    Args:
        operation: Function to execute that should not create persistent objects
        type_name: Name of the object type to monitor (e.g., 'TrackedMap')
        tolerance: Allowed variance in object count
        description: Custom description for assertion failures
    """
    if description is None:
        description = f"Operation should not leak {type_name} objects"

    initial_count = count_types().get(type_name, 0)

    operation()

    final_count = count_types().get(type_name, 0)

    assert (
        abs(final_count - initial_count) <= tolerance
    ), f"{description}: {type_name} count changed from {initial_count} to {final_count}"
