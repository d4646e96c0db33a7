import logging

from dirtymap import TrackedMap

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Tracking a row loaded from storage")
print("-" * 100)
print()

# Seeding a map never marks anything dirty.
row = TrackedMap({"name": "Alice", "age": 30, "tags": ["admin"]})
print(f"Dirty after load: {row.is_dirty()}")

# Writing the value already stored is not a change.
row["name"] = "Alice"
print(f"Dirty after rewriting name: {row.is_dirty()}")

# Writing a different value is.
row["age"] = 31
print(f"Dirty keys: {row.dirty_keys()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Shallow comparison of composite values")
print("-" * 100)
print()

# The same list, mutated in place, looks unchanged.
row["tags"].append("owner")
row["tags"] = row["tags"]
print(f"tags dirty after in-place edit: {row.is_dirty('tags')}")

# A new list object is a change, even with identical contents.
row["tags"] = list(row["tags"])
print(f"tags dirty after assigning a copy: {row.is_dirty('tags')}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Persisting and resetting")
print("-" * 100)
print()

print(f"Would persist: {row.dirty_slice()}")
row.reset()
print(f"Dirty after reset: {row.is_dirty()}, stored: {dict(row)}")
