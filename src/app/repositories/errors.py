class DuplicateRecordError(Exception):
    """A write collided with a unique constraint (e.g. a concurrent insert of the same key)"""
