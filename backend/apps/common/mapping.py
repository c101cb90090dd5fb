from typing import Any, Iterable, List


def merge_non_null(source: Any, target: Any, fields: Iterable[str]) -> List[str]:
    """Copy every listed attribute of ``source`` onto ``target`` unless it is None.

    Fields that are None on the source keep their current value on the target,
    which is what partial updates rely on. Returns the names that were copied.
    """
    copied = []
    for field in fields:
        value = getattr(source, field, None)
        if value is None:
            continue
        setattr(target, field, value)
        copied.append(field)
    return copied


def overwrite_all(source: Any, target: Any, fields: Iterable[str]) -> None:
    """Copy every listed attribute of ``source`` onto ``target``, None included."""
    for field in fields:
        setattr(target, field, getattr(source, field, None))
