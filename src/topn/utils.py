from typing import Any, Optional, TypeVar

T = TypeVar('T')


def exists(value: Any) -> bool:
    return value is not None


def default(value: Optional[T], default_value: T) -> T:
    return value if exists(value) else default_value
