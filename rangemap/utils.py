from collections.abc import Mapping, Sequence
from typing import TypeAlias

JSONDict: TypeAlias = Mapping[str, "JSON"]
JSONList: TypeAlias = Sequence["JSON"]

JSON: TypeAlias = JSONDict | JSONList | str | int | float | bool | None

Triple: TypeAlias = tuple[int, int, int]


def is_natural(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
