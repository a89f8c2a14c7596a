from os import PathLike
from typing import Any, Mapping, Protocol, Sequence, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Values accepted by the value tree builder. Anything that is not a mapping
# or a sequence is treated as a scalar (or an opaque custom value).
StructuredValue = Union[None, bool, int, float, str, bytes, Mapping[Any, Any], Sequence[Any], Any]


class TextSink(Protocol):
    """Anything text can be written to: SafeWriter, a text file, io.StringIO."""

    def write(self, data: str) -> Any: ...
