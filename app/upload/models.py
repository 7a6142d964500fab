from collections.abc import Callable
from dataclasses import dataclass, field


def _no_content() -> bytes:
    return b""


@dataclass(frozen=True)
class IncomingFile:
    """An uploaded file as received at the HTTP boundary.

    The body stays with the transport until ``read()`` is called, so a
    request can be refused on its metadata alone.
    """

    name: str
    size: int
    content_type: str
    reader: Callable[[], bytes] = field(default=_no_content, repr=False, compare=False)

    @classmethod
    def from_bytes(cls, name: str, content_type: str, data: bytes) -> "IncomingFile":
        return cls(name=name, size=len(data), content_type=content_type, reader=lambda: data)

    @property
    def extension(self) -> str:
        """Text after the last dot of the name, or "png" when there is none."""
        if "." not in self.name:
            return "png"
        return self.name.rsplit(".", 1)[1] or "png"

    def read(self) -> bytes:
        return self.reader()
