"""Type aliases and protocols for wmsgetmap."""

from typing import TYPE_CHECKING, Any, Dict, List, Protocol, Sequence, TypeAlias, Union

# Type aliases for better user experience
NameList: TypeAlias = Union[str, Sequence[str]]  # "a,b" or ["a", "b"]
ConfigRecord: TypeAlias = Dict[str, Any]
QueryParts: TypeAlias = List[str]


# Protocols for the tile-fetch subsystem
class TileUrlFactory(Protocol):
    """Protocol for objects that produce a request URL per tile."""

    def build_url(self, tile: "Tile", image_format: Union[str, "ImageFormat"]) -> str:
        """Return the URL to fetch ``tile`` encoded as ``image_format``."""
        ...


if TYPE_CHECKING:
    from .types import ImageFormat, Tile
