"""Rebuild a route from a predecessor map."""

from typing import Optional, Sequence

from ..errors import UnknownCityError, UnreachableError


def reconstruct_path(
    source: int,
    destination: int,
    predecessors: Sequence[Optional[int]],
) -> list[int]:
    """Walk predecessor links back from ``destination`` to ``source``.

    Returns the route ``source .. destination`` inclusive. Raises
    ``UnreachableError`` when the walk runs out of predecessors before it
    reaches ``source``.
    """

    for city_id in (source, destination):
        if not 0 <= city_id < len(predecessors):
            raise UnknownCityError(f"City id {city_id!r} outside the predecessor map")

    path = []
    current: Optional[int] = destination
    # A simple path never has more entries than there are vertices.
    for _ in range(len(predecessors)):
        if current is None:
            break
        path.append(current)
        if current == source:
            path.reverse()
            return path
        current = predecessors[current]

    raise UnreachableError(source, destination)
