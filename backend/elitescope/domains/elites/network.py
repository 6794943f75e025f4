"""Ego graph construction for the network visualization."""

from typing import Dict, Iterable, Optional

from elitescope import schemas

MIN_STRENGTH = 1
MAX_STRENGTH = 10


def _clamp_strength(strength: Optional[int]) -> int:
    if strength is None:
        return MIN_STRENGTH
    return max(MIN_STRENGTH, min(MAX_STRENGTH, strength))


def build_ego_graph(
    center: schemas.Elite,
    connections: Iterable[schemas.EliteConnection],
    names: Dict[int, str],
) -> schemas.EliteNetwork:
    """Build the one-hop graph around ``center``.

    Every connection becomes an edge oriented away from the center. Each
    distinct neighbour becomes one node, labelled with its name when known.
    Edge weight is strength scaled to (0, 1].

    Args:
        center: The elite at the middle of the graph.
        connections: Connections touching ``center``.
        names: Elite id to name, for neighbour labels.

    Returns:
        schemas.EliteNetwork: Center node first, then neighbours in order of
            first appearance.
    """
    nodes = [schemas.NetworkNode(id=center.id, label=center.name, is_center=True)]
    edges = []
    seen = {center.id}

    for conn in connections:
        other = conn.elite_id_2 if conn.elite_id_1 == center.id else conn.elite_id_1
        strength = _clamp_strength(conn.strength)
        edges.append(
            schemas.NetworkEdge(
                id=conn.id,
                source=center.id,
                target=other,
                connection_type=conn.connection_type,
                strength=strength,
                weight=strength / MAX_STRENGTH,
            )
        )
        if other not in seen:
            seen.add(other)
            nodes.append(
                schemas.NetworkNode(id=other, label=names.get(other, f"Elite #{other}"))
            )

    return schemas.EliteNetwork(center_id=center.id, nodes=nodes, edges=edges)
