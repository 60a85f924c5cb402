import json
import logging
import os

import networkx as nx

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when the network file is structurally malformed."""


# ---------- GRAPH CONSTRUCTION ----------

def build_graph(raw):
    """
    Builds a directed multigraph from the raw ``{"nodes": [...], "links": [...]}``
    structure. Nodes keep file order and each link records its position in the
    file. Links that name a node id not present in ``nodes`` are dropped and
    reported once as a warning.
    """
    if not isinstance(raw, dict):
        raise DatasetError("Network data must be an object with 'nodes' and 'links'.")

    G = nx.MultiDiGraph()
    for node in raw.get("nodes", []):
        if "id" not in node:
            raise DatasetError(f"Node without an id: {node!r}")
        node_id = node["id"]
        if node_id in G:
            raise DatasetError(f"Duplicate node id: {node_id!r}")
        organizer = node.get("organizer", False)
        if not isinstance(organizer, bool):
            raise DatasetError(f"Node {node_id!r} has a non-boolean organizer flag: {organizer!r}")
        G.add_node(
            node_id,
            name=node.get("name", node_id),
            organizer=organizer,
            group=node.get("group"),
        )

    dropped = 0
    for order, link in enumerate(raw.get("links", [])):
        if "source" not in link or "target" not in link:
            raise DatasetError(f"Link without source/target: {link!r}")
        u, v = link["source"], link["target"]
        if u not in G or v not in G:
            dropped += 1
            continue
        G.add_edge(u, v, value=link.get("value", 1), order=order)

    if dropped:
        logger.warning("Dropped %d link(s) referencing unknown node ids", dropped)
    return G


def create_graph_data(G):
    """Converts the graph back to the JSON payload the browser views consume, links in file order."""
    return {
        "nodes": [
            {
                "id": node,
                "name": data["name"],
                "organizer": data["organizer"],
                "group": data["group"],
            }
            for node, data in G.nodes(data=True)
        ],
        "links": [
            {"source": u, "target": v, "value": data["value"]}
            for u, v, data in sorted(G.edges(data=True), key=lambda edge: edge[2]["order"])
        ],
    }


# ---------- LOADING ----------

def load_dataset(path):
    """
    Reads the network file at ``path``. Returns ``None`` when the file is not
    there yet so the page can keep showing its loading placeholder.
    """
    if not os.path.isfile(path):
        logger.error("Network data file not found: %s", path)
        return None

    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    G = build_graph(raw)
    logger.info(
        "Loaded network data: %d nodes, %d links", G.number_of_nodes(), G.number_of_edges()
    )
    return create_graph_data(G)
