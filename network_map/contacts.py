from collections import Counter


def count_organizer_contacts(nodes, links):
    """
    Counts the links touching each organizer node.

    Returns ``[{"name", "id", "count"}, ...]`` in node order, one entry per
    node flagged ``organizer``. Direction is ignored, and a self-loop counts
    once since it is a single link.
    """
    touches = Counter()
    for link in links:
        for endpoint in {link["source"], link["target"]}:
            touches[endpoint] += 1

    return [
        {"name": node.get("name", node["id"]), "id": node["id"], "count": touches[node["id"]]}
        for node in nodes
        if node.get("organizer")
    ]
