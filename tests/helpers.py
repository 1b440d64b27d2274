"""Plain builders for node / edge records as a JSON client would send them."""


def make_nodes(*ids, coords=None):
    coords = coords or {}
    nodes = []
    for i, nid in enumerate(ids):
        x, y = coords.get(nid, (i * 100.0, 0.0))
        nodes.append({"id": nid, "x": x, "y": y})
    return nodes


def make_edge(source, target, weight=1):
    return {"id": f"edge-{source}-{target}", "source": source, "target": target, "weight": weight}


def both_ways(source, target, weight=1):
    return [make_edge(source, target, weight), make_edge(target, source, weight)]
