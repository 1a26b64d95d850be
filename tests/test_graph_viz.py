from modalgraph.graph import Edge, Graph, Vertex
from modalgraph.graph_viz import EDGE_COLOR, ISOLATED_NODE_COLOR, NODE_COLOR, GraphVisualizer


def find_link(links, src, tgt):
    for l in links:
        if l.get("source") == src and l.get("target") == tgt:
            return l
    return None


def test_echarts_option_from_document():
    """
    Vertices become string-keyed data entries, edges become links named by
    edge id, and vertices without edges get the isolated color.
    """
    g = Graph()
    for i in (0, 1, 2):
        g.add_vertex(Vertex(i))
    g.add_edge(Edge(4, 0, 1))

    echarts_opt = GraphVisualizer().generate_echarts(g)

    assert isinstance(echarts_opt, dict)
    series = echarts_opt["series"][0]
    assert series["type"] == "graph"

    color_map = {d["id"]: d["itemStyle"]["color"] for d in series["data"]}
    assert color_map == {"0": NODE_COLOR, "1": NODE_COLOR, "2": ISOLATED_NODE_COLOR}

    link = find_link(series["links"], "0", "1")
    assert link is not None, "edge 0 -> 1 missing"
    assert link["name"] == "e4"
    assert link["lineStyle"]["color"] == EDGE_COLOR
    assert find_link(series["links"], "1", "0") is None


def test_empty_document():
    series = GraphVisualizer().generate_echarts(Graph())["series"][0]

    assert series["data"] == []
    assert series["links"] == []
