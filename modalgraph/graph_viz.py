"""
Graph visualizer that produces an ECharts-compatible configuration for
rendering the editor's graph document.

The document is converted to a NetworkX DiGraph first; the output is a plain
dict that can be handed to NiceGUI's ui.echart.
"""

from typing import Any, Dict, List

import networkx as nx

from modalgraph.graph import Graph

NODE_COLOR = "#5470c6"
ISOLATED_NODE_COLOR = "#91cc75"
EDGE_COLOR = "#bdbdbd"


class GraphVisualizer:
    """
    Build an ECharts option (dict) with a single 'graph' series:
      {
        "series": [
          {
            "type": "graph",
            "layout": "force",
            "data": [{"id": "0", "name": "0", ...}, ...],
            "links": [{"source": "0", "target": "1", "name": "e0", ...}, ...],
            ...
          }
        ]
      }

    ECharts identifies nodes by string, so vertex ids are rendered as strings.
    Vertices without any edge get a distinct color.
    """

    def __init__(self):
        self.G = nx.DiGraph()

    def generate_echarts(self, graph: Graph) -> Dict[str, Any]:
        self.G = graph.to_networkx()

        data: List[Dict[str, Any]] = []
        for n in self.G.nodes():
            color = ISOLATED_NODE_COLOR if self.G.degree(n) == 0 else NODE_COLOR
            data.append({
                "id": str(n),
                "name": str(n),
                "symbolSize": 28,
                "itemStyle": {"color": color},
                "label": {"show": True, "formatter": str(n)},
            })

        links: List[Dict[str, Any]] = []
        for src, tgt, attrs in self.G.edges(data=True):
            links.append({
                "source": str(src),
                "target": str(tgt),
                "name": f"e{attrs.get('edge_id')}",
                "lineStyle": {"color": EDGE_COLOR, "width": 1, "opacity": 0.9},
            })

        return {
            "series": [
                {
                    "type": "graph",
                    "layout": "force",
                    "roam": True,
                    "edgeSymbol": ["none", "arrow"],
                    "data": data,
                    "links": links,
                    "force": {"repulsion": 200, "edgeLength": [50, 150]},
                    "emphasis": {"focus": "adjacency"},
                }
            ]
        }
