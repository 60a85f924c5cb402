import json

from network_map.config import (
    ALERT_COLOR,
    FORCE_LAYOUT,
    GEOMETRY,
    MEMBER_COLOR,
    NODE_STYLE,
    ORGANIZER_COLOR,
)
from network_map.highlight import COORDINATOR_SCRIPT


def node_paint(node, highlighted_id=None):
    """
    Color and label rule for one node. The highlighted node is always drawn in
    the alert color; organizers and the highlighted node keep a visible label.
    """
    is_highlighted = highlighted_id is not None and node["id"] == highlighted_id
    if is_highlighted:
        color = ALERT_COLOR
    elif node.get("organizer"):
        color = ORGANIZER_COLOR
    else:
        color = MEMBER_COLOR
    return {"color": color, "label": bool(node.get("organizer")) or is_highlighted}


def build_paint_map(nodes, highlighted_id=None):
    return {node["id"]: node_paint(node, highlighted_id) for node in nodes}


def build_paint_table(nodes):
    """
    Every look a node can take, computed once at load: ``base`` with nothing
    highlighted and ``highlighted`` for the node under the highlight. The
    browser picks between them on each paint.
    """
    return {
        "base": build_paint_map(nodes),
        "highlighted": {node["id"]: node_paint(node, node["id"]) for node in nodes},
    }


# ----------- Clientside Renderer -----------

# Builds the force-graph instance once. Each frame reads the shared highlight
# directly, and node hover writes it without leaving the browser.
RENDER_SCRIPT = """
function(paintTable, graphDataJson) {
%(coordinator)s
    if (!paintTable || !graphDataJson) {
        return '';
    }
    window.networkMapPaint = paintTable;
    const cfg = %(force)s;
    const style = %(style)s;

    if (!window.networkMapGraph) {
        const interval = setInterval(() => {
            if (!window.ForceGraph || !window.d3) return;
            clearInterval(interval);
            const container = document.getElementById("network-graph");
            const graphData = JSON.parse(graphDataJson);
            const fallback = {color: style.defaultColor, label: false};

            const fg = ForceGraph()(container)
                .graphData(graphData)
                .width(window.innerWidth * style.widthRatio)
                .height(window.innerHeight * style.heightRatio)
                .backgroundColor(style.background)
                .nodeAutoColorBy('group')
                .linkColor(() => style.linkColor)
                .linkDirectionalParticles(style.particles)
                .linkDirectionalParticleSpeed(link => (link.value || 0) * style.particleSpeed)
                .d3VelocityDecay(cfg.velocityDecay)
                .autoPauseRedraw(false)
                .nodeCanvasObject((node, ctx, globalScale) => {
                    const paint = window.networkMapPaint;
                    const look = (node.id === window.networkMapHighlight.current && paint.highlighted[node.id])
                        || paint.base[node.id] || fallback;
                    ctx.beginPath();
                    ctx.arc(node.x, node.y, style.nodeRadius, 0, 2 * Math.PI, false);
                    ctx.fillStyle = look.color;
                    ctx.fill();
                    if (look.label) {
                        ctx.font = `${style.fontSize / globalScale}px Sans-Serif`;
                        ctx.textAlign = 'center';
                        ctx.textBaseline = 'middle';
                        ctx.fillText(node.name, node.x, node.y - style.labelOffset);
                    }
                })
                .onNodeHover(node => {
                    window.networkMapHighlight.graphHover(
                        node ? {id: node.id, organizer: !!node.organizer} : null
                    );
                });

            fg.d3Force('charge').strength(cfg.chargeStrength);
            fg.d3Force('link').distance(cfg.linkDistance);
            fg.d3Force('x', d3.forceX().strength(cfg.xStrength));
            fg.d3Force('y', d3.forceY().strength(cfg.yStrength));

            window.networkMapGraph = fg;
        }, 100);
    }
    return '';
}
"""


def build_render_script(force=FORCE_LAYOUT, style=NODE_STYLE, geometry=GEOMETRY):
    return RENDER_SCRIPT % {
        "coordinator": COORDINATOR_SCRIPT,
        "force": json.dumps(force.to_js()),
        "style": json.dumps(style.to_js(geometry)),
    }
