"""
Shared highlight state between the graph view and the bar chart.

The live value is held in the browser by ``window.networkMapHighlight``, a
small observable both views write through and subscribe to, so a hover in one
view is visible to the other on its very next paint without a server round
trip. Every change is mirrored into ``dcc.Store(id="highlight-store")``.

``HighlightCoordinator`` is the same state machine in Python: the transitions
the browser object must follow, with the last writer always winning.
"""


def on_graph_hover(current, node):
    """``node`` is ``{"id", "organizer"}`` on enter and ``None`` on leave."""
    if not node:
        return None
    if node.get("organizer"):
        return node["id"]
    # non-organizers never take the highlight
    return current


def on_bar_hover(current, bar_id):
    # bars only exist for organizers, so any bar may take the highlight
    return bar_id


class HighlightCoordinator:
    def __init__(self):
        self.current = None
        self._listeners = []

    def subscribe(self, listener):
        self._listeners.append(listener)
        listener(self.current)

    def set(self, node_id):
        if node_id == self.current:
            return
        self.current = node_id
        for listener in self._listeners:
            listener(node_id)

    def graph_hover(self, node):
        self.set(on_graph_hover(self.current, node))

    def bar_hover(self, bar_id):
        self.set(on_bar_hover(self.current, bar_id))


# ----------- Browser Coordinator -----------

# Statement block pasted at the top of every clientside function that touches
# the highlight; whichever runs first creates the shared object.
COORDINATOR_SCRIPT = """
    if (!window.networkMapHighlight) {
        window.networkMapHighlight = {
            current: null,
            listeners: [],
            subscribe(listener) {
                this.listeners.push(listener);
                listener(this.current);
            },
            set(nodeId) {
                if (nodeId === this.current) return;
                this.current = nodeId;
                this.listeners.forEach(listener => listener(nodeId));
            },
            graphHover(node) {
                if (!node) {
                    this.set(null);
                } else if (node.organizer) {
                    this.set(node.id);
                }
            },
            barHover(barId) {
                this.set(barId === undefined ? null : barId);
            },
        };
        window.networkMapHighlight.subscribe(nodeId => {
            window.dash_clientside.set_props("highlight-store", {data: nodeId});
        });
    }
"""
