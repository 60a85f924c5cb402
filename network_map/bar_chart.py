import plotly.graph_objs as go

from network_map.config import (
    ALERT_COLOR,
    BACKGROUND_COLOR,
    BAR_COLOR,
    GEOMETRY,
    TEXT_COLOR,
)
from network_map.highlight import COORDINATOR_SCRIPT


def bar_colors(counts, highlighted_id=None):
    return [ALERT_COLOR if entry["id"] == highlighted_id else BAR_COLOR for entry in counts]


def build_bar_color_table(counts):
    """Bar colors for no highlight and for each organizer highlighted, computed once."""
    return {
        "none": bar_colors(counts),
        "byId": {entry["id"]: bar_colors(counts, entry["id"]) for entry in counts},
    }


# ----------- Figure Builder -----------

def create_bar_figure(counts, highlighted_id=None, geometry=GEOMETRY):
    ids = [entry["id"] for entry in counts]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=ids,
        y=[entry["count"] for entry in counts],
        customdata=ids,
        text=[entry["name"] for entry in counts],
        textposition="none",
        marker=dict(color=bar_colors(counts, highlighted_id)),
        hovertemplate="%{text}: %{y} contacts<extra></extra>",
        showlegend=False,
    ))

    fig.update_layout(
        height=geometry.chart_height,
        margin=geometry.margins(),
        bargap=0.1,
        paper_bgcolor=BACKGROUND_COLOR,
        plot_bgcolor=BACKGROUND_COLOR,
        font=dict(color=TEXT_COLOR),
        xaxis=dict(
            type="category",
            tickmode="array",
            tickvals=ids,
            ticktext=[entry["name"] for entry in counts],
            tickangle=-45,
        ),
        yaxis=dict(rangemode="tozero", showgrid=False),
        hovermode="closest",
    )

    return fig


# ----------- Clientside Hover -----------

# Bar hover writes the shared highlight in the browser.
BAR_HOVER_SCRIPT = """
function(hoverData) {
%(coordinator)s
    const point = hoverData && hoverData.points && hoverData.points[0];
    window.networkMapHighlight.barHover(point ? point.customdata : null);
    return '';
}
""" % {"coordinator": COORDINATOR_SCRIPT}

# Recolors the bars whenever the shared highlight changes, from either view.
BAR_RESTYLE_SCRIPT = """
function(colorTable) {
%(coordinator)s
    if (!colorTable) {
        return '';
    }
    window.networkMapBarColors = colorTable;
    const highlight = window.networkMapHighlight;
    if (!highlight.barsSubscribed) {
        highlight.barsSubscribed = true;
        highlight.subscribe(nodeId => {
            const table = window.networkMapBarColors;
            const plot = document.querySelector('#contact-chart .js-plotly-plot');
            if (!plot || !window.Plotly) return;
            const colors = (nodeId !== null && table.byId[nodeId]) || table.none;
            window.Plotly.restyle(plot, {'marker.color': [colors]}, [0]);
        });
    }
    return '';
}
""" % {"coordinator": COORDINATOR_SCRIPT}
