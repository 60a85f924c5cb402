import json
import logging

from dash import html, dcc
from dash.dependencies import Output, Input
from dash.exceptions import PreventUpdate
from dash_extensions.enrich import DashProxy, TriggerTransform, Trigger

from network_map import config
from network_map.bar_chart import (
    BAR_HOVER_SCRIPT,
    BAR_RESTYLE_SCRIPT,
    build_bar_color_table,
    create_bar_figure,
)
from network_map.contacts import count_organizer_contacts
from network_map.dataset import load_dataset
from network_map.graph_view import build_paint_table, build_render_script


# ----------- Styles -----------

page_style = {
    "backgroundColor": config.BACKGROUND_COLOR,
    "color": config.TEXT_COLOR,
    "fontFamily": "Sans-Serif",
    "minHeight": "100vh",
    "padding": "20px",
}

hidden_style = {"display": "none"}
graph_style = {
    "width": f"{config.GEOMETRY.graph_width_ratio * 100:.0f}vw",
    "height": f"{config.GEOMETRY.graph_height_ratio * 100:.0f}vh",
}
chart_style = {
    "width": f"{config.GEOMETRY.chart_width_ratio * 100:.0f}vw",
    "height": f"{config.GEOMETRY.chart_height}px",
}


def load_payload(dataset_path):
    """
    Everything the page needs from the network file, computed once: graph JSON
    for the force graph, contact counts for the chart, and the paint and bar
    color tables the browser reads on each highlight change. None if the file
    is not there yet.
    """
    graph_data = load_dataset(dataset_path)
    if graph_data is None:
        return None
    counts = count_organizer_contacts(graph_data["nodes"], graph_data["links"])
    return {
        "graph": json.dumps(graph_data),
        "counts": counts,
        "paint": build_paint_table(graph_data["nodes"]),
        "bars": build_bar_color_table(counts),
    }


def serve_payload(payload):
    if payload is None:
        raise PreventUpdate
    return payload["graph"], payload["counts"], payload["paint"], payload["bars"]


def loading_styles(graph_data_json):
    """Placeholder and graph container styles: placeholder until data arrives."""
    if not graph_data_json:
        return {}, {**graph_style, **hidden_style}
    return hidden_style, graph_style


def bar_figure(counts):
    return create_bar_figure(counts or [])


def build_layout():
    return html.Div([
        html.Header([
            html.H1(config.PAGE_TITLE, className="site-title"),
            html.P(config.PAGE_DESCRIPTION, className="description"),
        ], className="header-section"),

        html.Div([
            html.P("Loading data...", id="graph-loading"),
            html.Div(id="network-graph", style={**graph_style, **hidden_style}),
        ], id="graph-section", className="graph-section"),

        html.Div([
            html.H3(config.CHART_TITLE, style={"color": config.TEXT_COLOR}),
            dcc.Graph(
                id="contact-chart",
                figure=create_bar_figure([]),
                clear_on_unhover=True,
                config={"displayModeBar": False},
                style=chart_style,
            ),
        ], className="bar-chart-section"),

        html.Div(id="graph-action", style=hidden_style),
        html.Div(id="chart-action", style=hidden_style),
        html.Div(id="hover-action", style=hidden_style),

        dcc.Store(id="graph-data-store"),
        dcc.Store(id="contact-counts-store", data=[]),
        dcc.Store(id="highlight-store", data=None),
        dcc.Store(id="paint-table-store"),
        dcc.Store(id="bar-color-store"),
    ], className="network-container", style=page_style)


def register_callbacks(app, payload):

    @app.callback(
        Output("graph-data-store", "data"),
        Output("contact-counts-store", "data"),
        Output("paint-table-store", "data"),
        Output("bar-color-store", "data"),
        Trigger("graph-section", "id"),
    )
    def load_network():
        return serve_payload(payload)

    app.callback(
        Output("graph-loading", "style"),
        Output("network-graph", "style"),
        Input("graph-data-store", "data"),
    )(loading_styles)

    app.callback(
        Output("contact-chart", "figure"),
        Input("contact-counts-store", "data"),
    )(bar_figure)

    # Highlight changes never leave the browser.
    app.clientside_callback(
        build_render_script(),
        Output("graph-action", "children"),
        Input("paint-table-store", "data"),
        Input("graph-data-store", "data"),
    )

    app.clientside_callback(
        BAR_RESTYLE_SCRIPT,
        Output("chart-action", "children"),
        Input("bar-color-store", "data"),
    )

    app.clientside_callback(
        BAR_HOVER_SCRIPT,
        Output("hover-action", "children"),
        Input("contact-chart", "hoverData"),
        prevent_initial_call=True
    )


def create_app(dataset_path=config.DATASET_PATH):
    app = DashProxy(__name__,
                    title=config.PAGE_TITLE,
                    external_scripts=config.external_scripts,
                    transforms=[TriggerTransform()])
    app.layout = build_layout()
    register_callbacks(app, load_payload(dataset_path))
    return app


app = create_app()
server = app.server

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
