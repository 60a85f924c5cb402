"""Configuration constants for the organizer network map."""

import os
from dataclasses import dataclass

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DATASET_PATH = os.path.join(PACKAGE_DIR, "data", "network_data.json")

PAGE_TITLE = "Carolina Federation Network Map"
PAGE_DESCRIPTION = (
    "Explore the network of organizers and their connections. "
    "Hover over nodes and bars to interact with the graph."
)
CHART_TITLE = "Organizer Contact Counts"

# ---------- PALETTE ----------
ALERT_COLOR = "red"
ORGANIZER_COLOR = "white"
MEMBER_COLOR = "#ff7f50"
BAR_COLOR = "#ff7f50"
LINK_COLOR = "#6363A6"
BACKGROUND_COLOR = "#1F1F34"
TEXT_COLOR = "white"

external_scripts = [
    "https://unpkg.com/d3-force@3",
    "https://unpkg.com/force-graph",
]


@dataclass(frozen=True)
class ForceLayoutConfig:
    """
    Tuning handed to the force layout engine.

    charge_strength: many-body repulsion (negative pushes nodes apart)
    link_distance:   resting length of every link
    x_strength:      pull toward the vertical centre line (weak = wide spread)
    y_strength:      pull toward the horizontal centre line
    velocity_decay:  friction applied to node velocity each tick
    """
    charge_strength: float = -20
    link_distance: float = 20
    x_strength: float = 0.01
    y_strength: float = 0.05
    velocity_decay: float = 0.6

    def to_js(self):
        return {
            "chargeStrength": self.charge_strength,
            "linkDistance": self.link_distance,
            "xStrength": self.x_strength,
            "yStrength": self.y_strength,
            "velocityDecay": self.velocity_decay,
        }


@dataclass(frozen=True)
class ChartGeometry:
    """Sizes relative to the viewport; heights and margins in pixels."""
    graph_width_ratio: float = 0.7
    graph_height_ratio: float = 0.55
    chart_width_ratio: float = 0.7
    chart_height: int = 250
    margin_top: int = 20
    margin_right: int = 30
    margin_bottom: int = 120  # room for rotated tick labels
    margin_left: int = 40

    def margins(self):
        return dict(
            t=self.margin_top,
            r=self.margin_right,
            b=self.margin_bottom,
            l=self.margin_left,
        )


@dataclass(frozen=True)
class NodeStyle:
    radius: float = 5
    font_size: float = 12
    label_offset: float = 8
    particles: int = 2
    particle_speed: float = 0.001

    def to_js(self, geometry):
        return {
            "nodeRadius": self.radius,
            "fontSize": self.font_size,
            "labelOffset": self.label_offset,
            "particles": self.particles,
            "particleSpeed": self.particle_speed,
            "linkColor": LINK_COLOR,
            "background": BACKGROUND_COLOR,
            "defaultColor": MEMBER_COLOR,
            "widthRatio": geometry.graph_width_ratio,
            "heightRatio": geometry.graph_height_ratio,
        }


FORCE_LAYOUT = ForceLayoutConfig()
GEOMETRY = ChartGeometry()
NODE_STYLE = NodeStyle()