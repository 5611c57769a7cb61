"""Flowchart-specific configuration values."""

from __future__ import annotations

from mermaidgen.base import ConfigurationProperties


class FlowchartConfigurationProperties(ConfigurationProperties):
    """Flowchart settings, rendered after any general settings held in ``base``."""

    def __init__(self) -> None:
        super().__init__("flowchart")
        self.base = ConfigurationProperties()

    def set_title_top_margin(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("titleTopMargin", value)
        return self

    def set_diagram_padding(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("diagramPadding", value)
        return self

    def set_html_labels(self, value: bool) -> "FlowchartConfigurationProperties":
        self.set("htmlLabels", value)
        return self

    def set_node_spacing(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("nodeSpacing", value)
        return self

    def set_rank_spacing(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("rankSpacing", value)
        return self

    def set_curve(self, value: str) -> "FlowchartConfigurationProperties":
        self.set("curve", value)
        return self

    def set_padding(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("padding", value)
        return self

    def set_default_renderer(self, value: str) -> "FlowchartConfigurationProperties":
        self.set("defaultRenderer", value)
        return self

    def set_wrapping_width(self, value: int) -> "FlowchartConfigurationProperties":
        self.set("wrappingWidth", value)
        return self

    def set_arrow_marker_absolute(
        self, value: bool
    ) -> "FlowchartConfigurationProperties":
        self.set("arrowMarkerAbsolute", value)
        return self

    def __str__(self) -> str:
        return str(self.base) + super().__str__()