"""State-diagram-specific configuration values."""

from __future__ import annotations

from mermaidgen.base import ConfigurationProperties


class StateConfigurationProperties(ConfigurationProperties):
    """State diagram settings, rendered after any general settings held in ``base``."""

    def __init__(self) -> None:
        super().__init__("state")
        self.base = ConfigurationProperties()

    def set_title_top_margin(self, value: int) -> "StateConfigurationProperties":
        self.set("titleTopMargin", value)
        return self

    def set_arrow_marker_absolute(self, value: bool) -> "StateConfigurationProperties":
        self.set("arrowMarkerAbsolute", value)
        return self

    def set_divider_margin(self, value: int) -> "StateConfigurationProperties":
        self.set("dividerMargin", value)
        return self

    def set_size_unit(self, value: int) -> "StateConfigurationProperties":
        self.set("sizeUnit", value)
        return self

    def set_padding(self, value: int) -> "StateConfigurationProperties":
        self.set("padding", value)
        return self

    def set_text_height(self, value: int) -> "StateConfigurationProperties":
        self.set("textHeight", value)
        return self

    def set_title_shift(self, value: int) -> "StateConfigurationProperties":
        self.set("titleShift", value)
        return self

    def set_note_margin(self, value: int) -> "StateConfigurationProperties":
        self.set("noteMargin", value)
        return self

    def set_node_spacing(self, value: int) -> "StateConfigurationProperties":
        self.set("nodeSpacing", value)
        return self

    def set_rank_spacing(self, value: int) -> "StateConfigurationProperties":
        self.set("rankSpacing", value)
        return self

    def set_fork_width(self, value: int) -> "StateConfigurationProperties":
        self.set("forkWidth", value)
        return self

    def set_fork_height(self, value: int) -> "StateConfigurationProperties":
        self.set("forkHeight", value)
        return self

    def set_mini_padding(self, value: int) -> "StateConfigurationProperties":
        self.set("miniPadding", value)
        return self

    def set_font_size_factor(self, value: int) -> "StateConfigurationProperties":
        self.set("fontSizeFactor", value)
        return self

    def set_font_size(self, value: int) -> "StateConfigurationProperties":
        self.set("fontSize", value)
        return self

    def set_label_height(self, value: int) -> "StateConfigurationProperties":
        self.set("labelHeight", value)
        return self

    def set_edge_length_factor(self, value: str) -> "StateConfigurationProperties":
        self.set("edgeLengthFactor", value)
        return self

    def set_composit_title_size(self, value: int) -> "StateConfigurationProperties":
        self.set("compositTitleSize", value)
        return self

    def set_radius(self, value: int) -> "StateConfigurationProperties":
        self.set("radius", value)
        return self

    def set_default_renderer(self, value: str) -> "StateConfigurationProperties":
        self.set("defaultRenderer", value)
        return self

    def __str__(self) -> str:
        return str(self.base) + super().__str__()