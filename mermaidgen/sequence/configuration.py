"""Sequence-diagram-specific configuration values."""

from __future__ import annotations

from mermaidgen.base import ConfigurationProperties


class SequenceConfigurationProperties(ConfigurationProperties):
    """Sequence diagram settings, rendered after any general settings held in ``base``."""

    def __init__(self) -> None:
        super().__init__("sequence")
        self.base = ConfigurationProperties()

    def set_arrow_marker_absolute(
        self, value: bool
    ) -> "SequenceConfigurationProperties":
        self.set("arrowMarkerAbsolute", value)
        return self

    def set_hide_unused_participants(
        self, value: bool
    ) -> "SequenceConfigurationProperties":
        self.set("hideUnusedParticipants", value)
        return self

    def set_activation_width(self, value: int) -> "SequenceConfigurationProperties":
        self.set("activationWidth", value)
        return self

    def set_diagram_margin_x(self, value: int) -> "SequenceConfigurationProperties":
        self.set("diagramMarginX", value)
        return self

    def set_diagram_margin_y(self, value: int) -> "SequenceConfigurationProperties":
        self.set("diagramMarginY", value)
        return self

    def set_actor_margin(self, value: int) -> "SequenceConfigurationProperties":
        self.set("actorMargin", value)
        return self

    def set_width(self, value: int) -> "SequenceConfigurationProperties":
        self.set("width", value)
        return self

    def set_height(self, value: int) -> "SequenceConfigurationProperties":
        self.set("height", value)
        return self

    def set_box_margin(self, value: int) -> "SequenceConfigurationProperties":
        self.set("boxMargin", value)
        return self

    def set_box_text_margin(self, value: int) -> "SequenceConfigurationProperties":
        self.set("boxTextMargin", value)
        return self

    def set_note_margin(self, value: int) -> "SequenceConfigurationProperties":
        self.set("noteMargin", value)
        return self

    def set_message_margin(self, value: int) -> "SequenceConfigurationProperties":
        self.set("messageMargin", value)
        return self

    def set_message_align(self, value: str) -> "SequenceConfigurationProperties":
        self.set("messageAlign", value)
        return self

    def set_mirror_actors(self, value: bool) -> "SequenceConfigurationProperties":
        self.set("mirrorActors", value)
        return self

    def set_force_menus(self, value: bool) -> "SequenceConfigurationProperties":
        self.set("forceMenus", value)
        return self

    def set_bottom_margin_adj(self, value: int) -> "SequenceConfigurationProperties":
        self.set("bottomMarginAdj", value)
        return self

    def set_right_angles(self, value: bool) -> "SequenceConfigurationProperties":
        self.set("rightAngles", value)
        return self

    def set_show_sequence_numbers(
        self, value: bool
    ) -> "SequenceConfigurationProperties":
        self.set("showSequenceNumbers", value)
        return self

    def set_actor_font_size(self, value: int) -> "SequenceConfigurationProperties":
        self.set("actorFontSize", value)
        return self

    def set_actor_font_family(self, value: str) -> "SequenceConfigurationProperties":
        self.set("actorFontFamily", value)
        return self

    def set_actor_font_weight(self, value: int) -> "SequenceConfigurationProperties":
        self.set("actorFontWeight", value)
        return self

    def set_note_font_size(self, value: int) -> "SequenceConfigurationProperties":
        self.set("noteFontSize", value)
        return self

    def set_note_font_family(self, value: str) -> "SequenceConfigurationProperties":
        self.set("noteFontFamily", value)
        return self

    def set_note_font_weight(self, value: int) -> "SequenceConfigurationProperties":
        self.set("noteFontWeight", value)
        return self

    def set_note_align(self, value: str) -> "SequenceConfigurationProperties":
        self.set("noteAlign", value)
        return self

    def set_message_font_size(self, value: int) -> "SequenceConfigurationProperties":
        self.set("messageFontSize", value)
        return self

    def set_message_font_family(
        self, value: str
    ) -> "SequenceConfigurationProperties":
        self.set("messageFontFamily", value)
        return self

    def set_message_font_weight(
        self, value: int
    ) -> "SequenceConfigurationProperties":
        self.set("messageFontWeight", value)
        return self

    def set_wrap(self, value: bool) -> "SequenceConfigurationProperties":
        self.set("wrap", value)
        return self

    def set_wrap_padding(self, value: int) -> "SequenceConfigurationProperties":
        self.set("wrapPadding", value)
        return self

    def set_label_box_width(self, value: int) -> "SequenceConfigurationProperties":
        self.set("labelBoxWidth", value)
        return self

    def set_label_box_height(self, value: int) -> "SequenceConfigurationProperties":
        self.set("labelBoxHeight", value)
        return self

    def __str__(self) -> str:
        return str(self.base) + super().__str__()