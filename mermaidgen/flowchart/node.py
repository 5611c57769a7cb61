"""Flowchart nodes and the shapes they can take."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mermaidgen.base import INDENTATION
from mermaidgen.flowchart.classdef import ClassDef
from mermaidgen.flowchart.node_style import NodeStyle


class NodeShape(str, Enum):
    """Shapes available for flowchart nodes."""

    PROCESS = "rect"
    EVENT = "rounded"
    TERMINAL = "stadium"
    SUBPROCESS = "fr-rect"
    DATABASE = "cyl"
    START = "circle"
    ODD = "odd"
    DECISION = "diam"
    PREPARE = "hex"
    INPUT_OUTPUT = "lean-r"
    OUTPUT_INPUT = "lean-l"
    MANUAL_OPERATION = "trap-b"
    MANUAL = "trap-t"
    STOP_DOUBLE = "dbl-circ"
    TEXT = "text"
    CARD = "notch-rect"
    LINED_PROCESS = "lin-rect"
    START_SMALL = "sm-circ"
    STOP_FRAMED = "fr-circ"
    FORK_JOIN = "fork"
    COLLATE = "hourglass"
    COMMENT = "brace"
    COMMENT_RIGHT = "brace-r"
    COMMENT_BOTH_SIDES = "braces"
    COM_LINK = "bolt"
    DOCUMENT = "doc"
    DELAY = "delay"
    STORAGE = "h-cyl"
    DISK_STORAGE = "lin-cyl"
    DISPLAY = "curv-trap"
    DIVIDED_PROCESS = "div-rect"
    EXTRACT = "tri"
    INTERNAL_STORAGE = "win-pane"
    JUNCTION = "f-circ"
    LINED_DOCUMENT = "lin-doc"
    LOOP_LIMIT = "notch-pent"
    MANUAL_FILE = "flip-tri"
    MANUAL_INPUT = "sl-rect"
    MULTI_DOCUMENT = "docs"
    MULTI_PROCESS = "st-rect"
    PAPER_TAPE = "flag"
    STORED_DATA = "bow-rect"
    SUMMARY = "cross-circ"
    TAGGED_DOCUMENT = "tag-doc"
    TAGGED_PROCESS = "tag-rect"


@dataclass
class Node:
    """A flowchart node with a shape, label, optional class and inline style."""

    id: str
    text: str
    shape: NodeShape = NodeShape.PROCESS
    style: Optional[NodeStyle] = None
    class_def: Optional[ClassDef] = None

    def set_class(self, class_def: Optional[ClassDef]) -> "Node":
        self.class_def = class_def
        return self

    def set_text(self, text: str) -> "Node":
        self.text = text
        return self

    def set_style(self, style: Optional[NodeStyle]) -> "Node":
        self.style = style
        return self

    def set_shape(self, shape: NodeShape) -> "Node":
        self.shape = shape
        return self

    def __str__(self) -> str:
        shape = NodeShape(self.shape).value
        out = f'{INDENTATION}{self.id}@{{ shape: {shape}, label: "{self.text}"}}'
        if self.class_def is not None:
            out += f":::{self.class_def.name}"
        out += "\n"
        if self.style is not None:
            out += f"{INDENTATION}style {self.id} {self.style}\n"
        return out