"""
Draw instructions produced by the composer and consumed by the PDF builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

Color = tuple[int, int, int]


@dataclass(frozen=True)
class TextRun:
    """Single line of text placed in a box whose top-left corner is (x, y)."""

    text: str
    x: float
    y: float
    w: float
    h: float
    size: float
    bold: bool = False
    align: str = "L"  # L / C / R
    color: Color = (0, 0, 0)


@dataclass(frozen=True)
class TableRow:
    """One row of the items grid; cells are drawn left to right."""

    x: float
    y: float
    widths: tuple[float, ...]
    cells: tuple[str, ...]
    aligns: tuple[str, ...]
    height: float
    size: float
    bold: bool = False
    fill: Color | None = None
    text_color: Color = (0, 0, 0)
    border: Color = (205, 210, 216)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 0.5
    color: Color = (0, 0, 0)


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    w: float
    h: float
    fill: Color | None = None
    stroke: Color | None = None


@dataclass(frozen=True)
class Picture:
    x: float
    y: float
    w: float
    h: float
    data: bytes


Instruction = Union[TextRun, TableRow, Line, Box, Picture]


@dataclass
class Page:
    instructions: list[Instruction] = field(default_factory=list)

    def add(self, *items: Instruction) -> None:
        self.instructions.extend(items)

    def texts(self) -> list[str]:
        out: list[str] = []
        for ins in self.instructions:
            if isinstance(ins, TextRun):
                out.append(ins.text)
            elif isinstance(ins, TableRow):
                out.extend(ins.cells)
        return out

    def of_type(self, kind: type) -> list:
        return [ins for ins in self.instructions if isinstance(ins, kind)]


@dataclass
class Document:
    pages: list[Page] = field(default_factory=list)
    title: str = ""
    language: str = "en"

    def texts(self) -> list[str]:
        return [text for page in self.pages for text in page.texts()]
