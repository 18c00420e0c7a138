"""Plain-text outline of a validated deck, one line per slide and node."""
from typing import Callable, Dict, List

from .models import (
    CONTENT_NODE_TYPES,
    AlgorithmNode,
    DefinitionNode,
    EquationNode,
    FigureNode,
    NoteNode,
    ProofNode,
    SlideDeck,
    TextNode,
    TheoremNode,
)


def _shorten(text: str, width: int = 60) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[:width - 3] + "..."


def _equation(node: EquationNode) -> str:
    line = f"equation: {_shorten(node.latex)}"
    if node.animate != "none":
        line += f" [{node.animate}]"
    return line


def _figure(node: FigureNode) -> str:
    line = f"figure: {node.ref}"
    if node.caption:
        line += f" ({_shorten(node.caption, 40)})"
    return line


def _algorithm(node: AlgorithmNode) -> str:
    return f"algorithm: {node.name} ({len(node.steps)} steps)"


FORMATTERS: Dict[type, Callable] = {
    DefinitionNode: lambda node: f"definition: {node.title}",
    TheoremNode: lambda node: f"theorem: {node.title}",
    ProofNode: lambda node: f"proof: {_shorten(node.body)}",
    EquationNode: _equation,
    FigureNode: _figure,
    AlgorithmNode: _algorithm,
    NoteNode: lambda node: f"note: {_shorten(node.body)}",
    TextNode: lambda node: f"text: {_shorten(node.content)}",
}

_missing = set(CONTENT_NODE_TYPES.values()) - set(FORMATTERS)
if _missing:
    raise TypeError(f"No outline formatter for {sorted(cls.__name__ for cls in _missing)}")


def describe_node(node) -> str:
    formatter = FORMATTERS.get(type(node))
    if formatter is None:
        raise TypeError(f"Unsupported content node: {type(node).__name__}")
    return formatter(node)


def outline(deck: SlideDeck) -> str:
    """
    Summarize a deck for terminal display.

    Args:
        deck: A validated deck

    Returns:
        Multi-line outline, slides numbered from 1
    """
    lines: List[str] = [deck.meta.title]
    if deck.meta.author or deck.meta.date:
        lines.append(" / ".join(part for part in (deck.meta.author, deck.meta.date) if part))

    for number, slide in enumerate(deck.slides, 1):
        lines.append(f"{number}. {slide.title} [{slide.id}]")
        for node in slide.content:
            lines.append(f"   - {describe_node(node)}")

    return "\n".join(lines)
