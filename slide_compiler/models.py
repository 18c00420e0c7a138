"""
IR data model for slide decks.

The IR separates what a piece of content means (definition, theorem,
equation, presenter note, ...) from how it is displayed. Every content node
carries a ``type`` discriminant drawn from a closed set; the same models are
built by the parser and enforced by the validator.
"""
import json
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

IR_SCHEMA_VERSION = "1.0.0"

AnimationMode = Literal["none", "reveal", "highlight"]
ANIMATION_MODES = ("none", "reveal", "highlight")


def _list_to_tuple(value: Any) -> Any:
    # JSON arrays arrive as lists; the IR stores them as tuples.
    if isinstance(value, list):
        return tuple(value)
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("Input should be a valid string, not null")
    return value


class IRNode(BaseModel):
    """
    Common configuration for every IR model.

    Unknown keys are rejected, no type coercion happens and nodes are
    immutable once built.
    """
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        # Fields absent from the input stay absent in the output.
        return self.model_dump(mode="json", exclude_unset=True)


class DefinitionNode(IRNode):
    type: Literal["definition"]
    title: str
    body: str


class TheoremNode(IRNode):
    type: Literal["theorem"]
    title: str
    body: str


class ProofNode(IRNode):
    type: Literal["proof"]
    body: str


class EquationNode(IRNode):
    type: Literal["equation"]
    latex: str
    animate: AnimationMode = "none"


class FigureNode(IRNode):
    """Image or diagram reference. ``alt`` and ``caption`` are JSON-only."""
    type: Literal["figure"]
    ref: str
    alt: Optional[str] = None
    caption: Optional[str] = None

    @field_validator("alt", "caption", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Omitting is fine, an explicit null is not
        return _reject_null(value)


class AlgorithmNode(IRNode):
    type: Literal["algorithm"]
    name: str
    steps: Annotated[Tuple[str, ...], BeforeValidator(_list_to_tuple)]


class NoteNode(IRNode):
    """Presenter note, only shown in presenter mode."""
    type: Literal["note"]
    body: str


class TextNode(IRNode):
    type: Literal["text"]
    content: str


ContentNode = Annotated[
    Union[
        DefinitionNode,
        TheoremNode,
        ProofNode,
        EquationNode,
        FigureNode,
        AlgorithmNode,
        NoteNode,
        TextNode,
    ],
    Field(discriminator="type"),
]

CONTENT_NODE_TYPES: Dict[str, type] = {
    "definition": DefinitionNode,
    "theorem": TheoremNode,
    "proof": ProofNode,
    "equation": EquationNode,
    "figure": FigureNode,
    "algorithm": AlgorithmNode,
    "note": NoteNode,
    "text": TextNode,
}


class SlideNode(IRNode):
    type: Literal["slide"]
    id: str = Field(min_length=1)
    title: str
    content: Annotated[Tuple[ContentNode, ...], BeforeValidator(_list_to_tuple)]


class DeckMeta(IRNode):
    title: str
    author: Optional[str] = None
    date: Optional[str] = None

    @field_validator("author", "date", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class SlideDeck(IRNode):
    """Document root: deck metadata plus the ordered slides."""
    meta: DeckMeta
    slides: Annotated[Tuple[SlideNode, ...], BeforeValidator(_list_to_tuple)]

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# Reference deck exercising every content node type, including the
# JSON-only fields the LaTeX-Lite dialect cannot express.
EXAMPLE_SLIDE_DECK: Dict[str, Any] = {
    "meta": {
        "title": "Introduction to Calculus",
        "author": "Dr. Jane Smith",
        "date": "2026-01-20",
    },
    "slides": [
        {
            "type": "slide",
            "id": "slide-1",
            "title": "Limits",
            "content": [
                {
                    "type": "definition",
                    "title": "Limit",
                    "body": "A value that a function approaches as the input approaches some value.",
                },
                {
                    "type": "equation",
                    "latex": "\\lim_{x \\to a} f(x) = L",
                    "animate": "reveal",
                },
                {
                    "type": "note",
                    "body": "Emphasize that limits are fundamental to calculus.",
                },
            ],
        },
        {
            "type": "slide",
            "id": "slide-2",
            "title": "L'Hôpital's Rule",
            "content": [
                {
                    "type": "theorem",
                    "title": "L'Hôpital's Rule",
                    "body": "If f(x)/g(x) gives 0/0 or ∞/∞ as x approaches a, "
                            "the limit equals the limit of f'(x)/g'(x).",
                },
                {
                    "type": "proof",
                    "body": "Follows from Cauchy's mean value theorem.",
                },
            ],
        },
        {
            "type": "slide",
            "id": "slide-3",
            "title": "Searching",
            "content": [
                {
                    "type": "algorithm",
                    "name": "Binary Search",
                    "steps": [
                        "Set low = 0, high = n-1",
                        "While low <= high, compute mid = (low + high) / 2",
                        "If arr[mid] == target, return mid",
                        "Narrow the half that cannot contain target",
                        "Return -1",
                    ],
                },
                {
                    "type": "figure",
                    "ref": "figures/bisection.png",
                    "alt": "Interval halving",
                    "caption": "Each step halves the search interval.",
                },
                {"type": "text", "content": "Runs in O(log n) comparisons."},
            ],
        },
    ],
}
