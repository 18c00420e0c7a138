"""
Schema validator for IR documents.

Works on any JSON-like value, whether it came from ``json.loads`` or from
the parser, and knows nothing about LaTeX-Lite. Every problem in the
document is collected in one pass and reported as a path-qualified
:class:`ValidationIssue`. Nothing is coerced or filled in: a JSON deck must
supply its own slide ids and titles.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import Settings, settings as default_settings
from .errors import PathSegment, ValidationError, ValidationIssue
from .models import CONTENT_NODE_TYPES, ContentNode, IRNode, SlideDeck, SlideNode

logger = logging.getLogger(__name__)

_content_node_adapter = TypeAdapter(ContentNode)


def _clean_path(loc: Tuple[PathSegment, ...], tagged_root: bool = False) -> Tuple[PathSegment, ...]:
    """
    Drop the discriminant tags pydantic inserts into error locations.

    ``('slides', 0, 'content', 1, 'equation', 'animate')`` becomes
    ``('slides', 0, 'content', 1, 'animate')``. A tag sits right after a
    ``content`` index, or opens the location when a lone content node is
    validated. Keys elsewhere keep their names even if they match a tag.
    """
    path: List[PathSegment] = []
    for index, segment in enumerate(loc):
        if isinstance(segment, str) and segment in CONTENT_NODE_TYPES:
            in_content_list = (
                index >= 2
                and isinstance(loc[index - 1], int)
                and loc[index - 2] == "content"
            )
            if in_content_list or (index == 0 and tagged_root):
                continue
        path.append(segment)
    return tuple(path)


def _issues_from(error: PydanticValidationError, tagged_root: bool = False) -> List[ValidationIssue]:
    return [
        ValidationIssue(path=_clean_path(tuple(detail["loc"]), tagged_root), message=detail["msg"])
        for detail in error.errors(include_url=False)
    ]


def _as_plain(candidate: Any) -> Any:
    # Already-built IR (e.g. parser output) is checked again from scratch.
    if isinstance(candidate, IRNode):
        return candidate.to_dict()
    return candidate


def _duplicate_id_issues(deck: SlideDeck) -> List[ValidationIssue]:
    issues = []
    first_seen: Dict[str, int] = {}
    for index, slide in enumerate(deck.slides):
        if slide.id in first_seen:
            issues.append(ValidationIssue(
                path=("slides", index, "id"),
                message=f"Duplicate slide id '{slide.id}' (first used by slides.{first_seen[slide.id]})",
            ))
        else:
            first_seen[slide.id] = index
    return issues


def validate(candidate: Any, settings: Optional[Settings] = None) -> SlideDeck:
    """
    Check a candidate document against the IR schema.

    Args:
        candidate: Parsed JSON value or an already-built :class:`SlideDeck`
        settings: Optional settings; ``unique_ids`` adds the duplicate-id check

    Returns:
        The typed :class:`SlideDeck`

    Raises:
        ValidationError: With every issue found, in document order
    """
    settings = settings or default_settings

    try:
        deck = SlideDeck.model_validate(_as_plain(candidate))
    except PydanticValidationError as exc:
        issues = _issues_from(exc)
        logger.debug("Deck rejected with %d issue(s)", len(issues))
        raise ValidationError("Slide deck validation failed", issues) from None

    if settings.unique_ids:
        issues = _duplicate_id_issues(deck)
        if issues:
            raise ValidationError("Slide deck validation failed", issues)

    return deck


def validate_slide(candidate: Any) -> SlideNode:
    """Validate a single slide object."""
    try:
        return SlideNode.model_validate(_as_plain(candidate))
    except PydanticValidationError as exc:
        raise ValidationError("Invalid slide node", _issues_from(exc)) from None


def validate_content_node(candidate: Any):
    """Validate a single content node; returns the matching node model."""
    try:
        return _content_node_adapter.validate_python(_as_plain(candidate), strict=True)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid content node", _issues_from(exc, tagged_root=True)) from None
