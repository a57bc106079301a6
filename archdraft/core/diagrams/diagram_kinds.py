"""
Diagram kind catalogue.

Canonical kind labels, their case-insensitive aliases, and the coarse
"general type" names accepted by manual diagram creation.

Dependencies: archdraft.core.exceptions
System role: Wire-level contract for diagram kind labels
"""

from enum import Enum

from archdraft.core.exceptions import UnsupportedDiagramKindError, ValidationError


class DiagramKind(str, Enum):
    """Supported diagram kinds; values are the canonical wire labels."""

    ERD = "ERD"
    FLOWCHART = "Flowchart"
    SEQUENCE = "Sequence Diagram"
    CLASS = "Class Diagram"

    @property
    def label(self) -> str:
        """Canonical label stored alongside saved diagrams."""
        return self.value


DEFAULT_DIAGRAM_KIND = DiagramKind.FLOWCHART

CANONICAL_LABELS: tuple[str, ...] = tuple(kind.value for kind in DiagramKind)

_ALIASES: dict[str, DiagramKind] = {
    "erd": DiagramKind.ERD,
    "entity relationship diagram": DiagramKind.ERD,
    "entity-relationship diagram": DiagramKind.ERD,
    "flowchart": DiagramKind.FLOWCHART,
    "flow chart": DiagramKind.FLOWCHART,
    "sequence diagram": DiagramKind.SEQUENCE,
    "sequence": DiagramKind.SEQUENCE,
    "class diagram": DiagramKind.CLASS,
    "class": DiagramKind.CLASS,
}

GENERAL_TYPES: dict[str, DiagramKind] = {
    "System Architecture": DiagramKind.CLASS,
    "Workflow": DiagramKind.FLOWCHART,
    "Database Schema": DiagramKind.ERD,
}


def resolve_diagram_kind(label: str) -> DiagramKind:
    """
    Resolve a kind label or alias to a DiagramKind.

    Matching is exact after trimming and case folding.

    Args:
        label: Kind label such as "ERD" or "entity relationship diagram"

    Returns:
        DiagramKind: Resolved kind

    Raises:
        UnsupportedDiagramKindError: If the label matches nothing
    """
    if isinstance(label, DiagramKind):
        return label
    key = (label or "").strip().casefold()
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnsupportedDiagramKindError(label) from None


def match_canonical_label(text: str) -> DiagramKind | None:
    """
    Match text against canonical labels only (no aliases, case-sensitive).

    Args:
        text: Already-trimmed model output

    Returns:
        DiagramKind | None: Matched kind, None when text is not a canonical label
    """
    for kind in DiagramKind:
        if kind.value == text:
            return kind
    return None


def resolve_general_type(general_type: str) -> DiagramKind:
    """
    Map a general diagram type name to a concrete kind.

    Args:
        general_type: One of "System Architecture", "Workflow", "Database Schema"

    Returns:
        DiagramKind: Concrete kind

    Raises:
        ValidationError: If the general type is unknown
    """
    try:
        return GENERAL_TYPES[general_type]
    except KeyError:
        raise ValidationError(
            "Invalid general_type. Must be one of: " + ", ".join(GENERAL_TYPES),
            field="general_type",
        ) from None
