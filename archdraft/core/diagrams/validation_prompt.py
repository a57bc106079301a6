"""Diagram validation prompt templates.

Checklist prompts sent back to the model to judge a generated diagram.
The reply convention is a leading lowercase keyword: 'valid', or 'invalid'
followed by the issues found.

Dependencies: langchain_core.prompts, archdraft.core.diagrams.diagram_kinds
System role: Prompt templates for the diagram validator
"""

from langchain_core.prompts import PromptTemplate

from archdraft.core.diagrams.diagram_kinds import DiagramKind

_VERDICT_INSTRUCTIONS = """If valid, respond with the single word 'valid'.
If invalid, respond with 'invalid' followed by the specific issues found."""

MERMAID_SYNTAX_PROMPT = PromptTemplate.from_template(
    """Validate this Mermaid diagram syntax:
{diagram_code}

Check for:
1. Proper syntax and structure
2. Valid node and edge definitions
3. Correct use of Mermaid keywords
4. Complete and well-formed statements

"""
    + _VERDICT_INSTRUCTIONS
)

FLOWCHART_PROMPT = PromptTemplate.from_template(
    """Validate this Mermaid flowchart:
{diagram_code}

Check for:
1. Proper flowchart syntax
2. Clear start and end points
3. Valid connections between nodes
4. Proper decision points with all paths
5. Logical flow and readability

"""
    + _VERDICT_INSTRUCTIONS
)

ERD_PROMPT = PromptTemplate.from_template(
    """Validate this Mermaid ERD:
{diagram_code}

Check for:
1. Proper ERD syntax
2. Valid entity definitions
3. Correct relationship and cardinality notations
4. Primary and foreign key definitions
5. Complete and meaningful relationships

"""
    + _VERDICT_INSTRUCTIONS
)

IMPROVEMENT_PROMPT = PromptTemplate.from_template(
    """Analyze this {kind_label} diagram and suggest improvements:
{diagram_code}

Consider:
1. Clarity and readability
2. Completeness of information
3. Proper use of diagram conventions
4. Logical organization
5. Best practices for {kind_label} diagrams

Provide specific, actionable suggestions for improvement."""
)

# Sequence and class diagrams fall back to the generic syntax checklist.
VALIDATION_PROMPTS: dict[DiagramKind, PromptTemplate] = {
    DiagramKind.ERD: ERD_PROMPT,
    DiagramKind.FLOWCHART: FLOWCHART_PROMPT,
    DiagramKind.SEQUENCE: MERMAID_SYNTAX_PROMPT,
    DiagramKind.CLASS: MERMAID_SYNTAX_PROMPT,
}


def get_validation_prompt(kind: DiagramKind) -> PromptTemplate:
    """Get the checklist prompt for a diagram kind. Variables: diagram_code."""
    return VALIDATION_PROMPTS[kind]
