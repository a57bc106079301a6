"""Diagram generation prompt templates.

Kind-specific instructions for producing a Mermaid diagram as a strict
two-field JSON object, plus explanation and SQL derivation prompts.

Dependencies: langchain_core.prompts, archdraft.core.diagrams.diagram_kinds
System role: Prompt templates for diagram generators
"""

from langchain_core.prompts import PromptTemplate

from archdraft.core.diagrams.diagram_kinds import DiagramKind

_GENERATION_TEMPLATE = """Project Context:
Name: {project_name}
Description: {project_description}

Requirements for {kind_title}:
{requirements}

Generate a Mermaid {kind_noun} based on the project context and requirements.

Follow these rules for the {kind_noun}:
{rules}

Also, generate a concise and relevant name for this specific {kind_noun} based on the project and requirements.

Respond ONLY with a valid JSON object containing two keys: "name" (string) and "diagram" (string, the Mermaid code).
Example JSON response format:
{{
  "name": "{example_name}",
  "diagram": "{example_diagram}"
}}
Do not include any other text or markdown formatting outside the JSON object."""

_GENERATION_DETAILS: dict[DiagramKind, dict[str, str]] = {
    DiagramKind.ERD: {
        "kind_title": "ERD",
        "kind_noun": "ERD (Entity Relationship Diagram)",
        "rules": (
            "1. Use proper Mermaid ERD syntax.\n"
            "2. Include all relevant entities with their attributes based on requirements.\n"
            "3. Show relationships between entities clearly.\n"
            "4. Use appropriate cardinality notation (e.g., ||, |o, }}|, }}o).\n"
            "5. Include primary and foreign keys where applicable.\n"
            "6. Add meaningful relationship descriptions."
        ),
        "example_name": "E-commerce Database Schema ERD",
        "example_diagram": "erDiagram\\nCUSTOMER ||--o{{ ORDER : places\\n...",
    },
    DiagramKind.FLOWCHART: {
        "kind_title": "Flowchart",
        "kind_noun": "flowchart",
        "rules": (
            "1. Use proper Mermaid flowchart syntax.\n"
            "2. Include necessary steps and decision points based on requirements.\n"
            "3. Use clear directional flow.\n"
            "4. Add appropriate labels.\n"
            "5. Keep it clear and readable."
        ),
        "example_name": "User Login Process Flowchart",
        "example_diagram": "graph TD\\nA[Start] --> B{{User Logs In?}};\\n...",
    },
    DiagramKind.SEQUENCE: {
        "kind_title": "Sequence Diagram",
        "kind_noun": "sequence diagram",
        "rules": (
            "1. Use proper Mermaid sequence diagram syntax.\n"
            "2. Show all relevant participants and their interactions based on requirements.\n"
            "3. Include message types (sync/async) where appropriate.\n"
            "4. Show activation/deactivation if needed for clarity.\n"
            "5. Use proper time ordering."
        ),
        "example_name": "User Authentication Sequence",
        "example_diagram": "sequenceDiagram\\nparticipant User\\nparticipant API\\nUser->>API: login\\n...",
    },
    DiagramKind.CLASS: {
        "kind_title": "Class Diagram",
        "kind_noun": "class diagram",
        "rules": (
            "1. Use proper Mermaid class diagram syntax.\n"
            "2. Include relevant classes with attributes and methods based on requirements.\n"
            "3. Show relationships (inheritance, composition, aggregation, association) clearly.\n"
            "4. Use correct notation for visibility (public +, private -, protected #).\n"
            "5. Define data types for attributes and parameters where appropriate."
        ),
        "example_name": "Core Banking System Classes",
        "example_diagram": "classDiagram\\nclass BankAccount{{\\n+String accountNumber\\n...\\n}}",
    },
}


def _build_generation_prompt(kind: DiagramKind) -> PromptTemplate:
    details = _GENERATION_DETAILS[kind]
    # Bake the kind-specific text in, leaving only the per-call variables open.
    template = _GENERATION_TEMPLATE
    for key, value in details.items():
        template = template.replace("{" + key + "}", value)
    return PromptTemplate.from_template(template)


GENERATION_PROMPTS: dict[DiagramKind, PromptTemplate] = {
    kind: _build_generation_prompt(kind) for kind in DiagramKind
}

_EXPLANATION_POINTS: dict[DiagramKind, str] = {
    DiagramKind.ERD: (
        "1. Explain the overall data structure\n"
        "2. Describe each entity and its attributes\n"
        "3. Explain relationships between entities\n"
        "4. Highlight key constraints and cardinalities\n"
        "5. Note any important design decisions"
    ),
    DiagramKind.FLOWCHART: (
        "1. Start with an overview of the process\n"
        "2. Explain each decision point and its outcomes\n"
        "3. Describe the flow from start to end\n"
        "4. Highlight any important conditions or branches"
    ),
    DiagramKind.SEQUENCE: (
        "1. Explain the overall interaction flow\n"
        "2. Describe each participant's role\n"
        "3. Explain the sequence of messages\n"
        "4. Highlight important interactions\n"
        "5. Note any parallel or conditional flows"
    ),
    DiagramKind.CLASS: (
        "1. Explain the overall object model\n"
        "2. Describe each class, its attributes and methods\n"
        "3. Explain inheritance, composition and association relationships\n"
        "4. Note any important design decisions"
    ),
}

_EXPLANATION_TEMPLATE = """Explain the following Mermaid {kind_noun} code in simple terms:
{{diagram_code}}

Requirements:
{points}

Provide a clear and comprehensive explanation."""

EXPLANATION_PROMPTS: dict[DiagramKind, PromptTemplate] = {
    kind: PromptTemplate.from_template(
        _EXPLANATION_TEMPLATE.format(
            kind_noun=_GENERATION_DETAILS[kind]["kind_noun"],
            points=_EXPLANATION_POINTS[kind],
        )
    )
    for kind in DiagramKind
}

SQL_FROM_ERD_PROMPT = PromptTemplate.from_template(
    """Generate SQL CREATE TABLE statements for the following Mermaid ERD:
{diagram_code}

Please provide only the SQL statements without any additional text or explanation.
Include primary keys, foreign keys, and appropriate data types."""
)


def get_generation_prompt(kind: DiagramKind) -> PromptTemplate:
    """Get the generation prompt template for a diagram kind.

    Variables: project_name, project_description, requirements.
    """
    return GENERATION_PROMPTS[kind]


def get_explanation_prompt(kind: DiagramKind) -> PromptTemplate:
    """Get the explanation prompt template for a diagram kind.

    Variables: diagram_code.
    """
    return EXPLANATION_PROMPTS[kind]
