"""
Kind-specific diagram generators.

Dependencies: archdraft.core.diagrams.generator
System role: One generator per supported diagram kind
"""

from archdraft.core.diagrams.diagram_kinds import DiagramKind
from archdraft.core.diagrams.diagram_prompts import SQL_FROM_ERD_PROMPT
from archdraft.core.diagrams.generator import DiagramGenerator


class ERDGenerator(DiagramGenerator):
    """Entity relationship diagrams (validated for keys and cardinality)."""

    kind = DiagramKind.ERD
    display_name = "ERD"

    def generate_sql(self, diagram_code: str) -> str:
        """
        Derive SQL CREATE TABLE statements from an ERD.

        Args:
            diagram_code: Mermaid erDiagram source

        Returns:
            str: SQL statements as returned by the model
        """
        prompt = SQL_FROM_ERD_PROMPT.format(diagram_code=diagram_code)
        return self.text_generator.generate(prompt)


class FlowchartGenerator(DiagramGenerator):
    """Process flowcharts (validated for start/end and complete branches)."""

    kind = DiagramKind.FLOWCHART
    display_name = "flowchart"


class SequenceDiagramGenerator(DiagramGenerator):
    kind = DiagramKind.SEQUENCE
    display_name = "sequence diagram"


class ClassDiagramGenerator(DiagramGenerator):
    kind = DiagramKind.CLASS
    display_name = "class diagram"


GENERATOR_CLASSES: dict[DiagramKind, type[DiagramGenerator]] = {
    DiagramKind.ERD: ERDGenerator,
    DiagramKind.FLOWCHART: FlowchartGenerator,
    DiagramKind.SEQUENCE: SequenceDiagramGenerator,
    DiagramKind.CLASS: ClassDiagramGenerator,
}
