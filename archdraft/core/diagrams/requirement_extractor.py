"""
Requirement extractor.

Expands a short project name and description into a detailed requirement
text suitable for kind inference and diagram generation.

Dependencies: archdraft.boundary.llm, archdraft.core.diagrams.orchestration_prompt
System role: Requirement expansion for manual project creation
"""

import logging

from archdraft.boundary.llm.text_generator import TextGenerator
from archdraft.core.diagrams.orchestration_prompt import REQUIREMENT_EXTRACTION_PROMPT

logger = logging.getLogger(__name__)


class RequirementExtractor:
    def __init__(self, text_generator: TextGenerator) -> None:
        self._llm = text_generator

    def extract(self, project_name: str, project_description: str) -> str:
        """
        Produce detailed requirements for a project.

        Args:
            project_name: Project name
            project_description: User supplied description

        Returns:
            str: Requirement text (stripped, may be empty)

        Raises:
            GenerationCapabilityError: If the capability call fails
        """
        prompt = REQUIREMENT_EXTRACTION_PROMPT.format(
            project_name=project_name,
            project_description=project_description or "",
        )
        requirements = (self._llm.generate(prompt) or "").strip()
        logger.info(
            f"{__name__}:extract - Extracted requirements_len={len(requirements)} "
            f"for project '{project_name}'"
        )
        return requirements
