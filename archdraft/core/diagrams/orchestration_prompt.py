"""Prompt templates used by the diagram orchestrator and requirement extractor.

Dependencies: langchain_core.prompts
System role: Prompt templates for kind inference and requirement extraction
"""

from langchain_core.prompts import PromptTemplate

KIND_INFERENCE_PROMPT = PromptTemplate.from_template(
    """Analyze these project requirements and determine the single most appropriate diagram type to visualize them.
Available types: ERD, Flowchart, Sequence Diagram, Class Diagram.
Consider the focus of the requirements (data structure, process flow, interactions, object structure).

Requirements:
{requirements}

Respond ONLY with the name of the single most appropriate diagram type (e.g., Flowchart, ERD, Sequence Diagram, Class Diagram)."""
)

REQUIREMENT_EXTRACTION_PROMPT = PromptTemplate.from_template(
    """Given the following project details:
Name: {project_name}
Description: {project_description}

Please analyze the project and provide detailed requirements covering:
1. Data entities, their attributes and relationships
2. Main processes and decision points
3. Interactions between users, components and external systems
4. Core classes or modules and their responsibilities

Don't use markdown or code blocks. Provide only the requirements text."""
)
