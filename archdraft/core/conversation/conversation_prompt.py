"""Requirement-gathering conversation prompt templates.

Dependencies: langchain_core.prompts
System role: Prompt templates for the conversation engine
"""

from langchain_core.prompts import PromptTemplate

PROJECT_NAME_PROMPT = PromptTemplate.from_template(
    """Analyze this message and extract a suitable project name:
User Message: {message}

Requirements:
1. Name should be concise and descriptive
2. Use standard naming conventions
3. Avoid special characters
4. Maximum 50 characters

Return only the project name, nothing else."""
)

NAMING_FOLLOW_UP_PROMPT = PromptTemplate.from_template(
    """You are an AI assistant helping gather project requirements.
Project Name: {project_name}
Last Message: {message}

Generate a response that:
1. Acknowledges the project name
2. Asks about the core functionality
3. Encourages detailed explanation
4. Maintains conversational tone
5. Keep it short and engaging, only ask one question at a time.
6. Don't use markdown or code blocks

Provide only the response text."""
)

SUFFICIENCY_PROMPT = PromptTemplate.from_template(
    """Based on this conversation about project "{project_name}", determine if we have enough information to generate requirements:

{conversation}

Analyze the conversation and determine:
1. Is there enough detail to generate technical diagrams?
2. Did the user instruct to generate diagrams in the last message?

Return only "SUFFICIENT" or "INSUFFICIENT" followed by a brief reason."""
)

CLARIFYING_PROMPT = PromptTemplate.from_template(
    """You are an AI assistant helping gather project requirements.
Project Name: {project_name}
Conversation so far: {conversation}

Generate a response that:
1. Acknowledges the information provided so far
2. Asks specific questions to gather missing details
3. Guides the user toward providing complete requirements
4. Maintains conversational tone
5. Keep it short and engaging
6. Don't use markdown or code blocks

Provide only the response text."""
)

DESCRIPTION_PROMPT = PromptTemplate.from_template(
    """Based on this conversation about project "{project_name}":

{conversation}

Generate a comprehensive project description that:
1. Summarizes the project purpose
2. Lists all key features and requirements
3. Includes any technical constraints mentioned
4. Is structured and detailed enough for technical diagram generation
5. Don't use markdown or code blocks.
6. Keep it concise.

Provide only the description text."""
)

CONFIRMATION_PROMPT = PromptTemplate.from_template(
    """Based on the gathered information:
Project Name: {project_name}
Project Description: {project_description}

Generate a confirmation message that:
1. Summarizes the understood requirements
2. Confirms proceeding to diagram generation
3. Sets expectations for next steps
4. Don't use markdown or code blocks.
5. Keep it short, concise, and precise.

Provide only the response text."""
)

DONE_REPLY = (
    "Perfect! I've created your project and generated the technical diagrams. "
    "You can view them now."
)
