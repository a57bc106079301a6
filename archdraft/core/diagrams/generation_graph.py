"""LangGraph definition for the diagram generation retry loop.

Builds and compiles a stateful graph with two nodes:
1. generate: render the kind prompt, call the model, parse the name/diagram payload
2. validate: run the kind checklist through the validator

Routing after each node decides between validating, retrying with the
original requirements, or stopping. Capability errors, payload errors and
bare transport errors (TimeoutError, ConnectionError) inside a node consume
the current attempt. Any other exception escapes the graph and is handled
by the caller as fatal.

Dependencies: langgraph, archdraft.core.diagrams
System role: Graph orchestration for bounded diagram generation
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import END, StateGraph

from archdraft.core.diagrams.diagram_schema import GenerationState
from archdraft.core.exceptions import DiagramPayloadError, GenerationCapabilityError

if TYPE_CHECKING:
    from archdraft.core.diagrams.generator import DiagramGenerator

logger = logging.getLogger(__name__)

GENERATE_NODE = "generate"
VALIDATE_NODE = "validate"

# Raised by a TextGenerator call; each costs one attempt
ATTEMPT_ERRORS = (GenerationCapabilityError, TimeoutError, ConnectionError)


def generate_node(state: GenerationState, generator: "DiagramGenerator") -> dict:
    """Run one generation attempt.

    The attempt counter is advanced on entry so it always names the
    attempt in progress.

    Args:
        state: Loop state with project, requirements and attempt count
        generator: Kind-specific generator supplying prompt and parser

    Returns:
        dict: State update with payload (None when the attempt failed)
    """
    attempt = state.get("attempts", 0) + 1
    logger.info(
        f"{__name__}:generate_node - Attempt {attempt} of {state['max_attempts']} "
        f"to generate {generator.display_name}"
    )

    prompt = generator.build_prompt(state["project"], state["requirements"])

    try:
        raw = generator.text_generator.generate(prompt)
        payload = generator.parse_payload(raw)
    except (DiagramPayloadError, *ATTEMPT_ERRORS) as e:
        logger.warning(
            f"{__name__}:generate_node - Attempt {attempt} failed: {type(e).__name__}: {e}"
        )
        return {
            "attempts": attempt,
            "payload": None,
            "valid": False,
            "last_error": str(e),
        }

    logger.debug(f"{__name__}:generate_node - Parsed payload name='{payload.name}'")
    return {"attempts": attempt, "payload": payload, "valid": False, "last_error": None}


def validate_node(state: GenerationState, generator: "DiagramGenerator") -> dict:
    """Validate the payload produced by the current attempt.

    Args:
        state: Loop state holding the parsed payload
        generator: Kind-specific generator supplying the validator

    Returns:
        dict: State update with valid flag and feedback in last_error
    """
    payload = state["payload"]
    try:
        outcome = generator.validator.validate(payload.diagram, generator.kind)
    except ATTEMPT_ERRORS as e:
        logger.warning(
            f"{__name__}:validate_node - Validation call failed (Attempt {state['attempts']}): {e}"
        )
        return {"valid": False, "last_error": str(e)}

    if outcome.valid:
        logger.info(
            f"{__name__}:validate_node - Validated {generator.display_name} '{payload.name}'"
        )
        return {"valid": True, "last_error": None}

    logger.warning(
        f"{__name__}:validate_node - {generator.display_name} failed validation "
        f"(Attempt {state['attempts']}). Feedback: {outcome.feedback[:200]}"
    )
    return {"valid": False, "last_error": outcome.feedback}


def _has_attempts_left(state: GenerationState) -> bool:
    return state["attempts"] < state["max_attempts"]


def route_after_generate(state: GenerationState) -> str:
    """Validate a parsed payload, otherwise retry or stop."""
    if state.get("payload") is not None:
        return "validate"
    return "retry" if _has_attempts_left(state) else "exhausted"


def route_after_validate(state: GenerationState) -> str:
    """Stop on a valid diagram, otherwise retry or stop."""
    if state.get("valid"):
        return "accepted"
    return "retry" if _has_attempts_left(state) else "exhausted"


def create_generation_graph(generator: "DiagramGenerator"):
    """Create the compiled retry-loop graph for one generator.

    Args:
        generator: Kind-specific generator the nodes delegate to

    Returns:
        CompiledGraph: Compiled and runnable graph
    """
    graph = StateGraph(GenerationState)

    def generate_wrapper(state):
        return generate_node(state, generator)

    def validate_wrapper(state):
        return validate_node(state, generator)

    graph.add_node(GENERATE_NODE, generate_wrapper)
    graph.add_node(VALIDATE_NODE, validate_wrapper)

    graph.set_entry_point(GENERATE_NODE)
    graph.add_conditional_edges(
        GENERATE_NODE,
        route_after_generate,
        {"validate": VALIDATE_NODE, "retry": GENERATE_NODE, "exhausted": END},
    )
    graph.add_conditional_edges(
        VALIDATE_NODE,
        route_after_validate,
        {"accepted": END, "retry": GENERATE_NODE, "exhausted": END},
    )

    logger.debug(
        f"{__name__}:create_generation_graph - Compiled graph for {generator.display_name}"
    )
    return graph.compile()
