"""
Exception hierarchy for the archdraft application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ArchdraftException(Exception):
    """Base exception for all archdraft application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ArchdraftException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedDiagramKindError(ValidationError):
    """Raised when a diagram kind label matches no known kind or alias."""

    def __init__(self, label: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize unsupported kind error.

        Args:
            label: The label that failed to resolve
            details: Additional context
        """
        details = details or {}
        details["label"] = label
        super().__init__(f"Unsupported diagram kind: {label}", field="diagram_kind", details=details)


class GenerationCapabilityError(ArchdraftException):
    """Raised when the text generation service fails (transport, timeout, quota)."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize capability error.

        Args:
            message: Error message
            provider: Model provider that failed
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)


class DiagramPayloadError(ArchdraftException):
    """Raised when a generation response is not a usable name/diagram payload."""

    pass


class DiagramGenerationError(ArchdraftException):
    """Raised when a diagram generator returns a failure result."""

    def __init__(
        self,
        message: str,
        diagram_kind: str | None = None,
        failure_domain: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize diagram generation error.

        Args:
            message: Error message from the generator
            diagram_kind: Canonical kind label
            failure_domain: Which failure domain ended generation
            details: Additional context
        """
        details = details or {}
        if diagram_kind:
            details["diagram_kind"] = diagram_kind
        if failure_domain:
            details["failure_domain"] = failure_domain
        super().__init__(message, details)


class PersistenceError(ArchdraftException):
    """Raised when a store write returns no row."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            operation: Operation that failed (insert_diagram, create_project)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ProjectNotFoundError(ArchdraftException):
    """Raised when a project cannot be found for the caller."""

    def __init__(self, project_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize project not found error.

        Args:
            project_id: ID of the missing project
            details: Additional context
        """
        details = details or {}
        details["project_id"] = project_id
        super().__init__(f"Project not found: {project_id}", details)


class DiagramNotFoundError(ArchdraftException):
    """Raised when a diagram cannot be found within a project."""

    def __init__(self, diagram_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize diagram not found error.

        Args:
            diagram_id: ID of the missing diagram
            details: Additional context
        """
        details = details or {}
        details["diagram_id"] = diagram_id
        super().__init__(f"Diagram not found: {diagram_id}", details)


class AuthenticationError(ArchdraftException):
    """Raised when a caller credential cannot be resolved to a user."""

    pass
