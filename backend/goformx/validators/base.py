"""Base schema validator — abstract class implementing the Strategy Pattern.

Each schema dialect gets a standalone, independently testable strategy.
New dialects are added without modifying FormDefinitionValidator.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from goformx.errors import DomainError, ErrorCode, new


class BaseSchemaValidator(ABC):
    """Abstract base for form schema shape validators.

    Contract:
        - iter_problems() is deterministic: same input → same output
        - iter_problems() yields structural problems in document order
        - malformed input is reported as a problem, never raised
        - no I/O, no shared state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @property
    @abstractmethod
    def dialect(self) -> str:
        """Schema dialect this strategy understands."""
        ...

    @abstractmethod
    def iter_problems(self, schema: dict) -> Iterator[DomainError]:
        """Yield every structural problem found in the schema.

        Args:
            schema: Form schema document (already known to be a non-empty mapping)

        Yields:
            DomainError per problem, with the offending path under context["field"]
        """
        ...

    def validate(self, schema: dict) -> Optional[DomainError]:
        """First structural problem, or None if the schema is well-formed."""
        return next(self.iter_problems(schema), None)

    # ── Helper Methods ──

    def _error(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        **context: Any,
    ) -> DomainError:
        """Convenience method to create a structural DomainError."""
        err = new(code, message)
        if field is not None:
            err.with_context("field", field)
        for key, value in context.items():
            err.with_context(key, value)
        return err

    def _missing(self, key: str, field: Optional[str] = None) -> DomainError:
        return self._error(
            ErrorCode.REQUIRED,
            f"missing required schema field: {key}",
            field=field or key,
        )

    def _type_name(self, value: Any) -> str:
        """JSON-ish type name used in messages."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (int, float)):
            return "number"
        if isinstance(value, str):
            return "string"
        if isinstance(value, list):
            return "array"
        if isinstance(value, dict):
            return "object"
        return type(value).__name__
