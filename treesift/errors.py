"""Error kinds raised by TreeSift.

All recoverable failures derive from TreeSiftError and are raised to the
immediate caller. PredicateRequiredError is the exception: it signals a
programming-contract violation (no usable predicate where one is required)
and is a TypeError rather than a TreeSiftError, so that a broad
``except TreeSiftError`` never hides it.
"""

from typing import Any, Optional


class TreeSiftError(Exception):
    """Base class for recoverable TreeSift errors."""
    pass


class NilParameterError(TreeSiftError):
    """A required node or element argument is absent."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Parameter {parameter!r} cannot be None")


class BuildFailureError(TreeSiftError):
    """The children producer failed while a tree was being built.

    Attributes:
        element: Element whose children could not be produced
        cause: The underlying exception
        stage: 1-based cascade stage during which the build failed, if any
        ordinal: 1-based position of the failing element within that stage
    """

    def __init__(self,
                 element: Any,
                 cause: BaseException,
                 stage: Optional[int] = None,
                 ordinal: Optional[int] = None):
        self.element = element
        self.cause = cause
        self.stage = stage
        self.ordinal = ordinal
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"Failed to produce children of {self.element!r}: {self.cause}"
        if self.stage is not None:
            message = (
                f"Stage {self.stage}, tree {self.ordinal}: {message}"
            )
        return message

    def at(self, stage: int, ordinal: int) -> 'BuildFailureError':
        """Return a copy annotated with the cascade stage and element ordinal."""
        return BuildFailureError(self.element, self.cause, stage=stage, ordinal=ordinal)


class TraversalFailureError(TreeSiftError):
    """A traversal aborted because a visitor (or its predicate) failed."""

    def __init__(self, cause: BaseException, stage: Optional[int] = None):
        self.cause = cause
        self.stage = stage
        message = f"Traversal failed: {cause}"
        if stage is not None:
            message = f"Stage {stage}: {message}"
        super().__init__(message)

    def at(self, stage: int) -> 'TraversalFailureError':
        """Return a copy annotated with the cascade stage."""
        return TraversalFailureError(self.cause, stage=stage)


class ConfigurationError(TreeSiftError):
    """Raised when a SearchConfig does not validate."""
    pass


class PredicateRequiredError(TypeError):
    """A predicate is required but none (or a non-callable) was supplied."""
    pass
