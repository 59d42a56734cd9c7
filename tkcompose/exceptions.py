"""
Custom exceptions for the tkcompose framework.
"""


class TkComposeError(Exception):
    """Base exception for all tkcompose errors."""
    pass


class PlanError(TkComposeError):
    """
    Raised when a composition plan has a shape that cannot be built.

    Plans are single builders, tuples (sequential composition), lists
    (parallel composition) or explicit Single/Sequential/Parallel values.
    """

    def __init__(self, plan: object, message: str = None):
        self.plan = plan
        msg = message or f"Unsupported composition plan: {plan!r}"
        super().__init__(msg)


class ActorError(TkComposeError):
    """Raised when a map_state actor failed while folding an event."""

    def __init__(self, actor_name: str, original_error: Exception):
        self.actor_name = actor_name
        self.original_error = original_error
        super().__init__(f"Actor '{actor_name}' failed: {original_error}")
