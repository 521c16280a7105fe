"""Exception types raised by the fluid state contract."""


class FluidStateNotImplementedError(NotImplementedError):
    """
    Raised when a query is called that the concrete fluid state does not provide.

    Attributes:
        operation: Name of the missing query (e.g., 'density')
        state_type: Class name of the concrete fluid state
    """

    def __init__(self, operation: str, state_type: str):
        self.operation = operation
        self.state_type = state_type
        super().__init__(
            f"FluidState.{operation}() is not implemented by {state_type}"
        )
