"""
Exceptions raised by the vision engine.

Vision queries degrade to empty results instead of raising; the only
exception the engine defines signals a broken convergence invariant.
"""


class ConvergenceError(RuntimeError):
    """The common vision solver hit its pass bound without reaching a fixed point."""

    def __init__(self, passes: int, remaining_units: int):
        super().__init__(
            f"Common vision did not converge after {passes} passes "
            f"({remaining_units} units still contributing vision)"
        )
        self.passes = passes
        self.remaining_units = remaining_units
