"""Centralized failure types for sediment setup.

Two families live here:

- ``SetupError`` and its subclasses report bad model input. They carry the
  offending key (or section/routine) and the numeric code that the CLI uses as
  its exit status. Every one of them is fatal to setup.
- ``ContractViolation`` reports a stage that did not produce the invariants it
  promised. That is a bug in this package, not in the input.
"""


class SetupError(RuntimeError):
    """Base class for fatal setup errors.

    Parameters
    ----------
    key : str
        Input key, section or routine name responsible for the failure.
    detail : str, optional
        Human-readable explanation appended to the message.
    """

    code = 50
    kind = "Setup error"

    def __init__(self, key: str, detail: str = ""):
        self.key = key
        self.detail = detail
        message = f"{self.kind}: {key}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MissingOrMalformedValue(SetupError, ValueError):
    """A required key is absent or its value does not parse as the expected type."""
    code = 51
    kind = "Missing or malformed value"


class InvalidOptionCombination(SetupError, ValueError):
    """Input values that parse individually but contradict each other."""
    code = 52
    kind = "Invalid option combination"


class AllocationFailure(SetupError, MemoryError):
    """A buffer allocation could not be satisfied."""
    code = 1
    kind = "Allocation failure"


class TemporalOrderingViolation(SetupError, ValueError):
    """An erosion period does not end strictly after it starts."""
    code = 23
    kind = "Temporal ordering violation"


class ContractViolation(RuntimeError):
    """Raised when a setup stage contract is violated.

    Key distinction:
    - SetupError: bad model input (fatal, reported to the user)
    - ContractViolation: setup bug (programmer error)
    """
    pass
