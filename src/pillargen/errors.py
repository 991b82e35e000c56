"""Exception hierarchy for pillargen.

Everything the pipeline raises on bad input derives from ``PillarError``, so
the CLI can turn it into a clean exit without a traceback.
"""


class PillarError(Exception):
    """Base exception for all pillargen errors."""


class ParseError(PillarError):
    """The ``.pillar.yaml`` document could not be read, parsed or deserialized."""


class ValidationError(PillarError):
    """A parsed spec breaks a semantic rule (duplicate ids, bad ranges, version gates)."""


class PromotedWarningError(ValidationError):
    """A coded warning escalated to an error by ``--warn-as-error``."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(f"[{code}] {message}")


class GenerationError(PillarError):
    """A pillar's geometry could not be built from its parameters."""

    def __init__(self, message: str, *, pillar_id: str | None = None) -> None:
        self.pillar_id = pillar_id
        super().__init__(message)


class ExportError(PillarError):
    """Writing the GLB failed."""
