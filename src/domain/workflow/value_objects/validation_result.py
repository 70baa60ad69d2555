from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict of a workflow validation.

    Errors block persistence and activation. Warnings never affect ``is_valid``;
    callers ask for explicit confirmation before proceeding with them.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
