"""Value objects returned by the composite validators."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class StrengthLevel(Enum):
    """Enumeration of password strength levels"""

    INVALID = "invalid"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @classmethod
    def from_score(cls, score: int) -> "StrengthLevel":
        """Map a strength score onto its level (step function)."""
        if score <= 2:
            return cls.WEAK
        if score <= 4:
            return cls.MEDIUM
        if score <= 6:
            return cls.STRONG
        return cls.VERY_STRONG


@dataclass(frozen=True, slots=True)
class PasswordDetails:
    """Per-requirement flags computed by `validate_password`."""

    length: bool = False
    has_number: bool = False
    has_letter: bool = False
    has_lower_case: bool = False
    has_upper_case: bool = False
    has_special_char: bool = False


@dataclass(frozen=True, slots=True)
class PasswordValidationResult:
    """Outcome of a password policy check.

    `is_valid` is true iff the length flag and every enabled requirement's
    flag in `details` are true. `requirements` lists every unmet requirement,
    in policy order.
    """

    is_valid: bool
    message: str
    details: PasswordDetails
    requirements: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        data = asdict(self)
        data["requirements"] = list(self.requirements)
        return data


@dataclass(frozen=True, slots=True)
class StrengthDetails:
    """Character-class flags used for strength scoring."""

    length: bool = False
    has_number: bool = False
    has_lower_case: bool = False
    has_upper_case: bool = False
    has_special_char: bool = False

    def variety(self) -> int:
        """Number of flags that are set."""
        return sum(
            (
                self.length,
                self.has_number,
                self.has_lower_case,
                self.has_upper_case,
                self.has_special_char,
            )
        )


@dataclass(frozen=True, slots=True)
class PasswordStrengthResult:
    """Outcome of password strength scoring."""

    score: int
    level: StrengthLevel
    message: str
    details: StrengthDetails

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "score": self.score,
            "level": self.level.value,
            "message": self.message,
            "details": asdict(self.details),
        }
