"""
earning_templates.domain.enums — All enumerations used across the service.

Member values are the symbolic names callers send and receive over the wire,
so ``PayCycle("OneTwo")`` is the exact-name lookup.
"""

from enum import Enum

from earning_templates.domain.errors import InvalidArgument


# ---------------------------------------------------------------------------
# Pay cycle — which of the five numbered pay periods an earning applies to
# ---------------------------------------------------------------------------

class PayCycle(str, Enum):
    ONE                          = "One"
    ONE_TWO                      = "OneTwo"
    ONE_THREE                    = "OneThree"
    ONE_FOUR                     = "OneFour"
    ONE_FIVE                     = "OneFive"
    ONE_TWO_THREE                = "OneTwoThree"
    ONE_TWO_FOUR                 = "OneTwoFour"
    ONE_TWO_FIVE                 = "OneTwoFive"
    ONE_TWO_THREE_FOUR           = "OneTwoThreeFour"
    ONE_TWO_THREE_FIVE           = "OneTwoThreeFive"
    ONE_TWO_THREE_FOUR_FIVE      = "OneTwoThreeFourFive"
    TWO                          = "Two"
    TWO_THREE                    = "TwoThree"
    TWO_FOUR                     = "TwoFour"
    TWO_FIVE                     = "TwoFive"
    TWO_THREE_FOUR               = "TwoThreeFour"
    TWO_THREE_FIVE               = "TwoThreeFive"
    TWO_THREE_FOUR_FIVE          = "TwoThreeFourFive"
    THREE                        = "Three"
    THREE_FOUR                   = "ThreeFour"
    THREE_FIVE                   = "ThreeFive"
    THREE_FOUR_FIVE              = "ThreeFourFive"
    FOUR                         = "Four"
    FOUR_FIVE                    = "FourFive"
    FIVE                         = "Five"

    @classmethod
    def parse(cls, text: str) -> "PayCycle":
        """Resolve a symbolic name by exact, case-sensitive match."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidArgument(
                f"'{text}' is not a valid pay cycle",
                field="payCycle",
                value=text,
            ) from None


# ---------------------------------------------------------------------------
# Calculation method
# ---------------------------------------------------------------------------

class CalculationMethod(str, Enum):
    FLAT_AMOUNT = "FlatAmount"
    UNIT_X_RATE = "UnitXRate"


# ---------------------------------------------------------------------------
# Override policy
# ---------------------------------------------------------------------------

class OverrideMode(str, Enum):
    """
    How a caller override is applied to a template's identity fields.

    replace: override code/description/payCycle are used verbatim, so a
             partial override blanks the fields it leaves out.
    merge:   blank override code/description fall back to the template's.
    """
    REPLACE = "replace"
    MERGE   = "merge"

    @classmethod
    def from_setting(cls, value: str) -> "OverrideMode":
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown override mode '{value}' (expected one of: {allowed})") from None
