"""
Age Group Rule

Parses catalog age-group labels such as "Birth+", "65+ years" or
"11-12 years" and checks a patient age (in whole years) against them.
"""

import re
from dataclasses import dataclass

from vaxplan.core.domain import ValueObject

_LEADING_INT = re.compile(r"^\s*(\d+)")


def _leading_int(text: str) -> int | None:
    """Integer at the start of ``text`` (ignoring leading spaces), if any."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class AgeGroupRule(ValueObject):
    """
    Age-group eligibility rule.

    Grammar:
    - ``"Birth+"``: always matches
    - ``"N+ <unit>"``: matches when age >= N
    - ``"N-M <unit>"``: matches when N <= age <= M
    - anything else, or a rule whose bounds cannot be read: matches

    Example:
        ```python
        AgeGroupRule("65+ years").matches(70)   # True
        AgeGroupRule("11-12 years").matches(15)  # False
        AgeGroupRule("16 years (booster)").matches(40)  # True (permissive)
        ```
    """

    label: str

    def matches(self, age: int) -> bool:
        """Check whether a patient of ``age`` years satisfies this rule."""
        if self.label == "Birth+":
            return True

        if "+" in self.label:
            min_age = _leading_int(self.label.split("+")[0])
            if min_age is None:
                return True
            return age >= min_age

        if "-" in self.label:
            parts = self.label.split("-")
            min_age = _leading_int(parts[0])
            max_age = _leading_int(parts[1])
            if min_age is None or max_age is None:
                return True
            return min_age <= age <= max_age

        return True

    def __str__(self) -> str:
        return self.label
