"""Standard liner code suggestions."""

from typing import List

# Product families and the number of codes each family defines
LINER_FAMILIES = [131, 132]
CODES_PER_FAMILY = 90

def standard_liner_codes() -> List[str]:
    """Return the standard liner codes offered to operators.

    Codes look like ``"131 - 7"``. Operators may still type a custom code;
    this list only drives suggestions and warnings.
    """
    codes = []
    for family in LINER_FAMILIES:
        for number in range(1, CODES_PER_FAMILY + 1):
            codes.append(f"{family} - {number}")
    return codes

def is_standard_liner_code(code: str) -> bool:
    """Check whether a code is one of the standard suggestions."""
    return code.strip() in set(standard_liner_codes())
