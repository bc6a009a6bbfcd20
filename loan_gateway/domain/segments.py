"""Customer segmentation from the personal code"""

from loan_gateway.domain.models import CustomerSegment


def determine_customer_segment(segment: int) -> CustomerSegment:
    """
    Map the last four digits of a personal code to a customer segment.

    Bands:
    - 0000 - 2499: DEBT (no loan possible)
    - 2500 - 4999: SEGMENT_1
    - 5000 - 7499: SEGMENT_2
    - 7500 - 9999: SEGMENT_3
    """
    if segment < 2500:
        return CustomerSegment.DEBT
    elif segment < 5000:
        return CustomerSegment.SEGMENT_1
    elif segment < 7500:
        return CustomerSegment.SEGMENT_2
    else:
        return CustomerSegment.SEGMENT_3


def get_credit_modifier(personal_code: str) -> int:
    return determine_customer_segment(int(personal_code[-4:])).credit_modifier
