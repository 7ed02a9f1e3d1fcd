# Backend/app/utils/rating_scales.py
"""
Agency rating scales (long-term issuer ratings).

Moody's:  Aaa, Aa1..Aa3, A1..A3, Baa1..Baa3, Ba1..Ba3, B1..B3, Caa1..Caa3, Ca, C
S&P/Fitch: AAA, AA+/AA/AA-, ..., CCC+/CCC/CCC-, CC, C, D

Investment grade stops at Baa3 / BBB-.
"""

import re

MOODYS_PATTERN = re.compile(r'^(Aaa|Aa[1-3]|A[1-3]|Baa[1-3]|Ba[1-3]|B[1-3]|Caa[1-3]|Ca|C)$')
SP_PATTERN     = re.compile(r'^(AAA|AA[+-]?|A[+-]?|BBB[+-]?|BB[+-]?|B[+-]?|CCC[+-]?|CC|C|D)$')
FITCH_PATTERN  = SP_PATTERN

MOODYS_INVESTMENT_GRADE = re.compile(r'^(Aaa|Aa[1-3]|A[1-3]|Baa[1-3])$')
SP_INVESTMENT_GRADE     = re.compile(r'^(AAA|AA[+-]?|A[+-]?|BBB[+-]?)$')

# order_number boundary used by the grade filters
LAST_INVESTMENT_GRADE_ORDER = 12

AGENCIES = {
    # name: (attribute, format pattern, investment-grade pattern)
    "MOODYS": ('moodys_rating', MOODYS_PATTERN, MOODYS_INVESTMENT_GRADE),
    "SP":     ('sand_p_rating', SP_PATTERN, SP_INVESTMENT_GRADE),
    "FITCH":  ('fitch_rating', FITCH_PATTERN, SP_INVESTMENT_GRADE),
}


def _present(label):
    return label is not None and label.strip() != ''


def is_valid_label(agency, label):
    """Blank labels are valid (the agency simply has no rating)."""
    if not _present(label):
        return True
    _, pattern, _ = AGENCIES[agency]
    return bool(pattern.match(label.strip()))


def grades(moodys_rating, sand_p_rating, fitch_rating):
    """
    Return one bool per present label: True for investment grade.
    """
    labels = {"MOODYS": moodys_rating, "SP": sand_p_rating, "FITCH": fitch_rating}
    result = []
    for agency, label in labels.items():
        if _present(label):
            _, _, investment = AGENCIES[agency]
            result.append(bool(investment.match(label.strip())))
    return result


def is_investment_grade(moodys_rating, sand_p_rating, fitch_rating):
    """True when any agency places the issuer in investment grade."""
    return any(grades(moodys_rating, sand_p_rating, fitch_rating))
