"""
The WHOQOL-BREF instrument.

26 five-point Likert items: two overall items (Q1, Q2) and four domains.
Items measuring pain, dependence on medical treatment and negative feelings
(Q3, Q4, Q26) are negatively worded and reversed before scoring.

Reference:
    WHOQOL Group (1998) "Development of the World Health Organization
    WHOQOL-BREF quality of life assessment", Psychological Medicine, 28(3),
    551-558.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    """One WHOQOL-BREF item."""
    id: str
    text: str
    domain: str
    scale: str
    negative: bool = False


QUESTIONS: tuple[Question, ...] = (
    # Overall quality of life and general health
    Question('Q1', 'How would you rate your quality of life?', 'overall', 'quality'),
    Question('Q2', 'How satisfied are you with your health?', 'overall', 'satisfaction'),
    # Intensity
    Question('Q3', 'To what extent do you feel that physical pain prevents you '
                   'from doing what you need to do?', 'physical', 'intensity', negative=True),
    Question('Q4', 'How much do you need any medical treatment to function in '
                   'your daily life?', 'physical', 'intensity', negative=True),
    Question('Q5', 'How much do you enjoy life?', 'psychological', 'intensity'),
    Question('Q6', 'To what extent do you feel your life to be meaningful?',
             'psychological', 'intensity'),
    Question('Q7', 'How well are you able to concentrate?', 'psychological', 'intensity'),
    Question('Q8', 'How safe do you feel in your daily life?', 'environment', 'intensity'),
    Question('Q9', 'How healthy is your physical environment?', 'environment', 'intensity'),
    # Capacity
    Question('Q10', 'Do you have enough energy for everyday life?', 'physical', 'capacity'),
    Question('Q11', 'Are you able to accept your bodily appearance?',
             'psychological', 'capacity'),
    Question('Q12', 'Have you enough money to meet your needs?', 'environment', 'capacity'),
    Question('Q13', 'How available to you is the information that you need in '
                    'your day-to-day life?', 'environment', 'capacity'),
    Question('Q14', 'To what extent do you have the opportunity for leisure '
                    'activities?', 'environment', 'capacity'),
    # Evaluation and satisfaction
    Question('Q15', 'How well are you able to get around?', 'physical', 'evaluation'),
    Question('Q16', 'How satisfied are you with your sleep?', 'physical', 'satisfaction'),
    Question('Q17', 'How satisfied are you with your ability to perform your '
                    'daily living activities?', 'physical', 'satisfaction'),
    Question('Q18', 'How satisfied are you with your capacity for work?',
             'physical', 'satisfaction'),
    Question('Q19', 'How satisfied are you with yourself?', 'psychological', 'satisfaction'),
    Question('Q20', 'How satisfied are you with your personal relationships?',
             'social', 'satisfaction'),
    Question('Q21', 'How satisfied are you with your sex life?', 'social', 'satisfaction'),
    Question('Q22', 'How satisfied are you with the support you get from your '
                    'friends?', 'social', 'satisfaction'),
    Question('Q23', 'How satisfied are you with the conditions of your living '
                    'place?', 'environment', 'satisfaction'),
    Question('Q24', 'How satisfied are you with your access to health services?',
             'environment', 'satisfaction'),
    Question('Q25', 'How satisfied are you with your transport?', 'environment', 'satisfaction'),
    # Frequency
    Question('Q26', 'How often do you have negative feelings such as blue mood, '
                    'despair, anxiety, depression?', 'psychological', 'frequency',
             negative=True),
)

QUESTION_IDS: tuple[str, ...] = tuple(q.id for q in QUESTIONS)

NEGATIVE_ITEMS: frozenset[str] = frozenset(q.id for q in QUESTIONS if q.negative)

# The four primary domains, in reporting order.
PRIMARY_DOMAINS: tuple[str, ...] = ('physical', 'psychological', 'social', 'environment')

DOMAIN_ITEMS: dict[str, tuple[str, ...]] = {
    'physical': ('Q3', 'Q4', 'Q10', 'Q15', 'Q16', 'Q17', 'Q18'),
    'psychological': ('Q5', 'Q6', 'Q7', 'Q11', 'Q19', 'Q26'),
    'social': ('Q20', 'Q21', 'Q22'),
    'environment': ('Q8', 'Q9', 'Q12', 'Q13', 'Q14', 'Q23', 'Q24', 'Q25'),
    'overall': ('Q1', 'Q2'),
}

LIKERT_SCALES: dict[str, tuple[str, ...]] = {
    'quality': ('Very poor', 'Poor', 'Neither poor nor good', 'Good', 'Very good'),
    'satisfaction': ('Very dissatisfied', 'Dissatisfied',
                     'Neither satisfied nor dissatisfied', 'Satisfied', 'Very satisfied'),
    'intensity': ('Not at all', 'A little', 'A moderate amount', 'Very much', 'An extreme amount'),
    'capacity': ('Not at all', 'A little', 'Moderately', 'Mostly', 'Completely'),
    'evaluation': ('Very poor', 'Poor', 'Neither poor nor good', 'Good', 'Very good'),
    'frequency': ('Never', 'Seldom', 'Quite often', 'Very often', 'Always'),
}

_BY_ID: dict[str, Question] = {q.id: q for q in QUESTIONS}


def get_question(question_id: str) -> Question:
    """
    Look up a question by id.

    Raises:
        KeyError: If question_id is not a WHOQOL-BREF item
    """
    return _BY_ID[question_id]


def likert_scale(question_id: str) -> tuple[str, ...]:
    """The five answer labels for a question, lowest value first."""
    return LIKERT_SCALES[get_question(question_id).scale]
