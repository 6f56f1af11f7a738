"""
Tests for participant records and study-level analyses.
"""

import pytest

from whoqolstats.core.exceptions import ValidationError
from whoqolstats.core.result import TestType
from whoqolstats.participants import (
    Participant,
    active,
    categorical_frequency,
    compare_groups,
    correlate,
    crosstab,
    domain_reliability,
    domain_scores,
    domain_summaries,
    group_outcomes,
    included,
    paired_values,
    question_frequencies,
    regress,
    scores_by_group,
)
from whoqolstats.scoring import NEGATIVE_ITEMS, QUESTION_IDS


def _uniform(value):
    """Answers that score (value - 1) * 25 in every domain."""
    return {q: (6 - value if q in NEGATIVE_ITEMS else value) for q in QUESTION_IDS}


def _person(pid, value, **socio):
    return Participant(id=pid, socioeconomic=socio, responses=_uniform(value))


@pytest.fixture
def cohort(random_responses):
    people = []
    for i in range(30):
        people.append(Participant(
            id=f"p{i}",
            socioeconomic={
                "gender": ("woman", "man", "non-binary")[i % 3],
                "income": ("low", "high")[i % 2],
                "age": 20 + i,
            },
            responses=random_responses(missing_prob=0.05),
        ))
    people.append(Participant(id="excluded", socioeconomic={"gender": "woman"},
                              responses=_uniform(5), is_excluded=True,
                              exclusion_reason="under 18"))
    people.append(Participant(id="no-answers", socioeconomic={"gender": "man"}))
    return people


# ═══════════════════════════════════════════════════════════════════════
# Records
# ═══════════════════════════════════════════════════════════════════════


class TestRecords:

    def test_active(self, cohort):
        ids = [p.id for p in active(cohort)]
        assert "excluded" not in ids
        assert "no-answers" not in ids
        assert len(ids) == 30

    def test_declined_consent_never_counts(self):
        declined = Participant(id="d", socioeconomic={"gender": "woman"},
                               responses=_uniform(4), consent_given=False)
        assert not included(declined)
        assert active([declined]) == []
        assert categorical_frequency([declined], "gender") == ()
        assert included(_person("a", 3))

    def test_domain_scores(self):
        assert domain_scores(_person("a", 5)).physical == 100.0
        assert domain_scores(Participant(id="b")) is None

    def test_field_value(self):
        p = _person("a", 3, gender="woman")
        assert p.field_value("gender") == "woman"
        assert p.field_value("income") is None


# ═══════════════════════════════════════════════════════════════════════
# Variable extraction
# ═══════════════════════════════════════════════════════════════════════


class TestExtraction:

    def test_group_outcomes_min_size(self):
        people = (
            [_person(f"a{i}", 4, gender="woman") for i in range(3)]
            + [_person(f"b{i}", 2, gender="man") for i in range(2)]
            + [_person("c", 3, gender="")]
        )
        groups = group_outcomes(people, "physical", "gender")
        assert groups == {"woman": [75.0, 75.0, 75.0]}
        assert set(group_outcomes(people, "physical", "gender", min_size=2)) == {"woman", "man"}

    def test_group_outcomes_first_appearance_order(self):
        people = [_person(str(i), 3, g=label) for i, label in enumerate("bab")]
        assert list(group_outcomes(people, "social", "g", min_size=1)) == ["b", "a"]

    def test_unknown_outcome(self, cohort):
        with pytest.raises(ValidationError):
            group_outcomes(cohort, "happiness", "gender")

    def test_paired_values(self):
        people = [
            _person("a", 2, age=30),
            _person("b", 4, age=50),
            _person("c", 3, age=""),
            _person("d", 5),
        ]
        x, y = paired_values(people, "age", "mean_of_domains")
        assert x == [30.0, 50.0]
        assert y == [25.0, 75.0]


# ═══════════════════════════════════════════════════════════════════════
# Group comparison
# ═══════════════════════════════════════════════════════════════════════


class TestCompareGroups:

    def test_two_groups_run_welch(self, cohort):
        result = compare_groups(cohort, "mean_of_domains", "income")
        assert result.test_type is TestType.T_TEST
        assert set(result.group_names) == {"low", "high"}

    def test_two_groups_nonparametric(self, cohort):
        result = compare_groups(cohort, "mean_of_domains", "income", nonparametric=True)
        assert result.test_type is TestType.MANN_WHITNEY_U

    def test_three_groups_run_anova(self, cohort):
        result = compare_groups(cohort, "physical", "gender")
        assert result.test_type is TestType.ANOVA
        assert set(result.group_sizes) == {"woman", "man", "non-binary"}

    def test_three_groups_nonparametric(self, cohort):
        result = compare_groups(cohort, "physical", "gender", nonparametric=True)
        assert result.test_type is TestType.KRUSKAL_WALLIS

    def test_clear_difference(self):
        people = (
            [_person(f"h{i}", 5 if i % 2 else 4, group="high") for i in range(6)]
            + [_person(f"l{i}", 1 if i % 2 else 2, group="low") for i in range(6)]
        )
        result = compare_groups(people, "environment", "group")
        assert result.is_significant
        assert result.cohens_d > 2

    def test_not_enough_groups(self):
        people = [_person(str(i), 3, group="only") for i in range(5)]
        result = compare_groups(people, "physical", "group")
        assert result.test_type is TestType.INSUFFICIENT_DATA
        assert result.p_value is None


# ═══════════════════════════════════════════════════════════════════════
# Other analyses
# ═══════════════════════════════════════════════════════════════════════


class TestAnalyses:

    def test_correlate_and_regress(self, cohort):
        r = correlate(cohort, "age", "physical")
        assert r.test_type is TestType.CORRELATION
        assert r.n <= 30
        fit = regress(cohort, "age", "physical")
        assert fit.test_type is TestType.REGRESSION
        assert fit.n == r.n

    def test_crosstab(self, cohort):
        result = crosstab(cohort, "gender", "income")
        assert result.test_type is TestType.CHI_SQUARED
        # the excluded participant does not count; "no-answers" has no income
        assert result.table.grand_total == 30
        assert result.df == 2

    def test_crosstab_same_field(self, cohort):
        result = crosstab(cohort, "gender", "gender")
        assert result.test_type is TestType.INVALID_INPUT

    def test_domain_reliability(self, cohort):
        result = domain_reliability(cohort, "physical")
        assert result.test_type is TestType.CRONBACH_ALPHA
        assert result.n_items == 7
        assert result.n_participants <= 30

    def test_domain_summaries(self):
        people = [_person("a", 1), _person("b", 3), _person("c", 5)]
        summaries = domain_summaries(people)
        assert summaries["social"].n == 3
        assert summaries["social"].mean == 50.0
        assert summaries["social"].min == 0.0
        assert summaries["overall"].max == 100.0

    def test_categorical_frequency(self, cohort):
        rows = categorical_frequency(cohort, "gender")
        assert sum(r.frequency for r in rows) == 31  # includes "no-answers"
        assert {r.category for r in rows} == {"woman", "man", "non-binary"}

    def test_question_frequencies(self):
        people = [_person("a", 1), _person("b", 5), _person("c", 5)]
        rows = question_frequencies(people)
        assert len(rows) == 26
        q1 = rows[0]
        assert q1.question_id == "Q1"
        assert q1.n == 3
        assert q1.counts == {1: 1, 2: 0, 3: 0, 4: 0, 5: 2}
        assert q1.percentages[5] == pytest.approx(200 / 3)
        assert q1.mean == pytest.approx(11 / 3)

    def test_question_frequencies_empty(self):
        assert question_frequencies([Participant(id="x")]) == ()

    def test_scores_by_group(self):
        people = [
            _person("a", 5, gender="woman"),
            _person("b", 4, gender="woman"),
            _person("c", 2, gender="man"),
            _person("d", 3),
        ]
        rows = scores_by_group(people, "gender")
        assert [r.group for r in rows] == ["man", "woman"]
        man, woman = rows
        assert man.n == 1
        assert man.scores.physical == 25.0
        assert man.classifications["physical"] == "poor"
        assert woman.scores.physical == pytest.approx(87.5)
        assert woman.classifications["physical"] == "good"
