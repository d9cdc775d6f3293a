"""Tests for selector specificity."""

import pytest

from css_inliner.model import Specificity


# ---------------------------------------------------------------------------
# Computation
# ---------------------------------------------------------------------------


class TestFromSelector:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("*", (0, 0, 0)),
            ("div", (0, 0, 1)),
            (".note", (0, 1, 0)),
            ("#main", (1, 0, 0)),
            ("div p.note", (0, 1, 2)),
            ("a[href]", (0, 1, 1)),
            ("li:first-child", (0, 1, 1)),
            ("p::first-line", (0, 0, 2)),
            ("div > #x.y[title]", (1, 2, 1)),
        ],
    )
    def test_counts(self, selector, expected):
        assert Specificity.from_selector(selector).as_tuple() == expected

    def test_invalid_selector_is_zero(self):
        assert Specificity.from_selector("..broken") == Specificity(0, 0, 0)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            Specificity(-1, 0, 0)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


class TestComparison:
    def test_ids_dominate_classes(self):
        assert Specificity(1, 0, 0) > Specificity(0, 10, 10)

    def test_classes_dominate_types(self):
        assert Specificity(0, 1, 0) > Specificity(0, 0, 25)

    def test_equal(self):
        assert Specificity(0, 1, 2) == Specificity(0, 1, 2)
        assert Specificity(0, 1, 2) <= Specificity(0, 1, 2)

    def test_compare_to(self):
        low, high = Specificity(0, 0, 1), Specificity(0, 1, 0)
        assert low.compare_to(high) == -1
        assert high.compare_to(low) == 1
        assert low.compare_to(Specificity(0, 0, 1)) == 0

    def test_sorting(self):
        values = [Specificity(1, 0, 0), Specificity(0, 0, 1), Specificity(0, 1, 0)]
        assert sorted(values) == [
            Specificity(0, 0, 1),
            Specificity(0, 1, 0),
            Specificity(1, 0, 0),
        ]

    def test_is_frozen(self):
        spec = Specificity(0, 1, 0)
        with pytest.raises(AttributeError):
            spec.ids = 3  # type: ignore[misc]

    def test_str(self):
        assert str(Specificity(1, 2, 3)) == "1,2,3"
