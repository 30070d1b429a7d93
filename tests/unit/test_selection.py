"""
Тесты для First-non-null selection

Проверяемые инварианты:
1. Если k-й источник первым вернул значение, вычислено ровно k источников
2. Каждый источник вычисляется не более одного раза
3. Все источники пусты → default / NoValuePresent
4. Falsy значения считаются присутствующими
"""

import pytest

from streamline.core.functional import (
    NoValuePresent,
    coalesce,
    first_non_null,
    first_non_null_or_raise,
)


class CountingSource:
    """Источник, считающий свои вызовы."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


class TestFirstNonNull:
    def test_returns_kth_and_evaluates_exactly_k(self):
        sources = [CountingSource(None), CountingSource(None), CountingSource("third"),
                   CountingSource("fourth")]

        assert first_non_null(*sources) == "third"
        assert [s.calls for s in sources] == [1, 1, 1, 0]

    def test_first_source_short_circuits(self):
        first, second = CountingSource("env"), CountingSource("file")

        assert first_non_null(first, second) == "env"
        assert second.calls == 0

    def test_all_absent_returns_default(self):
        sources = [CountingSource(None) for _ in range(3)]

        assert first_non_null(*sources, default="fallback") == "fallback"
        assert all(s.calls == 1 for s in sources)

    def test_all_absent_without_default_returns_none(self):
        assert first_non_null(lambda: None) is None

    def test_no_sources(self):
        assert first_non_null(default=5) == 5

    @pytest.mark.parametrize("falsy", [0, "", False, []])
    def test_falsy_values_are_present(self, falsy):
        assert first_non_null(lambda: None, lambda: falsy, default="x") == falsy

    def test_source_exception_propagates_and_stops(self):
        error = KeyError("missing")
        later = CountingSource("never")

        def failing():
            raise error

        with pytest.raises(KeyError) as exc_info:
            first_non_null(lambda: None, failing, later)

        assert exc_info.value is error
        assert later.calls == 0


class TestFirstNonNullOrRaise:
    def test_returns_value(self):
        assert first_non_null_or_raise(lambda: None, lambda: 3) == 3

    def test_raises_when_absent(self):
        with pytest.raises(NoValuePresent, match="none of 2 sources"):
            first_non_null_or_raise(lambda: None, lambda: None)

    def test_custom_message(self):
        with pytest.raises(NoValuePresent, match="no credentials"):
            first_non_null_or_raise(lambda: None, message="no credentials")

    def test_is_lookup_error(self):
        with pytest.raises(LookupError):
            first_non_null_or_raise()


class TestCoalesce:
    def test_first_present(self):
        assert coalesce(None, 0, 5) == 0

    def test_default(self):
        assert coalesce(None, None, default="x") == "x"
        assert coalesce() is None
