"""Tests for ordering, recurrence, reconciliation and proximity."""

from itertools import permutations

import pytest

from agenda.core.dates import Date, add_days
from agenda.core.items import Item, RepeatRule
from agenda.core.recurrence import advance, next_occurrence
from agenda.core.schedule import (
    Proximity,
    classify,
    compare_items,
    insert_item,
    reconcile,
    sort_items,
)


# Fixtures
@pytest.fixture
def today():
    return Date(2025, 1, 15)


@pytest.fixture
def mixed_items(today):
    """Past, current, future and undated items."""
    return [
        Item(text="Undated one"),
        Item(text="Next week", date=Date(2025, 1, 22)),
        Item(text="Stale weekly", repeat=RepeatRule.WEEKLY, date=Date(2025, 1, 7), complete=True),
        Item(text="Expired", date=Date(2025, 1, 14)),
        Item(text="Today", date=today),
        Item(text="Undated two"),
    ]


class TestCompareItems:
    def test_both_undated(self):
        assert compare_items(Item(text="a"), Item(text="b")) == 0

    def test_undated_after_dated(self, today):
        assert compare_items(Item(text="a"), Item(text="b", date=today)) == 1
        assert compare_items(Item(text="a", date=today), Item(text="b")) == -1

    def test_dated_by_date(self, today):
        later = Item(text="later", date=Date(2025, 2, 1))
        now = Item(text="now", date=today)
        assert compare_items(now, later) == -1
        assert compare_items(later, now) == 1
        assert compare_items(now, Item(text="same", date=today)) == 0

    def test_total_preorder(self, today):
        items = [
            Item(text="a", date=today),
            Item(text="b", date=Date(2025, 3, 1)),
            Item(text="c"),
            Item(text="d", date=Date(2024, 12, 1)),
        ]
        for a in items:
            assert compare_items(a, a) == 0
            for b in items:
                assert compare_items(a, b) == -compare_items(b, a)
                for c in items:
                    if compare_items(a, b) <= 0 and compare_items(b, c) <= 0:
                        assert compare_items(a, c) <= 0


class TestSortItems:
    def test_undated_always_last(self, today):
        base = [
            Item(text="undated"),
            Item(text="future", date=Date(2030, 1, 1)),
            Item(text="today", date=today),
        ]
        for order in permutations(base):
            result = sort_items(list(order))
            assert [i.text for i in result[:2]] == ["today", "future"]
            assert result[2].text == "undated"

    def test_stable_for_same_date(self, today):
        items = [Item(text=str(n), date=today) for n in range(5)]
        assert [i.text for i in sort_items(items)] == ["0", "1", "2", "3", "4"]

    def test_stable_for_undated(self):
        items = [Item(text="x"), Item(text="y"), Item(text="z")]
        assert [i.text for i in sort_items(items)] == ["x", "y", "z"]

    def test_insert_goes_after_same_date(self, today):
        items = [Item(text="first", date=today), Item(text="undated")]
        result = insert_item(items, Item(text="second", date=today))
        assert [i.text for i in result] == ["first", "second", "undated"]

    def test_insert_does_not_modify_input(self, today):
        items = [Item(text="first", date=today)]
        insert_item(items, Item(text="second", date=today))
        assert len(items) == 1


class TestNextOccurrence:
    def test_never_is_dropped(self, today):
        assert next_occurrence(Item(text="t", date=today)) is None

    def test_weekly(self):
        item = Item(text="t", repeat=RepeatRule.WEEKLY, date=Date(2025, 1, 28), complete=True)
        result = next_occurrence(item)
        assert result.date == Date(2025, 2, 4)
        assert result.complete is False
        assert result.text == "t"
        assert result.repeat is RepeatRule.WEEKLY

    def test_monthly(self):
        item = Item(text="t", repeat=RepeatRule.MONTHLY, date=Date(2024, 12, 15), complete=True)
        result = next_occurrence(item)
        assert result.date == Date(2025, 1, 15)
        assert result.complete is False

    def test_yearly(self):
        item = Item(text="t", repeat=RepeatRule.YEARLY, date=Date(2024, 3, 1))
        assert next_occurrence(item).date == Date(2025, 3, 1)

    def test_input_untouched(self):
        item = Item(text="t", repeat=RepeatRule.WEEKLY, date=Date(2025, 1, 1), complete=True)
        next_occurrence(item)
        assert item.date == Date(2025, 1, 1)
        assert item.complete is True


class TestAdvance:
    def test_weekly_forty_days_stale(self, today):
        item = Item(
            text="stale",
            repeat=RepeatRule.WEEKLY,
            date=add_days(today, -40),
            complete=True,
        )
        result = advance(item, as_of=today)
        assert result.date == Date(2025, 1, 17)
        assert result.date >= today
        assert add_days(result.date, -7) < today
        assert result.complete is False

    def test_monthly_catches_up_several_months(self, today):
        item = Item(text="rent", repeat=RepeatRule.MONTHLY, date=Date(2024, 9, 1))
        assert advance(item, as_of=today).date == Date(2025, 2, 1)

    def test_current_item_unchanged(self, today):
        item = Item(text="t", date=today, complete=True)
        assert advance(item, as_of=today) is item

    def test_undated_unchanged(self, today):
        item = Item(text="t")
        assert advance(item, as_of=today) is item

    def test_invalid_monthly_day_still_terminates(self):
        item = Item(text="t", repeat=RepeatRule.MONTHLY, date=Date(2025, 1, 31))
        assert advance(item, as_of=Date(2025, 3, 5)).date == Date(2025, 3, 31)


class TestReconcile:
    def test_never_repeat_yesterday_removed(self, today):
        items = [Item(text="yesterday", date=Date(2025, 1, 14))]
        assert reconcile(items, as_of=today) == []

    def test_monthly_rollover(self):
        items = [Item(text="bill", repeat=RepeatRule.MONTHLY, date=Date(2024, 12, 15))]
        result = reconcile(items, as_of=Date(2025, 1, 1))
        assert result[0].date == Date(2025, 1, 15)

    def test_mixed(self, mixed_items, today):
        result = reconcile(mixed_items, as_of=today)
        assert [i.text for i in result] == [
            "Today",
            "Stale weekly",
            "Next week",
            "Undated one",
            "Undated two",
        ]
        stale = result[1]
        assert stale.date == Date(2025, 1, 21)
        assert stale.complete is False

    def test_idempotent(self, mixed_items, today):
        once = reconcile(mixed_items, as_of=today)
        assert reconcile(once, as_of=today) == once

    def test_current_list_is_fixed_point(self, today):
        items = [
            Item(text="a", date=today, complete=True),
            Item(text="b", date=Date(2025, 2, 1), repeat=RepeatRule.YEARLY),
            Item(text="c"),
        ]
        assert reconcile(items, as_of=today) == items

    def test_does_not_modify_input(self, mixed_items, today):
        before = list(mixed_items)
        reconcile(mixed_items, as_of=today)
        assert mixed_items == before


class TestClassify:
    def test_complete_wins_over_urgency(self, today):
        item = Item(text="t", date=Date(2025, 1, 16), complete=True)
        assert classify(item, as_of=today) is Proximity.COMPLETE

    def test_due_now(self, today):
        assert classify(Item(text="t", date=today), as_of=today) is Proximity.DUE_NOW
        assert classify(Item(text="t", date=Date(2025, 1, 16)), as_of=today) is Proximity.DUE_NOW

    def test_due_soon(self, today):
        assert classify(Item(text="t", date=Date(2025, 1, 18)), as_of=today) is Proximity.DUE_SOON

    def test_due_week(self, today):
        assert classify(Item(text="t", date=Date(2025, 1, 22)), as_of=today) is Proximity.DUE_WEEK

    def test_far_away(self, today):
        assert classify(Item(text="t", date=Date(2025, 1, 23)), as_of=today) is Proximity.NONE

    def test_undated(self, today):
        assert classify(Item(text="t"), as_of=today) is Proximity.NONE

    def test_undated_complete(self, today):
        assert classify(Item(text="t", complete=True), as_of=today) is Proximity.COMPLETE
