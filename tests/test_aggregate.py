import unittest

from fakes import TODAY, InMemoryTaskStore, make_record
from streakboard.errors import FetchFailure, OutOfWindowWrite, WriteFailure
from streakboard.service.aggregate import aggregate, append_task, fetch_window
from streakboard.service.window import find_day, generate_window


class TestAggregate(unittest.TestCase):
    def test_no_records_leaves_every_day_empty(self) -> None:
        window = aggregate(generate_window(TODAY), [])

        self.assertEqual(len(window), 365)
        self.assertTrue(all(day["tasks"] == [] for day in window))

    def test_single_record_lands_on_its_day(self) -> None:
        window = aggregate(
            generate_window(TODAY), [make_record("2024-03-05", "wrote spec")]
        )

        self.assertEqual(find_day(window, "2024-03-05")["tasks"], ["wrote spec"])  # type: ignore[index]
        others = [day for day in window if day["date"] != "2024-03-05"]
        self.assertTrue(all(day["tasks"] == [] for day in others))

    def test_records_keep_fetch_order_per_date(self) -> None:
        records = [
            make_record("2024-03-01", "b"),
            make_record("2024-02-01", "x"),
            make_record("2024-03-01", "a"),
            make_record("2024-03-01", "c"),
        ]

        window = aggregate(generate_window(TODAY), records)

        self.assertEqual(find_day(window, "2024-03-01")["tasks"], ["b", "a", "c"])  # type: ignore[index]
        self.assertEqual(find_day(window, "2024-02-01")["tasks"], ["x"])  # type: ignore[index]

    def test_records_outside_window_are_dropped(self) -> None:
        records = [
            make_record("2023-03-06", "too old"),
            make_record("2024-03-06", "tomorrow"),
            make_record("2023-03-07", "first day"),
        ]

        window = aggregate(generate_window(TODAY), records)

        self.assertEqual(window[0]["tasks"], ["first day"])
        self.assertEqual(sum(len(day["tasks"]) for day in window), 1)

    def test_records_of_other_owners_are_dropped(self) -> None:
        records = [
            make_record("2024-03-05", "mine", owner="user-1"),
            make_record("2024-03-05", "theirs", owner="user-2"),
        ]

        window = aggregate(generate_window(TODAY), records, owner="user-1")

        self.assertEqual(window[-1]["tasks"], ["mine"])

    def test_input_window_is_not_mutated(self) -> None:
        original = generate_window(TODAY)

        result = aggregate(original, [make_record("2024-03-05", "wrote spec")])

        self.assertIsNot(result, original)
        self.assertEqual(original[-1]["tasks"], [])
        self.assertEqual(
            [day["date"] for day in result], [day["date"] for day in original]
        )

    def test_aggregation_is_idempotent(self) -> None:
        records = [make_record("2024-03-05", "a"), make_record("2024-03-04", "b")]

        first = aggregate(generate_window(TODAY), records)
        second = aggregate(generate_window(TODAY), records)
        again = aggregate(first, records)

        self.assertEqual(first, second)
        self.assertEqual(first, again)


class TestFetchWindow(unittest.TestCase):
    def test_fetch_merges_owner_records(self) -> None:
        store = InMemoryTaskStore([make_record("2024-03-05", "wrote spec")])

        window = fetch_window(store, "user-1", generate_window(TODAY))

        self.assertEqual(window[-1]["tasks"], ["wrote spec"])

    def test_fetch_failure_carries_original_window(self) -> None:
        store = InMemoryTaskStore([make_record("2024-03-05", "wrote spec")])
        store.fail_fetch = True
        original = generate_window(TODAY)

        with self.assertRaises(FetchFailure) as raised:
            fetch_window(store, "user-1", original)

        self.assertIs(raised.exception.window, original)
        self.assertTrue(all(day["tasks"] == [] for day in raised.exception.window))
        self.assertIn("connection refused", str(raised.exception))


class TestAppendTask(unittest.TestCase):
    def test_append_writes_then_updates_matching_day(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        updated = append_task(store, "user-1", window, "2024-03-05", "wrote spec")

        self.assertEqual(store.insert_calls, 1)
        self.assertEqual(updated[-1]["tasks"], ["wrote spec"])
        self.assertEqual(window[-1]["tasks"], [])

    def test_untouched_days_keep_identity(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        updated = append_task(store, "user-1", window, "2024-03-05", "wrote spec")

        self.assertIsNot(updated, window)
        self.assertIsNot(updated[-1], window[-1])
        for before, after in zip(window[:-1], updated[:-1]):
            self.assertIs(before, after)

    def test_blank_text_is_a_no_op(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        updated = append_task(store, "user-1", window, "2024-03-05", "  ")

        self.assertIs(updated, window)
        self.assertEqual(store.insert_calls, 0)

    def test_text_is_trimmed(self) -> None:
        store = InMemoryTaskStore()

        updated = append_task(
            store, "user-1", generate_window(TODAY), "2024-03-05", "  ran 5k \n"
        )

        self.assertEqual(updated[-1]["tasks"], ["ran 5k"])
        self.assertEqual(store.records[0]["text"], "ran 5k")

    def test_sequential_appends_keep_order(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        window = append_task(store, "user-1", window, "2024-03-05", "a")
        window = append_task(store, "user-1", window, "2024-03-05", "b")

        self.assertEqual(window[-1]["tasks"], ["a", "b"])

    def test_write_failure_leaves_window_alone(self) -> None:
        store = InMemoryTaskStore()
        store.fail_insert = True
        window = generate_window(TODAY)

        with self.assertRaises(WriteFailure) as raised:
            append_task(store, "user-1", window, "2024-03-05", "wrote spec")

        self.assertEqual(raised.exception.text, "wrote spec")
        self.assertEqual(window[-1]["tasks"], [])
        self.assertEqual(store.records, [])

    def test_out_of_window_write_is_persisted_but_reported(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        with self.assertRaises(OutOfWindowWrite) as raised:
            append_task(store, "user-1", window, "2024-03-06", "after midnight")

        self.assertEqual(raised.exception.date, "2024-03-06")
        self.assertEqual(len(store.records), 1)
        self.assertTrue(all(day["tasks"] == [] for day in window))

    def test_append_then_refetch_shows_each_task_once(self) -> None:
        store = InMemoryTaskStore()
        window = generate_window(TODAY)

        window = append_task(store, "user-1", window, "2024-03-05", "first")
        window = append_task(store, "user-1", window, "2024-03-05", "second")
        window = append_task(store, "user-1", window, "2024-03-04", "earlier")
        refetched = fetch_window(store, "user-1", generate_window(TODAY))

        self.assertEqual(refetched, window)
        self.assertEqual(refetched[-1]["tasks"], ["first", "second"])
        self.assertEqual(refetched[-2]["tasks"], ["earlier"])
