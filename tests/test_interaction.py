import unittest

from fakes import TODAY, InMemoryTaskStore
from streakboard.service import interaction
from streakboard.service.aggregate import append_task
from streakboard.service.window import generate_window


class TestInteractionState(unittest.TestCase):
    def setUp(self) -> None:
        self.window = generate_window(TODAY)
        self.today = self.window[-1]
        self.yesterday = self.window[-2]

    def test_initial_state_is_idle(self) -> None:
        state = interaction.initial_state()

        self.assertIsNone(state["hovered_date"])
        self.assertIsNone(state["selected_date"])
        self.assertIsNone(interaction.hovered_day(state, self.window))
        self.assertIsNone(interaction.selected_day(state, self.window))

    def test_hover_enter_and_leave(self) -> None:
        state = interaction.hover_enter(interaction.initial_state(), self.today)
        self.assertIs(interaction.hovered_day(state, self.window), self.today)

        state = interaction.hover_enter(state, self.yesterday)
        self.assertIs(interaction.hovered_day(state, self.window), self.yesterday)

        state = interaction.hover_leave(state)
        self.assertIsNone(interaction.hovered_day(state, self.window))

    def test_hover_and_selection_are_independent(self) -> None:
        state = interaction.click(interaction.initial_state(), self.today)
        state = interaction.hover_enter(state, self.yesterday)

        self.assertEqual(state["selected_date"], self.today["date"])
        self.assertEqual(state["hovered_date"], self.yesterday["date"])

        state = interaction.hover_leave(state)
        self.assertEqual(state["selected_date"], self.today["date"])

        state = interaction.hover_enter(state, self.yesterday)
        state = interaction.deselect(state)
        self.assertIsNone(state["selected_date"])
        self.assertEqual(state["hovered_date"], self.yesterday["date"])

    def test_transitions_do_not_mutate_previous_state(self) -> None:
        idle = interaction.initial_state()

        interaction.click(idle, self.today)
        interaction.hover_enter(idle, self.today)

        self.assertEqual(idle, interaction.initial_state())

    def test_selected_day_follows_appended_tasks(self) -> None:
        store = InMemoryTaskStore()
        state = interaction.click(interaction.initial_state(), self.today)

        window = append_task(store, "user-1", self.window, self.today["date"], "a")
        state = interaction.task_appended(state, self.today["date"], "a")
        window = append_task(store, "user-1", window, self.today["date"], "b")

        selected = interaction.selected_day(state, window)
        self.assertEqual(selected["tasks"], ["a", "b"])  # type: ignore[index]

    def test_selection_outside_window_projects_to_none(self) -> None:
        state = interaction.click(interaction.initial_state(), self.today)

        later_window = generate_window(TODAY.add(days=400))

        self.assertIsNone(interaction.selected_day(state, later_window))
