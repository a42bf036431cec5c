"""
Tests for session.py - score, restart, clock and input wiring.
"""

from gridsnake.domain import UP, RIGHT, Vec2, GameRules
from gridsnake.players.input import UP_ARROW, R
from gridsnake.session import GameSession


def make_rules(**kwargs):
    params = dict(width=10, height=10, step_delay=0, tick_interval=100,
                  initial_body=[(0, 4), (1, 4), (2, 4)], initial_facing=RIGHT)
    params.update(kwargs)
    return GameRules(**params)


class TestGameSession:
    """Tests for the GameSession host."""

    def test_starts_with_food_and_zero_score(self):
        session = GameSession(make_rules(), seed=1)
        assert session.state.food is not None
        assert session.state.food not in session.state.body
        assert session.score == 0
        assert session.dead is False

    def test_eating_increments_score(self):
        session = GameSession(make_rules(), seed=1)
        session.state.food = Vec2(3, 4)

        assert session.tick() is False
        assert session.score == 1
        assert len(session.state.body) == 4

    def test_update_runs_the_clock(self):
        session = GameSession(make_rules(step_delay=200), seed=1)
        session.update(150)
        assert session.state.tick == 0
        session.update(100)
        assert session.state.tick == 1

    def test_death_stops_updates(self):
        session = GameSession(make_rules(width=5, height=5, initial_body=[(2, 0), (3, 0), (4, 0)]), seed=1)

        assert session.update(1) is True
        assert session.dead is True
        body = list(session.state.body)

        assert session.update(10_000) is True
        assert session.tick() is True
        assert session.state.body == body

    def test_reset_replaces_state_and_zeroes_score(self):
        session = GameSession(make_rules(), seed=1)
        session.state.food = Vec2(3, 4)
        session.tick()
        old_state = session.state

        session.reset()
        assert session.state is not old_state
        assert session.score == 0
        assert session.dead is False
        assert session.state.body == list(session.rules.initial_body)
        assert session.state.food is not None
        assert session.games_played == 2

    def test_reset_after_death(self):
        session = GameSession(make_rules(width=5, height=5, initial_body=[(2, 0), (3, 0), (4, 0)]), seed=1)
        session.update(1)
        session.reset()
        assert session.dead is False
        assert session.state.dead is False

    def test_direction_keys_are_queued(self):
        session = GameSession(make_rules(), seed=1)
        session.input.key_down(UP_ARROW)
        assert list(session.state.input_queue) == [UP]

    def test_reset_key(self):
        session = GameSession(make_rules(), seed=1)
        session.state.food = Vec2(3, 4)
        session.tick()

        session.input.key_down(R)
        assert session.score == 0
        assert session.state.tick == 0

    def test_history_records_each_update(self):
        session = GameSession(make_rules(), seed=1, record_history=True)
        assert len(session.history) == 1

        session.update(100)
        session.update(100)
        assert len(session.history) == 3
        assert [frame["tick"] for frame in session.history] == [0, 1, 2]

    def test_history_keeps_every_caught_up_step(self):
        """A frame spanning three ticks records three snapshots, not one."""
        session = GameSession(make_rules(), seed=1, record_history=True)

        session.update(300)
        assert session.state.tick == 3
        assert [frame["tick"] for frame in session.history] == [0, 1, 2, 3]

    def test_history_records_the_dying_step_once(self):
        rules = make_rules(width=4, height=4, initial_body=[(0, 0), (1, 0), (2, 0)])
        session = GameSession(rules, seed=1, record_history=True)

        assert session.update(300) is True
        assert [frame["tick"] for frame in session.history] == [0, 1, 1]
        assert session.history[-1]["dead"] is True

    def test_history_off_by_default(self):
        session = GameSession(make_rules(), seed=1)
        session.update(100)
        assert session.history == []

    def test_seeded_sessions_replay_identically(self):
        """Same rules, seed and inputs give the same sequence of states."""
        def play():
            session = GameSession(make_rules(), seed=123, record_history=True)
            for key in (UP_ARROW, None, None, UP_ARROW, None):
                if key is not None:
                    session.input.key_down(key)
                    session.input.key_up(key)
                session.update(100)
            session.reset()
            session.update(100)
            return session.history, session.state.food

        assert play() == play()

    def test_board_and_repr(self):
        session = GameSession(make_rules(), seed=1)
        assert "@" in session.board()
        assert "score=0" in repr(session)
