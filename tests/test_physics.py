"""Tests for ball physics and collision resolution."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from board import Board
from config import Config
from physics import advance_ball, reset_ball, resolve_collisions
from state import Side, create_match_state


class PhysicsTestCase(unittest.TestCase):
    def setUp(self):
        self.config = Config()
        self.board = Board(self.config)
        self.state = create_match_state(self.board, self.config)
        self.ball = self.state.ball

    def place_ball(self, x, y, vx=0.0, vy=0.0):
        self.ball.x, self.ball.y = x, y
        self.ball.vx, self.ball.vy = vx, vy


class TestAdvanceBall(PhysicsTestCase):
    """Test advance_ball."""

    def test_vertical_movement(self):
        self.place_ball(250, 350, vx=2.0, vy=-3.0)
        advance_ball(self.state)
        self.assertEqual(self.ball.y, 353.0)

    def test_no_drift_before_player_moves(self):
        self.place_ball(250, 350, vx=2.0, vy=-3.0)
        self.ball.touched_paddle = True
        advance_ball(self.state)
        self.assertEqual(self.ball.x, 250)

    def test_no_drift_before_paddle_contact(self):
        self.place_ball(250, 350, vx=2.0, vy=-3.0)
        self.state.player_has_moved = True
        advance_ball(self.state)
        self.assertEqual(self.ball.x, 250)

    def test_drift_after_move_and_contact(self):
        self.place_ball(250, 350, vx=2.0, vy=-3.0)
        self.state.player_has_moved = True
        self.ball.touched_paddle = True
        advance_ball(self.state)
        self.assertEqual(self.ball.x, 252.0)


class TestWalls(PhysicsTestCase):
    """Test side-wall reflection."""

    def test_left_wall(self):
        self.place_ball(-1, 300, vx=-2.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vx, 2.0)
        self.assertEqual(result.wall, "left")

    def test_right_wall(self):
        self.place_ball(501, 300, vx=3.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vx, -3.0)
        self.assertEqual(result.wall, "right")

    def test_no_reflection_when_moving_away(self):
        self.place_ball(-1, 300, vx=2.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vx, 2.0)
        self.assertIsNone(result.wall)


class TestBottomPaddle(PhysicsTestCase):
    """Test the human paddle."""

    def setUp(self):
        super().setUp()
        self.state.paddle_bottom.x = 225

    def test_contact_after_player_moved(self):
        """Ball at (260, 690) over a paddle spanning 225-275 bounces and speeds up."""
        self.state.player_has_moved = True
        self.place_ball(260, 690, vx=0.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)

        self.assertTrue(self.ball.touched_paddle)
        self.assertEqual(self.ball.vy, 4.0)
        self.assertAlmostEqual(self.ball.vx, 3.0)
        self.assertEqual(result.paddle_hit, Side.PLAYER)
        self.assertIsNone(result.scored)

    def test_contact_before_player_moved_keeps_speed(self):
        self.place_ball(260, 690, vx=0.0, vy=-3.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertTrue(self.ball.touched_paddle)
        self.assertEqual(self.ball.vy, 3.0)
        self.assertAlmostEqual(self.ball.vx, 3.0)

    def test_left_of_center_deflects_left(self):
        self.place_ball(230, 690, vx=0.0, vy=-3.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertAlmostEqual(self.ball.vx, -6.0)

    def test_paddle_edge_counts_as_contact(self):
        self.place_ball(275, 680, vx=0.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(result.paddle_hit, Side.PLAYER)

    def test_reaching_max_speed_ratchets_opponent(self):
        self.state.player_has_moved = True
        self.place_ball(250, 690, vy=-4.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vy, 5.0)
        self.assertEqual(self.state.opponent_speed, 6.0)

    def test_speed_is_capped_at_max(self):
        self.state.player_has_moved = True
        self.place_ball(250, 690, vy=-5.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vy, 5.0)
        self.assertEqual(self.state.opponent_speed, 6.0)

    def test_below_max_speed_leaves_opponent_alone(self):
        self.state.player_has_moved = True
        self.place_ball(250, 690, vy=-3.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.state.opponent_speed, 3.0)

    def test_in_band_without_contact_does_nothing(self):
        self.place_ball(100, 690, vx=1.0, vy=-3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vy, -3.0)
        self.assertIsNone(result.scored)
        self.assertIsNone(result.paddle_hit)

    def test_miss_scores_for_opponent(self):
        """Ball past y=700 without contact resets and credits the computer."""
        self.state.player_has_moved = True
        self.ball.touched_paddle = True
        self.place_ball(100, 701, vx=2.5, vy=-4.0)
        result = resolve_collisions(self.state, self.board, self.config)

        self.assertEqual(result.scored, Side.OPPONENT)
        self.assertEqual(self.state.opponent_score, 1)
        self.assertEqual(self.state.player_score, 0)
        self.assertEqual(self.ball.position, (250, 350))
        self.assertEqual(self.ball.vy, -3.0)
        self.assertFalse(self.ball.touched_paddle)
        self.assertEqual(self.ball.vx, 2.5)
        self.assertTrue(self.state.player_has_moved)


class TestTopPaddle(PhysicsTestCase):
    """Test the opponent paddle."""

    def setUp(self):
        super().setUp()
        self.state.paddle_top.x = 225

    def test_contact_bounces_without_deflection(self):
        self.state.player_has_moved = True
        self.place_ball(260, 20, vx=1.5, vy=3.0)
        result = resolve_collisions(self.state, self.board, self.config)

        self.assertEqual(self.ball.vy, -4.0)
        self.assertEqual(self.ball.vx, 1.5)
        self.assertFalse(self.ball.touched_paddle)
        self.assertEqual(result.paddle_hit, Side.OPPONENT)

    def test_contact_before_player_moved_keeps_speed(self):
        self.place_ball(250, 20, vy=3.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vy, -3.0)

    def test_speed_cap_without_ratchet(self):
        self.state.player_has_moved = True
        self.place_ball(250, 20, vy=5.0)
        resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(self.ball.vy, -5.0)
        self.assertEqual(self.state.opponent_speed, 3.0)

    def test_miss_scores_for_player(self):
        self.place_ball(100, -1, vy=3.0)
        result = resolve_collisions(self.state, self.board, self.config)
        self.assertEqual(result.scored, Side.PLAYER)
        self.assertEqual(self.state.player_score, 1)
        self.assertEqual(self.state.opponent_score, 0)
        self.assertEqual(self.ball.position, (250, 350))


class TestResetBall(PhysicsTestCase):
    """Test reset_ball."""

    def test_reset(self):
        self.state.player_has_moved = True
        self.ball.touched_paddle = True
        self.place_ball(12, 34, vx=-4.0, vy=5.0)
        reset_ball(self.state, self.board, self.config)
        self.assertEqual(self.ball.position, (250, 350))
        self.assertEqual(self.ball.vy, -3.0)
        self.assertEqual(self.ball.vx, -4.0)
        self.assertFalse(self.ball.touched_paddle)
        self.assertTrue(self.state.player_has_moved)


if __name__ == "__main__":
    unittest.main()
