"""
Tests for main.py - headless simulation and the command line.
"""

import argparse
import json
import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings
from main import build_parser, main, run_simulation


def small_settings():
    return Settings(field_width=12, field_height=10, block_size=6, block_border=1, background_color="#4F4F4F")


def sim_args(**overrides):
    params = dict(seconds=5.0, player="random", seed=3, output=None, gif=None, frame_every=1)
    params.update(overrides)
    return argparse.Namespace(**params)


class TestRunSimulation:

    def test_summary_fields(self):
        result = run_simulation(small_settings(), sim_args())

        assert set(result) >= {"score", "length", "speed", "elapsed_time", "alive", "ticks", "player", "seed"}
        assert result["player"] == "random"
        assert result["seed"] == 3
        assert result["playing"] is False
        assert result["length"] >= 1
        assert 1 <= result["speed"] <= 20
        assert result["ticks"] > 0

    def test_same_seed_same_game(self):
        first = run_simulation(small_settings(), sim_args(seed=11))
        second = run_simulation(small_settings(), sim_args(seed=11))
        assert first == second

    def test_game_time_is_bounded(self):
        result = run_simulation(small_settings(), sim_args(seconds=2.0, player="straight"))
        hours, minutes, seconds = (int(part) for part in result["elapsed_time"].split(":"))
        assert hours == 0 and minutes == 0 and seconds <= 2

    def test_writes_frame_and_gif(self, tmp_path):
        png = str(tmp_path / "last.png")
        gif = str(tmp_path / "run.gif")

        run_simulation(small_settings(), sim_args(seconds=1.0, output=png, gif=gif, frame_every=3))

        assert os.path.exists(png)
        assert os.path.exists(gif)


class TestCli:

    def test_simulate_defaults(self):
        args = build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.seconds == 60.0
        assert args.player == "random"
        assert args.seed is None
        assert args.frame_every == 1

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_player_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["simulate", "--player", "llm"])

    def test_main_prints_json_summary(self, monkeypatch, capsys):
        monkeypatch.setenv("SNAKE_FIELD_WIDTH", "8")
        monkeypatch.setenv("SNAKE_FIELD_HEIGHT", "8")
        monkeypatch.setenv("SNAKE_BLOCK_SIZE", "4")

        assert main(["simulate", "--seconds", "1", "--seed", "5"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["seed"] == 5
        assert result["player"] == "random"
