#!/usr/bin/env python3
"""CLI entry point for the Pong simulation.

Usage:
    python main.py play [fixed|random]        Open the Pygame window
    python main.py headless [fps] [seconds]   Run a session without a window
    python main.py analyze                    Generate frame-rate charts
    python main.py test [pytest args]         Run the Pong test suite
"""

import sys
import os
from dataclasses import replace

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pong.config import DEFAULT_CONFIG, LAUNCH_POLICIES


def cmd_play():
    """Open the Pygame window for two players."""
    launch = sys.argv[2] if len(sys.argv) > 2 and sys.argv[2] in LAUNCH_POLICIES else DEFAULT_CONFIG.launch
    config = replace(DEFAULT_CONFIG, launch=launch)

    print("Launching Pong...")
    print("Controls: W/S=left paddle  UP/DOWN=right paddle  ENTER=serve/reset  ESC=quit")
    print(f"Launch direction: {launch}")
    print("-" * 60)
    from sim.visualizer import run_visualizer
    game = run_visualizer(config)
    if game is not None:
        print(f"Final score: {game.p1_score} - {game.p2_score}")


def cmd_headless():
    """Run a scripted session without a window and print every point."""
    from sim.headless import run_headless

    try:
        fps = float(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_CONFIG.fps
        seconds = float(sys.argv[3]) if len(sys.argv) > 3 else 30.0
    except ValueError:
        print("fps and seconds must be numbers")
        print("  Usage: python main.py headless [fps] [seconds]")
        sys.exit(2)
    if fps <= 0 or seconds < 0:
        print("fps must be positive and seconds must not be negative")
        sys.exit(2)

    print("=" * 60)
    print(f"  HEADLESS PONG — {fps:g} FPS for {seconds:g}s")
    print("=" * 60)

    result = run_headless(fps=fps, seconds=seconds)
    for i, point in enumerate(result.points):
        print(f"  Point {i+1:2d}: frame {point.frame:5d}, "
              f"P{point.scorer} scores (ball out {point.side})  "
              f"[{point.p1_score}-{point.p2_score}]")

    print()
    print(f"  FINAL SCORE: {result.game.p1_score} - {result.game.p2_score}")
    print(f"  Frames: {result.frames}  |  Simulated: {result.duration:.2f}s")
    print(f"  Paddle hits: {result.paddle_hits}  |  Wall bounces: {result.wall_bounces}")
    print("=" * 60)


def cmd_analyze():
    """Chart ball travel and tunnelling across frame rates."""
    print("Charting ball travel and tunnelling across frame rates...")
    print("-" * 60)
    from sim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(__file__), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\n{len(paths)} charts written to {output_dir}/")


def cmd_test():
    """Run the Pong test suite (extra arguments go to pytest)."""
    import subprocess
    extra = sys.argv[2:]
    print("Running Pong core, headless and analysis tests...")
    if extra:
        print(f"pytest options: {' '.join(extra)}")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v", *extra],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "play": cmd_play,
    "headless": cmd_headless,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    command = sys.argv[1] if len(sys.argv) > 1 else None
    if command not in COMMANDS:
        if command is not None:
            print(f"Unknown command: {command}")
        print(__doc__)
        print("Commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:10s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[command]()


if __name__ == "__main__":
    main()
