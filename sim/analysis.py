"""Matplotlib analysis charts — ball trajectory, per-frame travel, tunnelling vs frame rate."""

import os
from dataclasses import replace

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np

from pong.config import DEFAULT_CONFIG, GameConfig
from sim.headless import run_headless

# Frame rates swept by the frame-rate charts, fastest first
FPS_SWEEP = [120, 60, 30, 20, 12, 8, 6, 5, 4.5, 3.5, 2.5]

BG = "#0f0f1a"


def _new_chart(title, xlabel, ylabel, figsize=(8, 5)):
    """Dark-themed figure with a single labelled axes."""
    fig, ax = plt.subplots(figsize=figsize)
    fig.set_facecolor(BG)
    ax.set_facecolor(BG)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")
    return fig, ax


def _save(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def collision_window(config: GameConfig = DEFAULT_CONFIG) -> float:
    """Horizontal distance over which the ball overlaps a paddle."""
    return config.paddle_width + config.ball_width


def wall_paddle_config(config: GameConfig = DEFAULT_CONFIG) -> GameConfig:
    """Full-height paddles: with no gaps, every point is a tunnelling miss."""
    return replace(config, paddle_height=config.height, paddle_offset=0)


def count_tunnels(config: GameConfig = DEFAULT_CONFIG, fps_values=None, seconds=30.0) -> np.ndarray:
    """Points scored against full-height paddles at each frame rate."""
    walls = wall_paddle_config(config)
    fps_values = FPS_SWEEP if fps_values is None else fps_values
    return np.array(
        [len(run_headless(walls, fps=fps, seconds=seconds).points) for fps in fps_values],
        dtype=int,
    )


def chart_trajectory(config: GameConfig = DEFAULT_CONFIG, fps=60, seconds=20.0, save_path=None):
    """Chart 1: Ball path across the playfield.

    Paddles are left in their starting spots, so the ball scores whenever
    its path misses them and relaunches from the centre.
    """
    result = run_headless(config, fps=fps, seconds=seconds)
    samples = result.samples

    fig, ax = _new_chart(f"Ball Trajectory ({fps} FPS, {seconds:.0f}s)", "x (px)", "y (px)",
                         figsize=(10, 6))

    sc = ax.scatter(samples[:, 1], samples[:, 2], c=samples[:, 0], cmap="plasma", s=4)
    cbar = fig.colorbar(sc, ax=ax)
    cbar.set_label("Time (s)", color="#aaaaaa")
    cbar.ax.tick_params(colors="#888888")

    for paddle in (result.game.player1, result.game.player2):
        ax.add_patch(Rectangle(
            (paddle.x, paddle.y), paddle.width, paddle.height,
            facecolor="#4ecdc4", alpha=0.6,
        ))

    for point in result.points:
        ax.axvline(x=0 if point.side == "left" else config.width,
                   color="#e94560", linestyle="--", linewidth=1, alpha=0.4)

    ax.set_xlim(-config.ball_width * 3, config.width + config.ball_width * 3)
    ax.set_ylim(config.height, 0)  # screen coordinates, y grows downwards
    ax.text(
        0.01, 0.01,
        f"Points {result.game.p1_score}-{result.game.p2_score}  |  "
        f"paddle hits {result.paddle_hits}  |  wall bounces {result.wall_bounces}",
        transform=ax.transAxes, color="#aaaaaa", fontsize=9,
    )

    return _save(fig, save_path)


def chart_travel_per_frame(config: GameConfig = DEFAULT_CONFIG, save_path=None):
    """Chart 2: Horizontal ball travel per frame vs frame rate.

    Bars above the collision window can step over a paddle in one frame.
    """
    fps_values = np.array(FPS_SWEEP, dtype=float)
    travel = config.ball_speed / fps_values
    window = collision_window(config)

    fig, ax = _new_chart("Ball Travel Between Frames", "Frame rate (FPS)", "Travel per frame (px)")

    x = np.arange(len(fps_values))
    colors = ["#dc3545" if d > window else "#28a745" for d in travel]
    bars = ax.bar(x, travel, color=colors, alpha=0.85)
    for bar, d in zip(bars, travel):
        ax.text(
            bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.5,
            f"{d:.1f}", ha="center", va="bottom", fontsize=8, color="#aaa",
        )

    ax.axhline(y=window, color="#e94560", linestyle="--", linewidth=1.5, alpha=0.7)
    ax.text(len(fps_values) - 0.5, window + 1.5, f"Collision window ({window:.0f}px)",
            color="#e94560", fontsize=9, ha="right")

    ax.set_xticks(x)
    ax.set_xticklabels([f"{f:g}" for f in fps_values])
    ax.grid(True, alpha=0.15, axis="y")

    return _save(fig, save_path)


def chart_tunnelling(config: GameConfig = DEFAULT_CONFIG, seconds=30.0, save_path=None):
    """Chart 3: Points conceded through full-height paddles vs frame rate."""
    tunnels = count_tunnels(config, FPS_SWEEP, seconds=seconds)

    fig, ax = _new_chart(
        f"Tunnelled Points in {seconds:.0f}s (full-height paddles)",
        "Frame rate (FPS)", "Points scored",
    )

    x = np.arange(len(FPS_SWEEP))
    ax.plot(x, tunnels, color="#e94560", marker="o", linewidth=2, markersize=7)
    ax.fill_between(x, tunnels, color="#e94560", alpha=0.15)

    ax.set_xticks(x)
    ax.set_xticklabels([f"{f:g}" for f in FPS_SWEEP])
    ax.grid(True, alpha=0.15)

    return _save(fig, save_path)


def generate_all_charts(output_dir=".", config: GameConfig = DEFAULT_CONFIG):
    """Generate all analysis charts and save to output directory."""
    os.makedirs(output_dir, exist_ok=True)

    paths = []

    path = os.path.join(output_dir, "chart_trajectory.png")
    print("  Generating trajectory (headless 60 FPS run)...")
    chart_trajectory(config, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "chart_travel_per_frame.png")
    chart_travel_per_frame(config, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "chart_tunnelling.png")
    print("  Generating tunnelling sweep (one headless run per frame rate)...")
    chart_tunnelling(config, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    plt.close("all")
    return paths
