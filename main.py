#!/usr/bin/env python3
"""
Paddle Duel - Main Entry Point

A two-paddle ball game: steer the bottom paddle with the mouse and beat
the computer-controlled top paddle to three points.
"""

import argparse
from typing import Optional

from tqdm import tqdm

from agents import Agent, TrackingAgent, get_agent_class
from config import Config, DevicePreset, PRESETS, STANDARD_PRESET, select_preset
from game import Game, MatchPhase
from pointer import PointerInput
from scheduler import FrameScheduler
from state import Side
from stats_tracker import StatsTracker


def create_agent(agent_type: str) -> Agent:
    """Create an autopilot agent by type name."""
    try:
        agent_class = get_agent_class(agent_type)
    except ValueError as e:
        print(f"Warning: {e}. Using TrackingAgent.")
        return TrackingAgent()
    return agent_class()


def resolve_preset(
    name: str, config: Config, screen_width: Optional[int] = None, detect: bool = True
) -> DevicePreset:
    """Pick the device preset by name, or from the screen width for 'auto'."""
    if name in PRESETS:
        return PRESETS[name]
    if screen_width is None:
        if not detect:
            return STANDARD_PRESET
        from renderer import detect_screen_width
        screen_width = detect_screen_width()
    return select_preset(screen_width, config)


def run_visual_game(config: Config, preset: DevicePreset, fps: Optional[int] = None) -> None:
    """Run matches in a pygame window until the player quits.

    Responsibilities are cleanly separated:
    - InputHandler: processes events, quit/replay requests
    - PointerInput: pointer motion -> human paddle
    - Renderer: draws the board and the game-over overlay (passive)
    - FrameScheduler: runs one game frame per display refresh
    - Game: runs simulation logic
    """
    try:
        from input_handler import InputHandler
        from renderer import Renderer
    except ImportError as e:
        print(f"Error: {e}")
        print("Install pygame with: pip install pygame")
        return

    renderer = Renderer(config)
    scheduler = FrameScheduler()
    game = Game(
        config,
        preset=preset,
        on_render=renderer.draw,
        on_overlay=renderer.set_overlay,
        request_frame=scheduler.request,
    )
    pointer = PointerInput(game, surface_offset=renderer.board_offset[0])
    input_handler = InputHandler(pointer, overlay=renderer)

    print("\n=== Paddle Duel ===")
    print(f"Preset: {preset.name} (opponent speed {preset.opponent_speed})")
    print(f"First to {config.winning_score} points wins")
    print("Mouse - Move paddle, R/Enter - Play again, ESC - Quit")
    print("===================\n")

    game.start()
    while input_handler.running:
        input_handler.process_events()

        if input_handler.consume_replay_request() and game.phase is MatchPhase.OVER:
            game.start()

        scheduler.run_pending()
        renderer.present()
        renderer.tick(fps)

    renderer.close()


def run_headless_matches(
    config: Config,
    preset: DevicePreset,
    agent: Agent,
    num_matches: int = 10,
) -> StatsTracker:
    """Play matches with an autopilot on the human paddle, without graphics.

    Returns:
        StatsTracker with the results of every match
    """
    print("\n=== Headless Matches ===")
    print(f"Human side: {agent.config.name}")
    print(f"Preset: {preset.name}")
    print(f"Matches: {num_matches}")
    print("========================\n")

    stats = StatsTracker()

    progress = tqdm(range(1, num_matches + 1), desc="Matches", unit="match")
    for match in progress:
        scheduler = FrameScheduler()
        game = Game(config, preset=preset, request_frame=scheduler.request)
        pointer = PointerInput(game)
        agent.reset()
        game.start()

        while game.is_running and game.frame_count < config.max_frames_per_match:
            pointer_x = agent.act(game.get_observation())
            if pointer_x is not None:
                pointer.on_pointer_move(pointer_x)
            scheduler.run_pending()
            if game.last_result is not None:
                stats.record_step(game.last_result)

        stats.end_match(game.winner, game.frame_count)
        progress.set_postfix({
            "Human": stats.total_wins[Side.PLAYER],
            "Computer": stats.total_wins[Side.OPPONENT],
            "Timeouts": stats.timeouts,
        })

    print(
        f"\nFinal: Human={stats.total_wins[Side.PLAYER]} "
        f"Computer={stats.total_wins[Side.OPPONENT]} Timeouts={stats.timeouts}"
    )
    print(f"Average rally: {stats.average_rally:.1f} hits")

    return stats


def list_agent_types() -> None:
    """Print available autopilot types."""
    print("\nAvailable autopilot types (human side, headless mode):")
    print("  tracking - Follows the ball with a capped pointer speed")
    print("  random   - Random pointer jumps (baseline)")


def main():
    parser = argparse.ArgumentParser(
        description="Paddle Duel - Beat the computer to three points!",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play with the mouse
  python main.py

  # Force the compact preset (faster opponent)
  python main.py --preset compact

  # Run 50 headless matches with the tracking autopilot
  python main.py --mode headless --agent tracking --matches 50

  # List autopilot types
  python main.py --mode list
""",
    )
    parser.add_argument(
        "--mode",
        choices=["visual", "headless", "list"],
        default="visual",
        help="Game mode (default: %(default)s)\n"
        "  visual: Play in a pygame window\n"
        "  headless: Autopilot matches without graphics\n"
        "  list: Display available autopilot types",
    )
    parser.add_argument(
        "--agent",
        type=str,
        default="tracking",
        metavar="TYPE",
        help="Autopilot for the human paddle in headless mode (default: %(default)s)",
    )
    parser.add_argument(
        "--matches",
        type=int,
        default=10,
        metavar="N",
        help="Number of headless matches (default: %(default)s)",
    )
    parser.add_argument(
        "--preset",
        choices=["auto"] + sorted(PRESETS),
        default="auto",
        help="Device preset for initial speeds (default: %(default)s)\n"
        "  auto: compact when the screen is narrow, standard otherwise",
    )
    parser.add_argument(
        "--screen-width",
        type=int,
        default=None,
        metavar="PX",
        help="Screen width used by --preset auto instead of querying the display",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        metavar="FPS",
        help=f"Target frames per second in visual mode (default: {Config().fps})",
    )

    args = parser.parse_args()

    if args.mode == "list":
        list_agent_types()
        return

    config_kwargs = {}
    if args.fps is not None:
        config_kwargs["fps"] = args.fps
    config = Config(**config_kwargs)

    if args.mode == "headless":
        preset = resolve_preset(args.preset, config, args.screen_width, detect=False)
        run_headless_matches(config, preset, create_agent(args.agent), num_matches=args.matches)
    else:
        preset = resolve_preset(args.preset, config, args.screen_width)
        run_visual_game(config, preset, fps=args.fps)


if __name__ == "__main__":
    main()
