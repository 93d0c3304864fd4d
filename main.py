"""
Entry point for the Tetris game.

Supports two modes:
  - play: Play in a pygame window with keyboard controls.
  - text: Play in the terminal, one command per line.

Usage:
    python main.py --mode play
    python main.py --mode text --seed 42
    python main.py --mode play --config config/game.yaml
"""

from __future__ import annotations

import argparse
import sys

from src.config import load_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, and seed attributes.
    """
    parser = argparse.ArgumentParser(
        description="Tetris — falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["play", "text"],
        default="play",
        help="Run mode: 'play' (pygame window), 'text' (terminal).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/game.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece sequence (overrides the config file).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.seed is not None:
        config["seed"] = args.seed

    if args.mode == "play":
        from src.play import play_manual
        play_manual(config)

    elif args.mode == "text":
        from src.play import play_text
        play_text(config)

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
