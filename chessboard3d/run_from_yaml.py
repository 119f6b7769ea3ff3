"""
Build and show the chess scene from a YAML or JSON configuration.

Run inside Blender, passing options after Blender's own arguments:

    blender --python chessboard3d/run_from_yaml.py -- --config-path scene.yml
    blender -b --python chessboard3d/run_from_yaml.py -- --mode still --output renders/board.png
"""

import argparse
import json
import logging
import sys

import yaml

from chessboard3d.config import load_config
from chessboard3d.errors import ChessSceneError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def script_args(argv: list[str]) -> list[str]:
    """Arguments meant for this script: everything after '--' when run by Blender."""
    if "--" in argv:
        return argv[argv.index("--") + 1:]
    return argv[1:]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a 3D chessboard in Blender from a YAML configuration or JSON dictionary")
    parser.add_argument("--config-path", help="Path to YAML configuration file")
    parser.add_argument("--config-json", help="JSON string containing the configuration")
    parser.add_argument("--mode", choices=["interactive", "still"], help="Override loop.mode")
    parser.add_argument("--output", help="Override loop.output_path (still mode)")
    parser.add_argument("--no-pieces", action="store_true", help="Show the board only")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(script_args(sys.argv) if argv is None else argv)

    if args.config_path is not None and args.config_json is not None:
        parser.error("Cannot provide both --config-path and --config-json")

    overrides: dict = {}
    if args.mode:
        overrides.setdefault("loop", {})["mode"] = args.mode
    if args.output:
        overrides.setdefault("loop", {})["output_path"] = args.output
    if args.no_pieces:
        overrides["pieces"] = {"enabled": False}

    try:
        if args.config_json:
            config = load_config(config_dict=json.loads(args.config_json), overrides=overrides)
        else:
            config = load_config(config_path=args.config_path, overrides=overrides)

        # Imported here so --help and config errors work without Blender
        try:
            from chessboard3d.game import ChessGame
        except ImportError as e:
            logger.error(f"Blender's Python API is not available ({e}). Run this script inside Blender: "
                         "blender --python chessboard3d/run_from_yaml.py -- [options]")
            return 1

        game = ChessGame(config)
        result = game.start()
        logger.info(f"Scene started: {result}")
    except (ChessSceneError, ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    # Exiting with 0 would close Blender and end the interactive loop
    exit_code = main()
    if exit_code:
        sys.exit(exit_code)
