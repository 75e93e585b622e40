#!/usr/bin/env python3
"""MathInvaders - Standalone entry point.

Type the answer to a falling question and press Enter to shoot it down.
Backspace deletes, Escape pauses.

Usage:
    python -m games.MathInvaders.main
    python -m games.MathInvaders.main --max-number 12 --operators "+-*/"
    python -m games.MathInvaders.main --resolution 1280x720 --lives 5
"""
import argparse
import sys
from typing import List, Optional

import pygame

from mathdef.errors import ConfigurationError
from mathdef.games.canvas import PygameCanvas
from mathdef.games.game_state import GameState
from mathdef.games.input import InputManager
from mathdef.games.input.sources import KeyboardInputSource
from mathdef.logging import configure_logging, get_logger
from mathdef.scheduling import FrameScheduler
from models import Resolution
from games.MathInvaders import config
from games.MathInvaders.game_mode import MathInvadersMode

log = get_logger('launcher')

# Launcher-only arguments, not passed on to the game
_LAUNCHER_ARGS = {'resolution', 'log_level'}

# Keys of an argument definition that map straight onto add_argument()
_ARGPARSE_KEYS = ('type', 'default', 'help', 'action', 'choices')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser from the game's argument definitions."""
    parser = argparse.ArgumentParser(
        description=MathInvadersMode.DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for arg_def in MathInvadersMode.get_arguments():
        kwargs = {key: arg_def[key] for key in _ARGPARSE_KEYS if key in arg_def}
        if 'action' in kwargs:
            # store_true and friends reject a type
            kwargs.pop('type', None)
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        resolution = Resolution.parse(args.resolution)
    except ValueError as e:
        log.error("Invalid resolution %r: %s", args.resolution, e)
        return 2

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in _LAUNCHER_ARGS and v is not None
    }

    scheduler = FrameScheduler()
    pygame.init()
    try:
        screen = pygame.display.set_mode((resolution.width, resolution.height))
        pygame.display.set_caption(MathInvadersMode.NAME)

        try:
            game = MathInvadersMode(
                scheduler=scheduler,
                canvas=PygameCanvas(screen),
                **game_kwargs,
            )
        except ConfigurationError as e:
            log.error("%s", e)
            return 2

        input_manager = InputManager(KeyboardInputSource())
        clock = pygame.time.Clock()
        # Keys pressed while the window opened are not answers
        input_manager.discard()
        game.start()

        running = True
        while running:
            elapsed_ms = clock.tick(config.FPS)
            events = input_manager.collect(elapsed_ms / 1000.0)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            if game.state == GameState.OVER and events:
                # Any key closes the window once the game is over
                running = False
            game.handle_input(events)
            scheduler.advance(elapsed_ms)
            pygame.display.flip()
    finally:
        scheduler.cancel_all()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
