"""MathInvaders - Game Info

Arithmetic questions fall toward your base. Type the answer and press
Enter to shoot them down before they land.
"""

NAME = "Math Invaders"
DESCRIPTION = "Type answers to arithmetic questions to shoot down falling ships"
VERSION = "1.0.0"
AUTHOR = "Math Invaders Team"

ARGUMENTS = [
    {
        'name': '--max-number',
        'type': int,
        'default': None,
        'help': 'Largest operand used in questions'
    },
    {
        'name': '--operators',
        'type': str,
        'default': None,
        'help': 'Operators to use, e.g. "+-*/" or "+,-"'
    },
    {
        'name': '--allow-negative',
        'action': 'store_true',
        'default': None,
        'help': 'Allow subtraction questions with negative answers'
    },
    {
        'name': '--fractions',
        'action': 'store_true',
        'default': None,
        'help': 'Allow division questions with fractional answers'
    },
    {
        'name': '--lives',
        'type': int,
        'default': None,
        'help': 'Number of lives'
    },
    {
        'name': '--spawn-interval',
        'type': int,
        'default': None,
        'help': 'Milliseconds between ship spawns'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    from games.MathInvaders.game_mode import MathInvadersMode
    return MathInvadersMode(**kwargs)
