"""Games built on the Math Invaders framework."""
