"""Math Invaders - type answers to shoot down falling arithmetic questions."""
