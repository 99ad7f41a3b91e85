"""quicksums: Timed addition quiz for a round of players.

Each player answers sums against the clock, level after level, until the
first mistake. Finished players are ranked by score and the top 5 shown.

Usage:
    python -m quicksums play                # Play a round
    python -m quicksums play --seed 42      # Reproducible problems
    python -m quicksums rules               # Show rules and settings
"""
