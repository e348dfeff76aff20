# healthquest/core/leveling.py
"""
Experience -> level progression.

Level 1 needs 100 exp, and every level after that needs 50 more than the
previous one:  exp_to_next_level = 100 + (current_level - 1) * 50
"""

BASE_EXP_TO_NEXT_LEVEL = 100
EXP_STEP_PER_LEVEL = 50


def exp_needed_for(level: int) -> int:
    if level < 1:
        level = 1
    return BASE_EXP_TO_NEXT_LEVEL + (level - 1) * EXP_STEP_PER_LEVEL


def add_experience(level, exp: int) -> int:
    """
    Add `exp` to `level` (anything with current_level / current_exp /
    exp_to_next_level) in place. Returns how many levels were gained.
    """
    if exp < 0:
        raise ValueError("experience must be non-negative")

    gained = 0
    level.current_exp += exp
    while level.current_exp >= level.exp_to_next_level:
        level.current_exp -= level.exp_to_next_level
        level.current_level += 1
        level.exp_to_next_level = exp_needed_for(level.current_level)
        gained += 1
    return gained
