"""Helpers for building user-facing messages about steps."""

from typing import Sequence


def format_step_list(step_nums: Sequence[int]) -> str:
    """Render ordinals as "Step 3", "Steps 2 and 3" or "Steps 3, 4, and 5"."""
    nums = [str(num) for num in step_nums]
    if not nums:
        return ""
    if len(nums) == 1:
        return f"Step {nums[0]}"
    if len(nums) == 2:
        return f"Steps {nums[0]} and {nums[1]}"
    return f"Steps {', '.join(nums[:-1])}, and {nums[-1]}"


def agree(step_nums: Sequence[int], singular: str, plural: str) -> str:
    """Pick the verb form that agrees with a formatted step list."""
    return singular if len(step_nums) == 1 else plural
