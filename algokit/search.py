"""Binary search over sorted and rotated sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(data: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in sorted ``data``, or None if absent."""
    left, right = 0, len(data) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if data[mid] == key:
            return mid
        if key < data[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return None


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Return True if ``target`` is in a rotated sorted sequence that may hold duplicates."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True
        while left < mid and nums[left] == nums[mid] == nums[right]:
            left += 1
            right -= 1
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False