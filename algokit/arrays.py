"""Searching, scanning and monotonic-stack problems over integer arrays."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from itertools import count


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of the first pair summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sale."""
    lowest = float("inf")
    profit = 0
    for price in prices:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three elements that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    ordered = sorted(nums)
    closest = sum(ordered[:3])
    for i, first in enumerate(ordered[:-2]):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            current = first + ordered[left] + ordered[right]
            if abs(target - current) < abs(target - closest):
                closest = current
            if current < target:
                left += 1
            else:
                right -= 1
    return closest


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from the sorted array ``arr``."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return low + k


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k:] + nums[:len(nums) - k]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in a sorted array, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted arrays."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("median of no numbers")
    half = len(merged) // 2
    if len(merged) % 2:
        return float(merged[half])
    return (merged[half - 1] + merged[half]) / 2.0


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of ``height``."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        left_max = max(left_max, height[left])
        right_max = max(right_max, height[right])
        if left_max < right_max:
            water += left_max - height[left]
            left += 1
        else:
            water += right_max - height[right]
            right -= 1
    return water


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps needed to reach the last index."""
    if not nums:
        raise ValueError("no positions to jump over")
    jumps = 0
    current_end = 0
    farthest = 0
    for index, reach in enumerate(nums[:-1]):
        farthest = max(farthest, index + reach)
        if index == current_end:
            jumps += 1
            current_end = farthest
    return jumps


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("no subarrays of an empty array")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached from the first."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as big-endian decimal digits."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] == 9:
            result[index] = 0
        else:
            result[index] += 1
            return result
    return [1, *result]


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the next greater value to its right in ``nums2``."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]} does not occur in nums2") from None


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next greater value for each element of a circular array, or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram."""
    best = 0
    stack: list[int] = []
    for index, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] >= height:
            bar = heights[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, bar * (index - left - 1))
        stack.append(index)
    return best