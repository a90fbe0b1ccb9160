# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .enums import EnumValue
from .errors import OverlapError

# ranges are lists of range-objects, which must be sorted and must not overlap/neighbor each other if same property
#	=> use Ranges.process to sort, validate and merge the raw list of Range objects of a property file
# ranges map [first-last] to a property of the enum collection they were parsed with
# invariant for ranges: (first >= 0) and (first <= last) and (last <= 0x10ffff)

class Range:
	RangeFirst: int = 0
	RangeLast: int = 0x10ffff

	def __init__(self, first: int, last: int, property: EnumValue) -> None:
		if first < Range.RangeFirst or last > Range.RangeLast or first > last:
			raise ValueError(f'Malformed range encountered [{first:04x}-{last:04x}]')
		self.first = first
		self.last = last
		self.property = property
	def __str__(self) -> str:
		return f'[{self.first:05x}-{self.last:05x}/{self.span()}] -> {self.property.name}'
	def __repr__(self) -> str:
		return self.__str__()
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Range):
			return NotImplemented
		return (self.first, self.last, self.property) == (other.first, other.last, other.property)
	def __hash__(self) -> int:
		return hash((self.first, self.last, self.property.index))
	def span(self) -> int:
		return (self.last - self.first + 1)
	def single(self) -> bool:
		return (self.first == self.last)
	def overlap(self, other: 'Range') -> bool:
		return (self.last >= other.first and self.first <= other.last)
	def neighbors(self, right: 'Range') -> bool:
		return (self.last + 1 == right.first)
	def adjacent(self, right: 'Range') -> bool:
		return (self.neighbors(right) and self.property is right.property)
	def extend(self, right: 'Range') -> 'Range':
		if self.property is not right.property:
			raise RuntimeError('Cannot extend ranges of different property')
		return Range(self.first, right.last, self.property)
	def triple(self) -> tuple[int, int, str]:
		return (self.first, self.last, self.property.name)

class Ranges:
	@staticmethod
	def sort(ranges: list[Range]) -> list[Range]:
		# ranges of a property file do not overlap, so the start alone defines the order
		return sorted(ranges, key=lambda r : r.first)
	@staticmethod
	def wellFormed(ranges: list[Range]) -> None:
		for i in range(1, len(ranges)):
			if ranges[i - 1].first > ranges[i].first:
				raise RuntimeError('Order of ranges violation encountered')
			if ranges[i].overlap(ranges[i - 1]):
				raise OverlapError(ranges[i - 1], ranges[i])
	@staticmethod
	def combine(ranges: list[Range], defaultProperty: str) -> list[Range]:
		out: list[Range] = []
		for r in ranges:
			if len(out) == 0:
				out.append(r)

			# check if the range directly continues the last range
			elif out[-1].adjacent(r):
				out[-1] = out[-1].extend(r)

			# the gap between two default ranges is implicitly default as well and can be closed
			elif out[-1].property is r.property and r.property.name == defaultProperty:
				out[-1] = out[-1].extend(r)
			else:
				out.append(r)
		return out
	@staticmethod
	def process(ranges: list[Range], defaultProperty: str) -> list[Range]:
		ranges = Ranges.sort(ranges)
		Ranges.wellFormed(ranges)
		return Ranges.combine(ranges, defaultProperty)
	@staticmethod
	def singleCount(ranges: list[Range]) -> int:
		return sum(1 for r in ranges if r.single())
	@staticmethod
	def find(ranges: list[Range], cp: int) -> Range|None:
		left, right = 0, len(ranges) - 1

		# binary search for the range containing the codepoint
		while left <= right:
			center = (left + right) // 2
			if ranges[center].first > cp:
				right = center - 1
			elif ranges[center].last < cp:
				left = center + 1
			else:
				return ranges[center]
		return None
