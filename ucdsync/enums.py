# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .errors import CapacityError

# enum values are serialized to a single character [A-Z] followed by [a-z]
EnumCapacity: int = 52

class EnumValue:
	def __init__(self, index: int, name: str) -> None:
		if index < 0 or index >= EnumCapacity:
			raise CapacityError(f'Enum value [{name}] exceeds the capacity of {EnumCapacity} serializable values')
		self.index = index
		self.name = name

		# raw property names which have been normalized into this value (kept in insertion order)
		self.normalizedFrom: dict[str, None] = {}
	def __str__(self) -> str:
		return self.name
	def __repr__(self) -> str:
		return f'EnumValue({self.index}, {self.name!r})'
	def serialized(self) -> str:
		if self.index < 26:
			return chr(ord('A') + self.index)
		return chr(ord('a') + self.index - 26)
	def enumName(self) -> str:
		return self.name.replace('_', '')

	@staticmethod
	def fromSerialized(code: str) -> int:
		if len(code) == 1 and 'A' <= code <= 'Z':
			return ord(code) - ord('A')
		if len(code) == 1 and 'a' <= code <= 'z':
			return ord(code) - ord('a') + 26
		raise ValueError(f'Invalid serialized enum value [{code}]')

class EnumCollection:
	def __init__(self) -> None:
		self.values: list[EnumValue] = []
		self._lookup: dict[str, EnumValue] = {}
	def __len__(self) -> int:
		return len(self.values)
	def __contains__(self, name: str) -> bool:
		return name in self._lookup
	def __iter__(self):
		return iter(self.values)
	def find(self, name: str) -> EnumValue|None:
		return self._lookup.get(name)
	def add(self, name: str, normalizedFrom: str|None = None) -> EnumValue:
		value = self._lookup.get(name)

		# register the value with the next free index, if it has not been seen yet
		if value is None:
			value = EnumValue(len(self.values), name)
			self.values.append(value)
			self._lookup[name] = value

		if normalizedFrom is not None:
			value.normalizedFrom[normalizedFrom] = None
		return value
	def ensure(self, name: str) -> EnumValue:
		return self.add(name)
