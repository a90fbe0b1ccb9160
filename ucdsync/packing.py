# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .enums import EnumCollection, EnumValue
from .errors import ParseError, SyncError
from .ranges import Range, Ranges

# packed format, one record per range without any delimiters:
#	[start: 4 x base36][end: 4 x base36 or '!' if end equals start][property: 1 x serialized enum value]
# 36^4 - 1 = 0x19a0ff covers the entire codepoint space
Base36Digits: str = '0123456789abcdefghijklmnopqrstuvwxyz'
FieldWidth: int = 4
SingleMarker: str = '!'

def ToBase36(value: int, width: int = FieldWidth) -> str:
	if value < 0:
		raise ValueError(f'Cannot encode negative value [{value}]')
	out = ''
	while True:
		value, digit = divmod(value, 36)
		out = Base36Digits[digit] + out
		if value == 0:
			break
	if len(out) > width:
		raise ValueError(f'Value does not fit into {width} base36 digits')
	return out.rjust(width, '0')

def FromBase36(value: str, width: int|None = None) -> int:
	if len(value) == 0 or (width is not None and len(value) != width) or any(c not in Base36Digits for c in value):
		raise ValueError(f'Invalid base36 value [{value}]')
	return int(value, 36)

def PackRanges(ranges: list[Range]) -> str:
	out: list[str] = []
	for r in ranges:
		out.append(ToBase36(r.first))
		out.append(SingleMarker if r.single() else ToBase36(r.last))
		out.append(r.property.serialized())
	return ''.join(out)

def UnpackRanges(packed: str, values: list[EnumValue]) -> list[Range]:
	out: list[Range] = []
	offset = 0

	# decode the records until the string has been consumed
	while offset < len(packed):
		try:
			first = FromBase36(packed[offset:offset + FieldWidth], FieldWidth)
			offset += FieldWidth
			if packed[offset:offset + 1] == SingleMarker:
				last = first
				offset += 1
			else:
				last = FromBase36(packed[offset:offset + FieldWidth], FieldWidth)
				offset += FieldWidth
			code = packed[offset:offset + 1]
			offset += 1
			index = EnumValue.fromSerialized(code)
		except ValueError as e:
			raise ParseError(f'Malformed packed record at offset {offset}: {e}') from None
		if index >= len(values):
			raise ParseError(f'Unknown property code [{code}] at offset {offset - 1}')
		try:
			out.append(Range(first, last, values[index]))
		except ValueError as e:
			raise ParseError(f'Malformed packed record: {e}') from None
	return out

def LookupPacked(packed: str, values: list[EnumValue], default: EnumValue, cp: int) -> EnumValue:
	found = Ranges.find(UnpackRanges(packed, values), cp)
	return (default if found is None else found.property)

class PackedProperties:
	def __init__(self, ranges: list[Range], enums: EnumCollection) -> None:
		self.packed: str = PackRanges(ranges)
		self.singleCount: int = Ranges.singleCount(ranges)
		self.enumCount: int = len(enums)

		# ensure the packed data decodes back to the same ranges
		if [r.triple() for r in UnpackRanges(self.packed, enums.values)] != [r.triple() for r in ranges]:
			raise SyncError('Packed properties do not decode to the original ranges')
