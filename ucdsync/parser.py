# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import re
import sys

from .enums import EnumCollection
from .errors import ParseError
from .ranges import Range

# properties which behave identically to another property and are therefore folded into it
NormalizationTable: dict[str, str] = {
	# NL behaves exactly the same as BK (https://www.unicode.org/reports/tr14/tr14-45.html#NL)
	'NL': 'BK',
	# without dictionaries or ICU data, AI, SA, SG and XX resolve to AL (https://www.unicode.org/reports/tr14/tr14-45.html#LB1)
	'AI': 'AL',
	'SA': 'AL',
	'SG': 'AL',
	'XX': 'AL',
	# https://unicode.org/reports/tr14/tr14-45.html#CJ
	'CJ': 'NS',
}

def RemoveComment(line: str) -> str:
	return line.split('#', 1)[0]

def ExtractHeader(lines: list[str]) -> list[str]:
	header: list[str] = []

	# the header consists of the leading comment lines until the first blank or bare '#' line
	for line in lines:
		if line.strip() in ('', '#') or RemoveComment(line).strip() != '':
			break
		header.append(line.rstrip('\r\n'))
	return header

def ParseCodepoint(value: str, lineNumber: int) -> int:
	if re.fullmatch('[0-9A-Fa-f]+', value) is None:
		raise ParseError(f'Invalid codepoint [{value}] in line {lineNumber}')
	return int(value, 16)

def ParseLine(line: str, enums: EnumCollection, lineNumber: int = 0, normalization: dict[str, str] = NormalizationTable) -> Range|None:
	line = RemoveComment(line)
	if line.strip() == '':
		return None

	# split the line into the codepoint range and the property
	fields = [s.strip() for s in line.split(';')]
	if len(fields) < 2 or fields[0] == '' or fields[1] == '':
		raise ParseError(f'Invalid line {lineNumber}, expected [range;property]: [{line.strip()}]')
	cp, name = fields[0], fields[1]

	# expand the unicode range
	if '..' in cp:
		begin, last = cp.split('..', 1)
		first, last = ParseCodepoint(begin.strip(), lineNumber), ParseCodepoint(last.strip(), lineNumber)
	else:
		first = last = ParseCodepoint(cp, lineNumber)
	if first > last or last > Range.RangeLast:
		raise ParseError(f'Invalid codepoint range [{cp}] in line {lineNumber}')

	# register the property (normalized properties are registered as their target)
	if name in normalization:
		property = enums.add(normalization[name], name)
	else:
		property = enums.add(name)
	return Range(first, last, property)

class ParsedFile:
	def __init__(self, lines: list[str], enums: EnumCollection|None = None, normalization: dict[str, str] = NormalizationTable) -> None:
		self.enums: EnumCollection = (EnumCollection() if enums is None else enums)
		self.header: list[str] = ExtractHeader(lines)
		self.ranges: list[Range] = []

		# parse all lines into raw ranges (header and blank lines carry no data)
		for i, line in enumerate(lines):
			r = ParseLine(line, self.enums, i + 1, normalization)
			if r is not None:
				self.ranges.append(r)

	@staticmethod
	def fromPath(path: str, enums: EnumCollection|None = None, normalization: dict[str, str] = NormalizationTable) -> 'ParsedFile':
		print(f'Parsing [{path}]...', file=sys.stderr)
		try:
			with open(path, 'r', encoding='utf-8-sig') as file:
				lines = file.read().splitlines()
		except UnicodeDecodeError as e:
			raise ParseError(f'[{path}] is not valid utf-8: {e}') from None
		return ParsedFile(lines, enums, normalization)
