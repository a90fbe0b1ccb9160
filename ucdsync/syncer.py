# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import io
import sys

from .download import ExtractVersion
from .enums import EnumCollection, EnumValue
from .packing import PackedProperties
from .parser import NormalizationTable, ParsedFile
from .ranges import Range, Ranges

# added to all generated files (the generated code is consumed by the flutter web engine)
copyrightLines = [
	'// Copyright 2013 The Flutter Authors. All rights reserved.',
	'// Use of this source code is governed by a BSD-style license that can be',
	'// found in the LICENSE file.'
]

class PropertySet:
	def __init__(self, name: str, prefix: str, defaultProperty: str, docLink: str, ucdPath: str, fileName: str, normalization: dict[str, str] = NormalizationTable) -> None:
		self.name = name
		self.prefix = prefix
		self.defaultProperty = defaultProperty
		self.docLink = docLink
		self.ucdPath = ucdPath
		self.fileName = fileName
		self.normalization = normalization
	def __repr__(self) -> str:
		return f'PropertySet({self.name!r})'

WordBreak = PropertySet('words', 'Word', 'Unknown',
	'http://unicode.org/reports/tr29/#Table_Word_Break_Property_Values',
	'ucd/auxiliary/WordBreakProperty.txt', 'word_break_properties.dart')
LineBreak = PropertySet('lines', 'Line', 'AL',
	'https://www.unicode.org/reports/tr14/tr14-45.html#DescriptionOfProperties',
	'ucd/LineBreak.txt', 'line_break_properties.dart')

class PropertyCollection:
	def __init__(self, header: list[str], enums: EnumCollection, ranges: list[Range], default: EnumValue) -> None:
		self.header = header
		self.enums = enums
		self.ranges = ranges
		self.default = default
	def singleRangesCount(self) -> int:
		return Ranges.singleCount(self.ranges)
	def enumCount(self) -> int:
		return len(self.enums)
	def version(self) -> str|None:
		return ExtractVersion(self.header)

	@staticmethod
	def fromParsed(parsed: ParsedFile, defaultProperty: str) -> 'PropertyCollection':
		# the default property must always be a valid lookup target, even if the file never lists it
		default = parsed.enums.ensure(defaultProperty)
		ranges = Ranges.process(parsed.ranges, defaultProperty)
		return PropertyCollection(parsed.header, parsed.enums, ranges, default)
	@staticmethod
	def fromLines(lines: list[str], propertySet: PropertySet) -> 'PropertyCollection':
		return PropertyCollection.fromParsed(ParsedFile(lines, None, propertySet.normalization), propertySet.defaultProperty)
	@staticmethod
	def fromPath(path: str, propertySet: PropertySet) -> 'PropertyCollection':
		return PropertyCollection.fromParsed(ParsedFile.fromPath(path, None, propertySet.normalization), propertySet.defaultProperty)

class GeneratedFile:
	def __init__(self) -> None:
		self._buffer = io.StringIO()
		self._level = 0
	def indent(self, level: int = 1) -> None:
		self._level += level
	def dedent(self, level: int = 1) -> None:
		self._level -= level
	def writeln(self, msg: str = '') -> None:
		# only indent non-empty lines
		for line in msg.split('\n'):
			self._buffer.write(('  ' * self._level + line if line != '' else '') + '\n')
	def comment(self, lines: list[str], prefix: str = '//') -> None:
		for line in lines:
			self.writeln(f'{prefix} {line}'.rstrip())
	def content(self) -> str:
		return self._buffer.getvalue()

def _EnumLines(enums: EnumCollection) -> list[str]:
	out: list[str] = []
	for value in enums:
		if len(value.normalizedFrom) > 0:
			out.append(f'// Normalized from: {", ".join(value.normalizedFrom)}')
		out.append(f'{value.enumName()}, // serialized as "{value.serialized()}"')
	return out

def RenderProperties(propertySet: PropertySet, data: PropertyCollection) -> str:
	packed = PackedProperties(data.ranges, data.enums)
	enumType, packedName = f'{propertySet.prefix}CharProperty', f'_packed{propertySet.prefix}BreakProperties'
	file = GeneratedFile()

	# write the file header and the provenance of the data
	for line in copyrightLines:
		file.writeln(line)
	file.writeln()
	file.comment(['AUTO-GENERATED FILE.', 'Generated by: ucdsync', '', 'Source:'])
	file.comment(data.header if len(data.header) > 0 else [''])
	file.writeln()
	file.writeln("import 'unicode_range.dart';")
	file.writeln()

	# write the enum of all properties in serialization order
	file.comment(['For an explanation of these enum values, see:', '', f'* {propertySet.docLink}'], '///')
	file.writeln(f'enum {enumType} {{')
	file.indent()
	for line in _EnumLines(data.enums):
		file.writeln(line)
	file.dedent()
	file.writeln('}')
	file.writeln()

	# write the packed ranges and the lookup constructed from them
	file.comment([f'Ranges: {len(data.ranges)}, single codepoint ranges: {packed.singleCount}, properties: {packed.enumCount}'])
	file.writeln(f'const String {packedName} =')
	file.writeln(f"  '{packed.packed}';")
	file.writeln()
	file.writeln()
	file.writeln(f'UnicodePropertyLookup<{enumType}> {propertySet.prefix.lower()}Lookup =')
	file.writeln(f'    UnicodePropertyLookup<{enumType}>.fromPackedData(')
	file.indent()
	file.writeln(f'{packedName},')
	file.writeln(f'{packed.singleCount},')
	file.writeln(f'{enumType}.values,')
	file.writeln(f'{enumType}.{data.default.enumName()},')
	file.dedent()
	file.writeln(');')
	return file.content()

def SyncProperties(propertySet: PropertySet, src: str, dest: str|None, dry: bool = False) -> str:
	data = PropertyCollection.fromPath(src, propertySet)
	print(f'Processed [{propertySet.name}] version [{data.version() or "unknown"}]: {len(data.ranges)} ranges, '
		+ f'{data.singleRangesCount()} single, {data.enumCount()} properties', file=sys.stderr)

	# render the entire output before touching the destination
	output = RenderProperties(propertySet, data)
	if dry:
		sys.stdout.write(output)
		return output
	if dest is None:
		raise ValueError('Destination is required unless running dry')
	print(f'Writing [{dest}]...', file=sys.stderr)
	with open(dest, mode='w', encoding='utf-8', newline='\n') as file:
		file.write(output)
	return output
