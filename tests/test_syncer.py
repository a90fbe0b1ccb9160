import pytest

from ucdsync.errors import OverlapError, ParseError
from ucdsync.packing import UnpackRanges
from ucdsync.syncer import LineBreak, PropertyCollection, RenderProperties, SyncProperties, WordBreak


def test_concrete_merge_scenario():
	data = PropertyCollection.fromLines(['0041..005A;AL', '005B..007A;AL'], LineBreak)
	assert len(data.ranges) == 1
	assert data.ranges[0].triple() == (0x41, 0x7a, 'AL')
	assert data.ranges[0].property is data.default

def test_default_property_is_seeded():
	data = PropertyCollection.fromLines(['000A;LF', '000D;CR'], WordBreak)
	assert data.default.name == 'Unknown'
	assert data.default.index == 2
	assert data.enumCount() == 3

def test_default_property_keeps_first_seen_index():
	data = PropertyCollection.fromLines(['0041;AL', '000A;LF'], LineBreak)
	assert data.default.index == 0

def test_line_break_collection(lineBreakLines):
	data = PropertyCollection.fromLines(lineBreakLines, LineBreak)
	assert data.header == lineBreakLines[:2]
	assert data.version() == '15.0.0'
	names = [v.name for v in data.enums]
	assert names == ['CM', 'BA', 'LF', 'CR', 'SP', 'NU', 'AL', 'BK', 'NS', 'RI']
	assert list(data.enums.find('AL').normalizedFrom) == ['AI', 'SA']
	assert list(data.enums.find('BK').normalizedFrom) == ['NL']
	assert list(data.enums.find('NS').normalizedFrom) == ['CJ']
	al = [r.triple() for r in data.ranges if r.property.name == 'AL']
	assert al == [(0x41, 0x7a, 'AL'), (0xa7, 0xe30, 'AL')]
	for left, right in zip(data.ranges, data.ranges[1:]):
		assert left.last < right.first

def test_overlapping_input_fails():
	with pytest.raises(OverlapError):
		PropertyCollection.fromLines(['0041..005A;AL', '0050;NU'], LineBreak)

def test_render_contains_all_parts(lineBreakLines):
	data = PropertyCollection.fromLines(lineBreakLines, LineBreak)
	output = RenderProperties(LineBreak, data)
	assert output.startswith('// Copyright 2013 The Flutter Authors.')
	assert '// AUTO-GENERATED FILE.\n' in output
	assert '// # LineBreak-15.0.0.txt\n// # Date: 2022-07-28, 09:20:42 GMT [KW, LI]\n' in output
	assert '/// * https://www.unicode.org/reports/tr14/tr14-45.html#DescriptionOfProperties\n' in output
	assert 'enum LineCharProperty {\n  CM, // serialized as "A"\n' in output
	assert '  // Normalized from: AI, SA\n  AL, // serialized as "G"\n' in output
	assert '  // Normalized from: NL\n  BK, // serialized as "H"\n' in output
	assert 'UnicodePropertyLookup<LineCharProperty> lineLookup =\n' in output
	assert '  LineCharProperty.values,\n  LineCharProperty.AL,\n);\n' in output
	assert f'  {data.singleRangesCount()},\n' in output
	assert output.endswith(');\n')

def test_render_packed_string_decodes(lineBreakLines):
	data = PropertyCollection.fromLines(lineBreakLines, LineBreak)
	output = RenderProperties(LineBreak, data)
	line = output.split("const String _packedLineBreakProperties =\n  '")[1]
	packed = line.split("';")[0]
	assert [r.triple() for r in UnpackRanges(packed, data.enums.values)] == [r.triple() for r in data.ranges]

def test_render_word_break_enum_names(wordBreakLines):
	data = PropertyCollection.fromLines(wordBreakLines, WordBreak)
	output = RenderProperties(WordBreak, data)
	assert '  SingleQuote, // serialized as "D"\n' in output
	assert '  RegionalIndicator, // serialized as "E"\n' in output
	assert '  Unknown, // serialized as "F"\n' in output
	assert 'WordCharProperty.Unknown,\n' in output
	assert '_packedWordBreakProperties' in output

def test_render_is_deterministic(lineBreakLines):
	first = RenderProperties(LineBreak, PropertyCollection.fromLines(lineBreakLines, LineBreak))
	second = RenderProperties(LineBreak, PropertyCollection.fromLines(list(lineBreakLines), LineBreak))
	assert first == second

def test_sync_writes_destination(lineBreakFile, tmp_path):
	dest = tmp_path / 'line_break_properties.dart'
	output = SyncProperties(LineBreak, str(lineBreakFile), str(dest))
	assert dest.read_text(encoding='utf-8') == output

def test_sync_twice_is_byte_identical(lineBreakFile, tmp_path):
	first, second = tmp_path / 'a.dart', tmp_path / 'b.dart'
	SyncProperties(LineBreak, str(lineBreakFile), str(first))
	SyncProperties(LineBreak, str(lineBreakFile), str(second))
	assert first.read_bytes() == second.read_bytes()

def test_sync_dry_prints_and_writes_nothing(wordBreakFile, tmp_path, capsys):
	before = sorted(p.name for p in tmp_path.iterdir())
	output = SyncProperties(WordBreak, str(wordBreakFile), None, True)
	assert capsys.readouterr().out == output
	assert sorted(p.name for p in tmp_path.iterdir()) == before

def test_sync_parse_error_leaves_no_output(tmp_path):
	src = tmp_path / 'LineBreak.txt'
	src.write_text('0041;AL\nnot a line\n', encoding='utf-8')
	dest = tmp_path / 'out.dart'
	with pytest.raises(ParseError):
		SyncProperties(LineBreak, str(src), str(dest))
	assert not dest.exists()
