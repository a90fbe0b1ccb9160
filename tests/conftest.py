import pytest

LINE_BREAK = [
	'# LineBreak-15.0.0.txt',
	'# Date: 2022-07-28, 09:20:42 GMT [KW, LI]',
	'#',
	'# Unicode Character Database',
	'',
	'0000..0008;CM     # Cc     [9] <control-0000>..<control-0008>',
	'0009;BA           # Cc         <control-0009>',
	'000A;LF           # Cc         <control-000A>',
	'000D;CR           # Cc         <control-000D>',
	'0020;SP           # Zs         SPACE',
	'0030..0039;NU     # Nd    [10] DIGIT ZERO..DIGIT NINE',
	'0041..005A;AL     # Lu    [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z',
	'0061..007A;AL     # Ll    [26] LATIN SMALL LETTER A..LATIN SMALL LETTER Z',
	'00A7;AI           # Po         SECTION SIGN',
	'0E01..0E30;SA     # Lo    [48] THAI CHARACTER KO KAI..THAI CHARACTER SARA A',
	'2028;BK           # Zl         LINE SEPARATOR',
	'0085;NL           # Cc         <control-0085>',
	'3005;CJ           # Lm         IDEOGRAPHIC ITERATION MARK',
	'1F1E6..1F1FF;RI   # So    [26] REGIONAL INDICATOR SYMBOL LETTER A..Z',
]

WORD_BREAK = [
	'# WordBreakProperty-15.0.0.txt',
	'# Date: 2022-04-26, 23:00:00 GMT',
	'',
	'000A          ; LF # Cc       <control-000A>',
	'000D          ; CR # Cc       <control-000D>',
	'0041..005A    ; ALetter # L&  [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z',
	'0027          ; Single_Quote # Po       APOSTROPHE',
	'1F1E6..1F1FF  ; Regional_Indicator # So  [26] REGIONAL INDICATOR SYMBOL LETTER A..Z',
]


@pytest.fixture
def lineBreakLines():
	return list(LINE_BREAK)

@pytest.fixture
def wordBreakLines():
	return list(WORD_BREAK)

@pytest.fixture
def lineBreakFile(tmp_path):
	path = tmp_path / 'LineBreak.txt'
	path.write_text('\n'.join(LINE_BREAK) + '\n', encoding='utf-8')
	return path

@pytest.fixture
def wordBreakFile(tmp_path):
	path = tmp_path / 'WordBreakProperty.txt'
	path.write_text('\n'.join(WORD_BREAK) + '\n', encoding='utf-8')
	return path
