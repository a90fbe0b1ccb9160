# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import argparse
import sys

from .download import DownloadPropertyFile, UCDBaseUrl
from .errors import SyncError
from .syncer import LineBreak, SyncProperties, WordBreak

# exit codes (usage errors follow the sysexits convention EX_USAGE)
ExitUsage: int = 64
ExitFailure: int = 1

class _ArgumentParser(argparse.ArgumentParser):
	def error(self, message: str) -> None:
		UsageError(self, message)

def UsageError(parser: argparse.ArgumentParser, message: str) -> None:
	print(f'{message}\n', file=sys.stderr)
	parser.print_help(sys.stderr)
	sys.exit(ExitUsage)

def MakeParser() -> argparse.ArgumentParser:
	parser = _ArgumentParser(prog='ucdsync', description='Packs the unicode word/line break properties into generated lookup code.')
	parser.add_argument('-w', '--words', metavar='PATH', help='Sync the word break properties (WordBreakProperty.txt).')
	parser.add_argument('-l', '--lines', metavar='PATH', help='Sync the line break properties (LineBreak.txt).')
	parser.add_argument('-o', '--output', metavar='PATH', help='Destination of the generated code (required unless --dry).')
	parser.add_argument('-d', '--dry', action='store_true', help='Dry mode does not write anything to disk. The output is printed to the console.')
	parser.add_argument('--fetch', action='store_true', help='Download the property file from the unicode character database if it does not exist.')
	parser.add_argument('--refresh', action='store_true', help='Download the property file again even if it exists (requires --fetch).')
	parser.add_argument('--base-url', default=UCDBaseUrl, metavar='URL', help=f'Base url of the unicode character database (default: {UCDBaseUrl}).')
	return parser

def main(argv: list[str]|None = None) -> int:
	parser = MakeParser()
	args = parser.parse_args(argv)

	# exactly one of the property families must be selected
	if args.words is None and args.lines is None:
		UsageError(parser, 'Expecting either a word break properties file or a line break properties file. None was given.')
	if args.words is not None and args.lines is not None:
		UsageError(parser, 'Expecting either a word break properties file or a line break properties file. Both were given.')
	if not args.dry and args.output is None:
		UsageError(parser, 'Expecting a destination file (--output) unless running in dry mode.')
	if args.refresh and not args.fetch:
		UsageError(parser, 'Expecting --fetch when requesting a --refresh of the property file.')
	propertySet, src = ((WordBreak, args.words) if args.words is not None else (LineBreak, args.lines))

	try:
		if args.fetch:
			DownloadPropertyFile(propertySet.ucdPath, src, args.refresh, args.base_url)
		SyncProperties(propertySet, src, args.output, args.dry)
	except (SyncError, OSError) as e:
		print(f'error: {e}', file=sys.stderr)
		return ExitFailure
	return 0
