# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os
import re
import sys
import urllib.request

# latest release of the ucd (unicode character database: https://www.unicode.org/Public/UCD/latest)
UCDBaseUrl: str = 'https://www.unicode.org/Public/UCD/latest'

# download the property file from the ucd (only if it should be refreshed or does not exist yet)
def DownloadPropertyFile(ucdPath: str, path: str, refresh: bool, baseUrl: str = UCDBaseUrl) -> bool:
	if not refresh and os.path.isfile(path):
		print(f'skipping [{path}] as the file already exists (use --refresh to enforce a new download)', file=sys.stderr)
		return False

	# check if the directory needs to be created
	dirPath = os.path.dirname(path)
	if dirPath != '' and not os.path.isdir(dirPath):
		os.makedirs(dirPath)

	url = f'{baseUrl.rstrip("/")}/{ucdPath}'
	print(f'downloading [{url}] to [{path}]...', file=sys.stderr)
	urllib.request.urlretrieve(url, path)
	return True

# fetch the version from the first header line (i.e. '# LineBreak-15.0.0.txt')
def ExtractVersion(header: list[str]) -> str|None:
	if len(header) == 0:
		return None
	version = re.findall('-([0-9]+(\\.[0-9]+)*)\\.txt', header[0])
	if len(version) != 1:
		return None
	return version[0][0]
