# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen

class SyncError(RuntimeError):
	pass

class ParseError(SyncError):
	pass

class CapacityError(SyncError):
	pass

class OverlapError(SyncError):
	def __init__(self, previous, current) -> None:
		super().__init__(f'Overlapping ranges encountered [{previous}] and [{current}]')
		self.previous = previous
		self.current = current
