# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .enums import EnumCollection, EnumValue
from .errors import CapacityError, OverlapError, ParseError, SyncError
from .packing import PackedProperties, PackRanges, UnpackRanges
from .parser import NormalizationTable, ParsedFile, ParseLine
from .ranges import Range, Ranges
from .syncer import LineBreak, PropertyCollection, PropertySet, RenderProperties, SyncProperties, WordBreak
