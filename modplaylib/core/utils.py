#!/usr/bin/env python3

from modplaylib.core.errors import InvalidSource
from modplaylib.core.errors import InvalidSourceKind

#============================================

SOURCE_KINDS = ('local', 'hls', 'api')

# order the menu asks and attaches them in
FEATURE_NAMES = ('subtitles', 'equalizer', 'watermark')

RENDERER_KINDS = ('hardware', 'software')

#============================================

def normalize_kind(raw_kind) -> str:
	if raw_kind is None:
		raise InvalidSourceKind("source kind is required")
	kind = str(raw_kind).strip().lower()
	if kind not in SOURCE_KINDS:
		raise InvalidSourceKind(f"unsupported source kind: {raw_kind}")
	return kind

#============================================

def normalize_origin(raw_origin) -> str:
	if raw_origin is None:
		raise InvalidSource("origin must not be empty")
	origin = str(raw_origin).strip()
	if origin == '':
		raise InvalidSource("origin must not be empty")
	return origin

#============================================

def is_yes(answer: str) -> bool:
	if answer is None:
		return False
	return answer.strip().lower().startswith('y')

#============================================

def parse_menu_choice(raw_choice: str) -> int:
	text = raw_choice.strip()
	try:
		return int(text)
	except ValueError:
		return None
