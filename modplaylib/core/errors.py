#!/usr/bin/env python3

#============================================

class InvalidSourceKind(RuntimeError):
	"""Source kind is not one of local, hls, api."""

#============================================

class InvalidSource(RuntimeError):
	"""Source origin is empty or the source cannot be built as requested."""

#============================================

class EmptyPlaylist(RuntimeError):
	"""Play was requested on a playlist with no items."""

#============================================

class InvalidMenuInput(RuntimeError):
	"""Menu input could not be read as an option number."""

#============================================

class ConfigError(RuntimeError):
	"""Session yaml file is malformed."""
