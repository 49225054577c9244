#!/usr/bin/env python3

from modplaylib.core import utils
from modplaylib.core.reporter import Reporter

#============================================

FEATURE_EFFECTS = {
	'subtitles': "Rendering subtitles.",
	'equalizer': "Applying audio equalizer.",
	'watermark': "Adding watermark.",
}

#============================================

class ProcessingChain():
	"""
	Base processing step over one source, plus feature effects layered on top.

	Features run outward from the base step: the source is fetched and the
	processed line emitted first, then each feature in the order it was
	attached. A chain never changes after construction; with_feature() returns
	a new chain that wraps this one.
	"""

	def __init__(self, source, features=()):
		features = tuple(features)
		seen = set()
		for feature in features:
			if not isinstance(feature, str) or feature not in FEATURE_EFFECTS:
				raise RuntimeError(f"unsupported feature: {feature}")
			if feature in seen:
				raise RuntimeError(f"feature attached twice: {feature}")
			seen.add(feature)
		self._source = source
		self._features = features

	#============================
	@property
	def source(self):
		return self._source

	#============================
	@property
	def features(self) -> tuple:
		return self._features

	#============================
	@property
	def depth(self) -> int:
		return 1 + len(self._features)

	#============================
	def with_feature(self, feature: str):
		return ProcessingChain(self._source, self._features + (feature,))

	#============================
	def apply(self, reporter: Reporter) -> None:
		content = self._source.fetch(reporter)
		reporter.emit('processed', f"Processing: {content}")
		for feature in self._features:
			reporter.emit(feature, FEATURE_EFFECTS[feature])

	#============================
	def to_dict(self) -> dict:
		return {
			'source': self._source.to_dict(),
			'features': list(self._features),
		}

#============================================

def build_chain(source, subtitles: bool = False, equalizer: bool = False,
	watermark: bool = False) -> ProcessingChain:
	requested = {
		'subtitles': subtitles,
		'equalizer': equalizer,
		'watermark': watermark,
	}
	chain = ProcessingChain(source)
	for feature in utils.FEATURE_NAMES:
		if requested[feature]:
			chain = chain.with_feature(feature)
	return chain
