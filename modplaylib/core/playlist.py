#!/usr/bin/env python3

from modplaylib.core.processing import ProcessingChain
from modplaylib.core.reporter import Reporter

#============================================

class MediaFile():
	def __init__(self, chain: ProcessingChain):
		self._chain = chain

	#============================
	@property
	def chain(self) -> ProcessingChain:
		return self._chain

	#============================
	def play(self, reporter: Reporter) -> None:
		self._chain.apply(reporter)

	#============================
	def leaf_count(self) -> int:
		return 1

	#============================
	def to_dict(self) -> dict:
		chain_data = self._chain.to_dict()
		entry = {'source': chain_data['source']}
		cache = entry['source'].pop('cache', None)
		if cache:
			entry['cache'] = True
		if len(chain_data['features']) > 0:
			entry['features'] = chain_data['features']
		return entry

#============================================

class Playlist():
	def __init__(self, name: str = 'main'):
		self.name = name
		self._items = []

	#============================
	def add(self, item) -> None:
		if item is self:
			raise RuntimeError("a playlist cannot contain itself")
		self._items.append(item)

	#============================
	def is_empty(self) -> bool:
		return len(self._items) == 0

	#============================
	def __len__(self) -> int:
		return len(self._items)

	#============================
	def __iter__(self):
		return iter(list(self._items))

	#============================
	def leaf_count(self) -> int:
		return sum(item.leaf_count() for item in self._items)

	#============================
	def play(self, reporter: Reporter) -> None:
		for item in self._items:
			item.play(reporter)

	#============================
	def to_dict(self) -> dict:
		return {
			'playlist': {
				'name': self.name,
				'items': [item.to_dict() for item in self._items],
			}
		}
