#!/usr/bin/env python3

from modplaylib.core import utils
from modplaylib.core.reporter import Reporter

#============================================

class Renderer():
	def __init__(self, kind: str = 'hardware'):
		kind = str(kind).strip().lower()
		if kind not in utils.RENDERER_KINDS:
			raise RuntimeError(f"unsupported renderer kind: {kind}")
		self._kind = kind

	#============================
	@property
	def kind(self) -> str:
		return self._kind

	#============================
	@property
	def label(self) -> str:
		return self._kind.capitalize()

	#============================
	def render(self, data: str, reporter: Reporter) -> None:
		reporter.emit('render', f"{self.label} rendering: {data}")

	#============================
	def toggled(self):
		if self._kind == 'hardware':
			return Renderer('software')
		return Renderer('hardware')

	#============================
	def __eq__(self, other) -> bool:
		if not isinstance(other, Renderer):
			return NotImplemented
		return self._kind == other._kind

	#============================
	def __hash__(self) -> int:
		return hash(self._kind)

	#============================
	def __repr__(self) -> str:
		return f"Renderer({self._kind!r})"
