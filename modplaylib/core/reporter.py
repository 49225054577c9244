#!/usr/bin/env python3

"""
Emission sink shared by sources, processing chains, renderers and the player.
"""

# Standard Library
import time

# PIP3 modules
from rich.console import Console
from rich.text import Text

#============================================

NORD_COLORS = {
	'foreground': "#D8DEE9",
	'dim': "#4C566A",
	'header': "#88C0D0",
	'flags': "#81A1C1",
	'numbers': "#B48EAD",
	'paths': "#A3BE8C",
	'strings': "#EBCB8B",
	'error': "#BF616A",
}

EVENT_STYLES = {
	'render': NORD_COLORS['header'],
	'cache_store': NORD_COLORS['numbers'],
	'cache_hit': NORD_COLORS['dim'],
	'processed': NORD_COLORS['paths'],
	'subtitles': NORD_COLORS['strings'],
	'equalizer': NORD_COLORS['flags'],
	'watermark': NORD_COLORS['strings'],
}

#============================================

class Reporter():
	def __init__(self, console: Console = None, quiet: bool = False,
		log_path: str = None, callback=None):
		if console is None:
			console = Console(highlight=False, soft_wrap=True)
		self.console = console
		self.quiet = quiet
		self.log_path = log_path
		self.callback = callback
		self.history = []
		if self.log_path is not None:
			self._reset_log()

	#============================
	def emit(self, event_type: str, text: str) -> dict:
		event = {
			'event': event_type,
			'text': text,
		}
		self.history.append(event)
		if not self.quiet:
			style = EVENT_STYLES.get(event_type, NORD_COLORS['foreground'])
			self.console.print(Text(text, style=style))
		self.write_log(f"{event_type}: {text}")
		if self.callback is not None:
			self.callback(event)
		return event

	#============================
	def events(self) -> list:
		return [event['event'] for event in self.history]

	#============================
	def lines(self) -> list:
		return [event['text'] for event in self.history]

	#============================
	def mark(self) -> int:
		"""
		Return the current history length, for slicing out later emissions.
		"""
		return len(self.history)

	#============================
	def since(self, marker: int) -> list:
		return self.history[marker:]

	#============================
	def write_log(self, message: str) -> None:
		if self.log_path is None:
			return
		timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
		line = f"[{timestamp}] {message}\n"
		with open(self.log_path, "a", encoding="utf-8") as handle:
			handle.write(line)

	#============================
	def _reset_log(self) -> None:
		with open(self.log_path, "w", encoding="utf-8"):
			return
