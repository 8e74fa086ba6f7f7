"""
Turn the generator state into Plover JSON dictionaries.
"""
from pathlib import Path
from typing import Dict, List, Mapping, Tuple
import json
import logging

from generator import Generator

logger=logging.getLogger(__name__)


def flatten_dictionary(generator: Generator)->Dict[str, str]:
	"""
	Return the syllable dictionary: outline -> Plover translation.

	Chunks are glued ({&...}), prefixes attach to the following word and suffixes
	to the previous one. Later entries win if two outlines are equal, so special
	characters and commands override generated chunks.
	"""
	tables=generator.tables
	entries: List[Tuple[str, str]]=[
			*((sequence.outline(), f"{{&{chunk}}}") for chunk, sequence in generator.chunk_dict.items() if sequence),
			*((str(chord), f"{text}{{^}}") for text, chord in tables.prefixes.items()),
			*((str(chord), f"{{^}}{text}") for text, chord in tables.suffixes.items()),
			*((str(chord), text) for text, chord in tables.special_chars.items()),
			*((str(chord), text) for text, chord in tables.commands.items()),
			]
	result: Dict[str, str]={}
	for outline, translation in entries:
		if outline in result and result[outline]!=translation:
			logger.debug("OVERRIDE %s: %s -> %s", outline, result[outline], translation)
		result[outline]=translation
	return result

def word_roots_dictionary(generator: Generator)->Dict[str, str]:
	"""
	Return outline -> word root. If two roots share an outline the one added last is kept.
	"""
	return {
			sequence.outline(): root
			for root, sequence in generator.word_root_dict.items()
			if sequence
			}

def write_json(p: Path, dictionary: Mapping[str, str])->None:
	Path(p).write_text(
			json.dumps(dictionary, ensure_ascii=False, indent=0, sort_keys=True),
			encoding="utf-8")
	logger.info("Wrote %d entries to %s", len(dictionary), p)
