"""
Rule tables parsed into chords.

The tables are static configuration: a RuleTables object is built once at
startup (from rule_data.py, or from a JSON file) and handed to the Generator.
"""
from pathlib import Path
from typing import Dict, Iterable, Mapping, Tuple, FrozenSet, Any
from dataclasses import dataclass, fields
from types import MappingProxyType
import functools
import json
import logging

import rule_data
from chord import Chord
from errors import UnrecognizedCharacterError

logger=logging.getLogger(__name__)

ChordTable=Mapping[str, Chord]

def parse_table(name: str, table: Iterable[Tuple[str, str]], chord_prefix: str="")->ChordTable:
	result: Dict[str, Chord]={}
	for text, chord in table:
		try:
			result[text]=Chord.parse(chord_prefix+chord)
		except UnrecognizedCharacterError as e:
			raise UnrecognizedCharacterError(e.character, f"{name}: {text!r} => {chord!r}") from e
	return MappingProxyType(result)


@dataclass(frozen=True)
class RuleTables:
	prefixes: ChordTable
	suffixes: ChordTable
	left_hand_combos: ChordTable
	center_combos: ChordTable
	right_hand_combos: ChordTable
	shortcuts: ChordTable
	special_chars: ChordTable
	commands: ChordTable
	prefix_exceptions: FrozenSet[str]
	suffix_exceptions: FrozenSet[str]

	@classmethod
	def from_raw(cls,
			prefixes: Iterable[Tuple[str, str]]=(),
			suffixes: Iterable[Tuple[str, str]]=(),
			left_hand_combos: Iterable[Tuple[str, str]]=(),
			center_combos: Iterable[Tuple[str, str]]=(),
			right_hand_combos: Iterable[Tuple[str, str]]=(),
			shortcuts: Iterable[Tuple[str, str]]=(),
			special_chars: Iterable[Tuple[str, str]]=(),
			commands: Iterable[Tuple[str, str]]=(),
			prefix_exceptions: Iterable[str]=(),
			suffix_exceptions: Iterable[str]=(),
			)->"RuleTables":
		"""
		Build the tables from (text, chord string) pairs.
		Raise UnrecognizedCharacterError if a chord string is malformed.
		"""
		return cls(
				prefixes=parse_table("prefixes", prefixes),
				suffixes=parse_table("suffixes", suffixes),
				left_hand_combos=parse_table("left_hand_combos", left_hand_combos),
				center_combos=parse_table("center_combos", center_combos),
				# right hand keys are written without the hyphen
				right_hand_combos=parse_table("right_hand_combos", right_hand_combos, "-"),
				shortcuts=parse_table("shortcuts", shortcuts),
				special_chars=parse_table("special_chars", special_chars),
				commands=parse_table("commands", commands),
				prefix_exceptions=frozenset(prefix_exceptions),
				suffix_exceptions=frozenset(suffix_exceptions),
				)

	@classmethod
	def default(cls)->"RuleTables":
		return default_rule_tables()

	@classmethod
	def from_json(cls, p: Path)->"RuleTables":
		"""
		Read tables from a JSON object {table name: {text: chord}}; exception tables are lists of words.
		Tables that are not in the file are taken from rule_data.
		"""
		data: Dict[str, Any]=json.loads(Path(p).read_text(encoding="utf-8"))
		names={f.name for f in fields(cls)}
		unknown=set(data)-names
		if unknown:
			raise ValueError(f"Unknown rule tables in {p}: {sorted(unknown)}")
		raw: Dict[str, Any]={}
		for name in names:
			if name in data:
				value=data[name]
				raw[name]=value if name.endswith("_exceptions") else value.items()
			else:
				raw[name]=getattr(rule_data, name)
		logger.info("Loaded rule tables %s from %s", sorted(data), p)
		return cls.from_raw(**raw)


@functools.lru_cache(maxsize=None)
def default_rule_tables()->RuleTables:
	return RuleTables.from_raw(
			prefixes=rule_data.prefixes,
			suffixes=rule_data.suffixes,
			left_hand_combos=rule_data.left_hand_combos,
			center_combos=rule_data.center_combos,
			right_hand_combos=rule_data.right_hand_combos,
			shortcuts=rule_data.shortcuts,
			special_chars=rule_data.special_chars,
			commands=rule_data.commands,
			prefix_exceptions=rule_data.prefix_exceptions,
			suffix_exceptions=rule_data.suffix_exceptions,
			)
