import dataclasses
import json

import pytest

import rule_data
from chord import Chord
from errors import UnrecognizedCharacterError
from rules import RuleTables


def test_default_tables():
	tables=RuleTables.default()
	assert tables is RuleTables.default()

	assert tables.left_hand_combos["k"]==Chord.parse("K")
	assert tables.left_hand_combos["sr"]==tables.left_hand_combos["śr"]==Chord.parse("SR")
	assert tables.center_combos["o"]==Chord.parse("AU")
	assert tables.right_hand_combos["k"]==Chord.parse("-BG")
	assert tables.right_hand_combos["t"]==Chord.parse("-T")
	assert tables.suffixes["ek"]==Chord.parse("ZKPLEBG")
	assert tables.prefixes["prze"]==Chord.parse("PRE*")
	assert "pralina" in tables.prefix_exceptions
	assert "przepych" in tables.suffix_exceptions

	assert len(tables.left_hand_combos)==len(dict(rule_data.left_hand_combos))
	assert len(tables.commands)==len(rule_data.commands)

def test_right_hand_keys():
	tables=RuleTables.from_raw(
			left_hand_combos=[("s", "S"), ("l", "L-")],
			right_hand_combos=[("s", "S"), ("l", "-L")],
			)
	assert str(tables.left_hand_combos["s"])=="S-"
	assert str(tables.left_hand_combos["l"])=="L-"
	assert str(tables.right_hand_combos["s"])=="-S"
	assert str(tables.right_hand_combos["l"])=="-L"

def test_malformed_chord():
	with pytest.raises(UnrecognizedCharacterError) as e:
		RuleTables.from_raw(prefixes=[("na", "NA")])
	assert "prefixes" in str(e.value)

def test_tables_are_read_only():
	tables=RuleTables.from_raw(prefixes=[("po", "PO")])
	with pytest.raises(TypeError):
		tables.prefixes["na"]=Chord.parse("LRA")  # type: ignore
	with pytest.raises(dataclasses.FrozenInstanceError):
		tables.prefixes={}  # type: ignore

def test_from_json(tmp_path):
	p=tmp_path/"rules.json"
	p.write_text(json.dumps({
		"suffixes": {"ek": "-BG"},
		"suffix_exceptions": ["kotek"],
		}), encoding="utf-8")
	tables=RuleTables.from_json(p)
	default=RuleTables.default()
	assert dict(tables.suffixes)=={"ek": Chord.parse("-BG")}
	assert tables.suffix_exceptions==frozenset({"kotek"})
	assert dict(tables.prefixes)==dict(default.prefixes)
	assert dict(tables.right_hand_combos)==dict(default.right_hand_combos)
	assert tables.prefix_exceptions==default.prefix_exceptions

def test_from_json_unknown_table(tmp_path):
	p=tmp_path/"rules.json"
	p.write_text(json.dumps({"infixes": {}}), encoding="utf-8")
	with pytest.raises(ValueError):
		RuleTables.from_json(p)
