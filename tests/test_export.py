import json

from export import flatten_dictionary, word_roots_dictionary, write_json
from generator import Generator
from rules import RuleTables


def make_generator(**kwargs)->Generator:
	raw=dict(
			left_hand_combos=[("k", "K"), ("t", "T"), ("śr", "SR")],
			center_combos=[("a", "A"), ("o", "AU")],
			right_hand_combos=[("t", "T")],
			prefixes=[("po", "PO")],
			suffixes=[("ek", "ZKPLEBG")],
			special_chars=[("{.}", "P-L")],
			commands=[("{^ ^}", "XF*OY")],
			)
	raw.update(kwargs)
	generator=Generator(RuleTables.from_raw(**raw))
	for word in ["kot", "katt", "kotek"]:
		generator.add_word_root(word)
	return generator


def test_flatten_dictionary():
	assert flatten_dictionary(make_generator())=={
			"KAUT": "{&kot}",
			"KAT/T-": "{&katt}",
			"P-O": "po{^}",
			"ZKPLEBG": "{^}ek",
			"P-L": "{.}",
			"XF*OY": "{^ ^}",
			}

def test_later_tables_win():
	dictionary=flatten_dictionary(make_generator(special_chars=[("{.}", "KAUT")]))
	assert dictionary["KAUT"]=="{.}"

def test_word_roots_dictionary():
	assert word_roots_dictionary(make_generator())=={
			"KAUT": "kot",
			"KAT/T-": "katt",
			}

def test_write_json(tmp_path):
	generator=make_generator()
	generator.add_word_root("śrot")
	p=tmp_path/"syllables.json"
	write_json(p, flatten_dictionary(generator))
	text=p.read_text(encoding="utf-8")
	assert "{&śrot}" in text
	assert json.loads(text)["SRAUT"]=="{&śrot}"
