import pytest

from errors import InvalidInputError
from lib import syllable_split, find_longest_affix, sanitize_word, is_valid_word, corpus_


def test_syllable_split():
	assert syllable_split("przebiegłość")==["prze", "bieg", "łość"]
	assert syllable_split("wyniosły")==["wy", "nios", "ły"]
	assert syllable_split("aorta")==["a", "or", "ta"]
	assert syllable_split("towot")==["to", "wot"]
	assert syllable_split("dodekahedron")==["do", "de", "ka", "hed", "ron"]
	assert syllable_split("kościół")==["koś", "ciół"]
	assert syllable_split("zawżdy")==["zaw", "żdy"]
	assert syllable_split("spółgłoska")==["spół", "głos", "ka"]
	assert syllable_split("kuchta")==["kuch", "ta"]
	assert syllable_split("marzanna")==["ma", "rzan", "na"]
	assert syllable_split("marznąć")==["marz", "nąć"]

def test_syllable_split_edge_cases():
	assert syllable_split("")==[]
	assert syllable_split("brr")==["brr"]
	assert syllable_split("kot")==["kot"]
	for word in ["strz", "a", "ssak", "źdźbło", "przedsiębiorstwo"]:
		assert "".join(syllable_split(word))==word, word

def test_find_longest_affix():
	table={"p": 1, "prz": 2, "prze": 3, "ek": 4, "k": 5}
	assert find_longest_affix("przebieg", table, 2, True)==("prze", 3)
	assert find_longest_affix("prz", table, 2, True)==("prz", 2)
	assert find_longest_affix("pa", table, 2, True) is None
	assert find_longest_affix("pa", table, 1, True)==("p", 1)
	assert find_longest_affix("kotek", table, 2, False)==("ek", 4)
	assert find_longest_affix("kotak", table, 2, False) is None
	assert find_longest_affix("kotak", table, 1, False)==("k", 5)
	assert find_longest_affix("", table, 1, True) is None

def test_sanitize_word():
	assert sanitize_word(" Kotek\n")=="kotek"
	assert sanitize_word("ŻÓŁW")=="żółw"
	assert is_valid_word("źdźbło")
	for word in ["dwa słowa", "abc1", "", "   ", "naïve", "a-b"]:
		with pytest.raises(InvalidInputError):
			sanitize_word(word)

def test_corpus(tmp_path):
	p=tmp_path/"words.txt"
	p.write_text("\n".join([
		"kotek, kotka, kotkiem",
		"kot, kota",
		"a",
		"dwa słowa",
		"Kot",
		"abc1, abc",
		]), encoding="utf-8")
	assert corpus_(p)=={"kot", "kotek"}
	assert corpus_(p, all_forms=True)=={"abc", "kot", "kota", "kotek", "kotka", "kotkiem"}
