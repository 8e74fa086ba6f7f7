from pathlib import Path
from typing import List, Mapping, Optional, Tuple, Set, Any, TypeVar
from time import time
import re
import string
import sys

from errors import InvalidInputError


from contextlib import contextmanager
@contextmanager
def timing(info: Any):
	"""
	Print the time taken by the block to stderr.
	"""
	start=time()
	try:
		yield
	finally:
		duration=time()-start
		print(f"{duration:8.3f}:", info, file=sys.stderr)

pl_diacritics="ąćęłńóśźż"
word_characters: Set[str]={*string.ascii_lowercase, *pl_diacritics}

def normalize_word(word: str)->str:
	return word.strip().lower()

def is_valid_word(word: str)->bool:
	"""
	Return whether the (normalized) word is a single word made of latin letters and Polish diacritics only.
	"""
	return bool(word) and all(c in word_characters for c in word)

def sanitize_word(word: str)->str:
	normalized=normalize_word(word)
	if not is_valid_word(normalized):
		raise InvalidInputError(normalized)
	return normalized

def corpus_(p: Path, all_forms: bool=False, min_length: int=2)->Set[str]:
	"""
	Read a word list where each line is a ", "-separated list of forms of one word.
	Only the first form of each line is used unless all_forms is set.
	Return the set of valid words.
	"""
	words: Set[str]=set()
	for line in p.read_text(encoding="utf-8").splitlines():
		forms=line.split(", ")
		for form in (forms if all_forms else forms[:1]):
			word=normalize_word(form)
			if len(word)>=min_length and is_valid_word(word):
				words.add(word)
	return words


V=TypeVar("V")
def find_longest_affix(needle: str, haystack: Mapping[str, V], min_match_len: int, is_prefix: bool)->Optional[Tuple[str, V]]:
	"""
	Find the longest prefix (or suffix) of needle that is a key of haystack,
	trying the lengths from len(needle) down to min_match_len.
	"""
	for n in range(len(needle), max(min_match_len, 1)-1, -1):
		part=needle[:n] if is_prefix else needle[len(needle)-n:]
		if part in haystack:
			return part, haystack[part]
	return None


consonant_pattern="(ch|cz|dz|dź|dż|sz|rz|b|c|ć|d|f|g|h|j|k|l|ł|m|n|ń|p|q|r|s|ś|t|v|w|x|z|ź|ż)"
vowel_pattern="(ia|ią|ie|ię|io|iu|ió|au|eu|a|ą|e|ę|i|o|ó|u|y)"

rough_syllable_re=re.compile(f"{consonant_pattern}*{vowel_pattern}")
# group 1 is the whole leading cluster, group 2 its first consonant
consonant_group_re=re.compile(f"({consonant_pattern}{consonant_pattern}+)")
single_consonant_re=re.compile(consonant_pattern)

def syllable_split(word: str)->List[str]:
	"""
	Split a word root into syllable-like chunks.

	>>> syllable_split("przebiegłość")
	['prze', 'bieg', 'łość']
	"""
	if not word:
		return []
	starts: List[int]=[m.start() for m in rough_syllable_re.finditer(word)]
	if not starts:
		return [word]  # no vowels
	starts[0]=0
	# trailing consonants stay with the last syllable
	rough: List[str]=[word[a:b] for a, b in zip(starts, starts[1:]+[len(word)])]

	result: List[str]=[rough[0]]
	for syllable in rough[1:]:
		match=consonant_group_re.match(syllable)
		if match is not None and single_consonant_re.fullmatch(match[1]) is None:
			# move the first consonant of the cluster back (bie|głość -> bieg|łość),
			# unless the cluster is a single digraph (ma|rzan|na)
			consonant=match[2]
			result[-1]+=consonant
			syllable=syllable[len(consonant):]
		result.append(syllable)

	assert "".join(result)==word, (word, result)
	return result
