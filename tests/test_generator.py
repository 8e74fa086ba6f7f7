import pytest

from chord import Chord, ChordSequence, RootChord, Prefix, Suffix, KnownRoot
from errors import InvalidInputError, DecompositionError
from generator import Generator, conflicts
from rules import RuleTables


def small_tables(**kwargs)->RuleTables:
	raw=dict(
			left_hand_combos=[("k", "K"), ("t", "T"), ("sr", "SR"), ("śr", "SR")],
			center_combos=[("a", "A"), ("o", "AU")],
			right_hand_combos=[("k", "BG"), ("t", "T")],
			)
	raw.update(kwargs)
	return RuleTables.from_raw(**raw)

def c(text: str)->Chord:
	return Chord.parse(text)


def test_kotek():
	sequence, new_chunks=Generator().gen_word_chords("kotek")
	assert sequence==ChordSequence((RootChord("kot", c("KAUT")), Suffix("ek", c("ZKPLEBG"))))
	assert str(sequence)=='RC:"kot":KAUT + S:"-ek":ZKPLEBG'
	assert sequence.print_chords()=="KAUT + ZKPLEBG"
	assert new_chunks==[ChordSequence.from_chord("kot", c("KAUT"))]

def test_word_is_preserved():
	generator=Generator()
	for word in ["przebiegłość", "wyniosły", "spółgłoska", "kościół", "marznąć", "dodekahedron", "Kotek"]:
		sequence=generator.add_word_root(word)
		assert sequence.word()==word.lower(), word
		for chord in sequence.collapse():
			assert chord, word

def test_deterministic():
	a=Generator().gen_word_chords("przebiegłość")
	b=Generator().gen_word_chords("przebiegłość")
	assert a==b
	assert str(a[0])==str(b[0])

def test_gen_word_chords_does_not_modify():
	generator=Generator(small_tables())
	generator.gen_word_chords("kot")
	assert generator.word_root_dict=={}
	assert generator.chunk_dict=={}

def test_add_word_root():
	generator=Generator(small_tables())
	sequence=generator.add_word_root("kot")
	assert sequence==ChordSequence.from_chord("kot", c("KAUT"))
	assert generator.word_root_dict=={"kot": sequence}
	assert generator.chunk_dict=={"kot": sequence}
	assert generator.word_root_conflict_dict=={sequence: {"kot"}}
	assert generator.chunk_conflict_dict=={sequence: {"kot"}}

def test_several_strokes_per_chunk():
	generator=Generator(small_tables())
	# the second t cannot be pressed again in the same stroke
	sequence, new_chunks=generator.gen_word_chords("katt")
	assert sequence.collapse()==(c("KA-T"), c("T-"))
	assert [item.text for item in sequence.items]==["kat", "t"]
	assert len(new_chunks)==1

def test_conflict_ledger():
	generator=Generator(small_tables())
	first=generator.add_word_root("sra")
	assert conflicts(generator.chunk_conflict_dict)==[]
	second=generator.add_word_root("śra")
	assert first==second
	assert first.print_chords()=="SRA"
	assert generator.chunk_conflict_dict[first]=={"sra", "śra"}
	assert generator.word_root_conflict_dict[first]=={"sra", "śra"}
	assert conflicts(generator.chunk_conflict_dict)==[(first, {"sra", "śra"})]
	assert set(generator.word_root_dict)=={"sra", "śra"}

def test_conflicts_order():
	one=ChordSequence.from_chord("a", c("A"))
	two=ChordSequence.from_chord("o", c("AU"))
	three=ChordSequence.from_chord("k", c("K"))
	ledger={one: {"a", "b", "c"}, two: {"o", "u"}, three: {"k"}}
	assert conflicts(ledger)==[(two, {"o", "u"}), (one, {"a", "b", "c"})]

def test_known_root():
	generator=Generator(small_tables(suffixes=[("ek", "ZKPLEBG")]))
	generator.add_word_root("kot")
	sequence, new_chunks=generator.gen_word_chords("kotek")
	assert isinstance(sequence.items[0], KnownRoot)
	assert new_chunks==[]
	assert sequence.collapse()==(c("KAUT"), c("ZKPLEBG"))
	assert sequence.root()==ChordSequence.from_chord("kot", c("KAUT"))
	assert sequence.word()=="kotek"

def test_shortcut_root():
	generator=Generator(small_tables(shortcuts=[("kot", "KOT")], suffixes=[("ek", "ZKPLEBG")]))
	assert generator.word_root_dict["kot"]==ChordSequence.from_chord("kot", c("KOT"))
	assert generator.word_root_dict["kot"].word()=="kot"
	sequence=generator.add_word_root("kotek")
	assert sequence.collapse()==(c("KOT"), c("ZKPLEBG"))
	assert sequence.word()=="kotek"
	assert generator.chunk_dict=={}

def test_prefix_and_empty_root():
	generator=Generator(small_tables(prefixes=[("ta", "TA*")]))
	sequence=generator.add_word_root("ta")
	assert sequence==ChordSequence((Prefix("ta", c("TA*")),))
	assert sequence.root()==ChordSequence()
	assert generator.word_root_dict=={}
	assert generator.word_root_conflict_dict=={}

def test_affix_exceptions():
	generator=Generator(small_tables(prefixes=[("ta", "TA*")]))
	sequence, new_chunks=generator.gen_word_chords("tata")
	assert sequence.items[0]==Prefix("ta", c("TA*"))

	generator=Generator(small_tables(prefixes=[("ta", "TA*")], prefix_exceptions=["tata"]))
	sequence, new_chunks=generator.gen_word_chords("tata")
	assert sequence==ChordSequence((RootChord("ta", c("TA")), RootChord("ta", c("TA"))))
	# the same chunk twice in a word is generated once
	assert new_chunks==[ChordSequence.from_chord("ta", c("TA"))]

	generator=Generator(small_tables(suffixes=[("ta", "-TA")], suffix_exceptions=["tata"]))
	sequence, _=generator.gen_word_chords("tata")
	assert not any(isinstance(item, Suffix) for item in sequence.items)
	sequence, _=generator.gen_word_chords("kota")
	assert isinstance(sequence.items[-1], Suffix)

def test_decomposition_error():
	generator=Generator(small_tables())
	with pytest.raises(DecompositionError) as e:
		generator.add_word_root("kax")
	assert e.value.word=="kax"
	assert e.value.chunk=="kax"
	assert e.value.remaining=="x"
	assert generator.chunk_dict=={}
	assert generator.word_root_dict=={}

def test_invalid_input():
	generator=Generator(small_tables())
	for word in ["dwa słowa", "abc1", ""]:
		with pytest.raises(InvalidInputError):
			generator.add_word_root(word)
	assert generator.word_root_dict=={}

def test_chunk_with_unknown_character():
	generator=Generator(small_tables())
	with pytest.raises(DecompositionError) as e:
		generator.gen_chunk_chords("xa")
	assert e.value.remaining=="xa"
	assert e.value.word is None
	assert generator.gen_chunk_chords("ta")==ChordSequence.from_chord("ta", c("TA"))

def test_bundled_tables_vectors():
	generator=Generator()
	sequence=generator.add_word_root("góra")
	assert sequence.print_chords()=="KJEIU + RA"
	assert [item.text for item in sequence.items]==["gó", "ra"]
	sequence=generator.add_word_root("przebiegłość")
	assert sequence.print_chords()=="PRE* + PJEIG + LJAUSTO"
	assert sequence.outline()=="PRE*/PJEIG/LJAUSTO"

def test_invalid_combinations_do_not_end_a_phase():
	generator=Generator(small_tables(left_hand_combos=[("x", "X"), ("s", "S")]))
	sequence, _=generator.gen_word_chords("xsa")
	assert sequence.collapse()==(c("XSA"),)
	assert not sequence.collapse()[0].is_valid()
