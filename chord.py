from typing import List, Dict, Tuple, Iterable, Sequence
from dataclasses import dataclass, field
from plover_stroke import BaseStroke  # type: ignore

from errors import ConflictError, InvalidChordError, UnrecognizedCharacterError

steno_keys: Tuple[str, ...]=(
	'X-', 'F-', 'Z-', 'S-', 'K-', 'T-', 'P-', 'V-', 'L-', 'R-',
	'J-', 'E-', '~-', '*', '-I', '-A', '-U',
	'-C', '-R', '-L', '-B', '-S', '-G', '-T', '-W', '-O', '-Y',
)

mid_keys: Tuple[str, ...]=('J-', 'E-', '~-', '*', '-I', '-A', '-U')

# once one of these is seen, S T L R refer to the right hand
mid_characters="JE~*IAU-"

two_handed_letters="STLR"

letter_to_key: Dict[str, str]={
		key.strip("-"): key
		for key in steno_keys
		if key.strip("-") not in two_handed_letters
		}
assert len(letter_to_key)+2*len(two_handed_letters)==len(steno_keys)

# three- and four-key combinations that cannot be pressed (or clash with another theory stroke)
invalid_combinations: Tuple[str, ...]=("XS", "FZ", "L*C", "R~R", "-TY", "-WO", "JIU")


class Chord(BaseStroke):
	@classmethod
	def parse(cls, text: str)->"Chord":
		"""
		Parse a steno string such as "KAUT", "L-" or "-TY".

		Characters are read left to right. S, T, L and R are left-hand keys
		until a middle key or the hyphen is seen; the keys do not need to be
		in steno order.
		"""
		names: List[str]=[]
		left_hand=True
		for c in text.upper():
			if c=="-":
				pass
			elif c in two_handed_letters:
				names.append(c+"-" if left_hand else "-"+c)
			elif c in letter_to_key:
				names.append(letter_to_key[c])
			else:
				raise UnrecognizedCharacterError(c, text)
			if c in mid_characters:
				left_hand=False
		return cls.from_key_names(names)

	@classmethod
	def from_key_names(cls, names: Iterable[str])->"Chord":
		names_=sorted(set(names), key=steno_keys.index)
		if not names_:
			return cls([])
		return cls(names_)

	@classmethod
	def empty(cls)->"Chord":
		return cls([])

	@classmethod
	def full_steno_order(cls)->"Chord":
		return cls.from_key_names(steno_keys)

	def merge(self, other: "Chord")->"Chord":
		"""
		Return the union of the two chords.
		Raise ConflictError if a key is pressed in both.
		"""
		if self&other:
			raise ConflictError(self, other)
		return self|other

	def contains(self, other: "Chord")->bool:
		return (self&other)==other

	def validate(self)->None:
		for combination in invalid_chords:
			if self.contains(combination):
				raise InvalidChordError(self, combination)

	def is_valid(self)->bool:
		return not any(self.contains(combination) for combination in invalid_chords)

	def __repr__(self)->str:
		left=''
		middle=''
		right=''
		for key in self.keys():
			if key in mid_keys:
				middle+=key.strip("-")
			elif key[-1]=="-":
				left+=key[:-1]
			else:
				right+=key[1:]
		s=left
		if not middle:
			s+='-'
		else:
			s+=middle
		s+=right
		return s

	def __str__(self):
		return self.__repr__()


Chord.setup(
keys=steno_keys,
implicit_hyphen_keys=mid_keys,
)

invalid_chords: Tuple[Chord, ...]=tuple(Chord.parse(x) for x in invalid_combinations)


@dataclass(frozen=True)
class ChordSeqItem:
	# the text is not part of the identity of an item: two words giving the
	# same strokes compare equal, that's how conflicts are found
	text: str=field(compare=False)

	def collapse(self)->Tuple[Chord, ...]:
		raise NotImplementedError

@dataclass(frozen=True)
class RootChord(ChordSeqItem):
	chord: Chord

	def collapse(self)->Tuple[Chord, ...]:
		return (self.chord,)

	def __str__(self)->str:
		return f'RC:"{self.text}":{self.chord}'

@dataclass(frozen=True)
class Prefix(ChordSeqItem):
	chord: Chord

	def collapse(self)->Tuple[Chord, ...]:
		return (self.chord,)

	def __str__(self)->str:
		return f'P:"{self.text}-":{self.chord}'

@dataclass(frozen=True)
class Suffix(ChordSeqItem):
	chord: Chord

	def collapse(self)->Tuple[Chord, ...]:
		return (self.chord,)

	def __str__(self)->str:
		return f'S:"-{self.text}":{self.chord}'

@dataclass(frozen=True)
class KnownRoot(ChordSeqItem):
	"""
	A root taken verbatim from the word root dictionary.
	"""
	sequence: "ChordSequence"

	def collapse(self)->Tuple[Chord, ...]:
		return self.sequence.collapse()

	def __str__(self)->str:
		return f'KR:"{self.text}":({self.sequence})'


@dataclass(frozen=True)
class ChordSequence:
	items: Tuple[ChordSeqItem, ...]=()

	def __post_init__(self)->None:
		object.__setattr__(self, "items", tuple(self.items))

	@classmethod
	def from_chord(cls, text: str, chord: Chord)->"ChordSequence":
		return cls((RootChord(text, chord),))

	def __add__(self, other: "ChordSequence")->"ChordSequence":
		return ChordSequence(self.items+other.items)

	def __len__(self)->int:
		return len(self.items)

	def collapse(self)->Tuple[Chord, ...]:
		return tuple(chord for item in self.items for chord in item.collapse())

	def word(self)->str:
		"""
		Re-assemble the word from the text of the items.
		"""
		return "".join(item.text for item in self.items)

	def root(self)->"ChordSequence":
		"""
		Return only the root part: prefixes and suffixes are dropped, known roots are unwrapped.
		"""
		items: List[ChordSeqItem]=[]
		for item in self.items:
			if isinstance(item, RootChord):
				items.append(item)
			elif isinstance(item, KnownRoot):
				items.extend(item.sequence.root().items)
			else:
				assert isinstance(item, (Prefix, Suffix)), item
		return ChordSequence(items)

	def is_oneshot(self)->bool:
		return len(self.items)==1

	def print_chords(self)->str:
		chords: Sequence[Chord]=self.collapse()
		if not chords:
			return "<empty>"
		return " + ".join(map(str, chords))

	def outline(self)->str:
		return "/".join(map(str, self.collapse()))

	def __str__(self)->str:
		return " + ".join(map(str, self.items))
