"""
Generate chord sequences for Polish words.

A word is reduced to a root by removing the longest known prefix and suffix.
The root is either found verbatim in the word root dictionary or split into
syllable chunks; every chunk is looked up in the chunk dictionary or built from
left hand, center and right hand combos.
"""
from typing import List, Dict, Mapping, Optional, Set, Tuple
import enum
import logging

from chord import Chord, ChordSequence, ChordSeqItem, RootChord, Prefix, Suffix, KnownRoot
from errors import ConflictError, DecompositionError
from lib import sanitize_word, find_longest_affix, syllable_split
from rules import RuleTables

logger=logging.getLogger(__name__)

affix_min_match_len=2
combo_min_match_len=1

class Phase(enum.Enum):
	left  =enum.auto()
	center=enum.auto()
	right =enum.auto()

Ledger=Dict[ChordSequence, Set[str]]


def record_conflict(ledger: Ledger, sequence: ChordSequence, text: str, label: str)->None:
	existing: Optional[Set[str]]=ledger.get(sequence)
	if existing is None:
		ledger[sequence]={text}
		return
	if text not in existing:
		logger.debug("%s Stroke(s) %s already exist for: %s", label, sequence.print_chords(), sorted(existing))
	existing.add(text)

def conflicts(ledger: Mapping[ChordSequence, Set[str]])->List[Tuple[ChordSequence, Set[str]]]:
	"""
	Return the outlines shared by more than one text, fewest texts first.
	"""
	return sorted(
			((sequence, texts) for sequence, texts in ledger.items() if len(texts)>1),
			key=lambda x: len(x[1]))


class Generator:
	def __init__(self, tables: Optional[RuleTables]=None)->None:
		self.tables: RuleTables=tables if tables is not None else RuleTables.default()
		self.phase_tables: Tuple[Tuple[Phase, Mapping[str, Chord]], ...]=(
				(Phase.left, self.tables.left_hand_combos),
				(Phase.center, self.tables.center_combos),
				(Phase.right, self.tables.right_hand_combos),
				)
		self.word_root_dict: Dict[str, ChordSequence]={
				word: ChordSequence.from_chord(word, chord)
				for word, chord in self.tables.shortcuts.items()
				}
		self.word_root_conflict_dict: Ledger={}
		self.chunk_dict: Dict[str, ChordSequence]={}
		self.chunk_conflict_dict: Ledger={}

	def add_word_root(self, word: str)->ChordSequence:
		"""
		Generate the chords of word and remember its root and its new chunks.
		Only the root is added to the word root dictionary, but the complete sequence is returned.
		"""
		word_chords, new_chunks=self.gen_word_chords(word)

		root=word_chords.root()
		if root:
			root_word=root.word()
			self.word_root_dict[root_word]=root
			record_conflict(self.word_root_conflict_dict, root, root_word, "WORD-ROOT-CONFLICT")

		for chunk in new_chunks:
			chunk_word=chunk.word()
			self.chunk_dict[chunk_word]=chunk
			record_conflict(self.chunk_conflict_dict, chunk, chunk_word, "CHUNK-CONFLICT")

		return word_chords

	def gen_word_chords(self, word: str)->Tuple[ChordSequence, List[ChordSequence]]:
		"""
		Return the chord sequence of word, and the chunks that are not in the chunk dictionary yet.
		Nothing is modified.
		"""
		word=sanitize_word(word)
		logger.debug("WORD: %s", word)

		word_root=word

		prefix: Optional[Prefix]=None
		if word not in self.tables.prefix_exceptions:
			found=find_longest_affix(word_root, self.tables.prefixes, affix_min_match_len, True)
			if found is not None:
				text, chord=found
				logger.debug("REDUCE PREFIX:\t%s-", text)
				word_root=word_root[len(text):]
				prefix=Prefix(text, chord)
		else:
			logger.debug("SKIP PREFIX EXCEPTION: %s", word)

		suffix: Optional[Suffix]=None
		if word not in self.tables.suffix_exceptions:
			found=find_longest_affix(word_root, self.tables.suffixes, affix_min_match_len, False)
			if found is not None:
				text, chord=found
				logger.debug("REDUCE SUFFIX:\t-%s", text)
				word_root=word_root[:len(word_root)-len(text)]
				suffix=Suffix(text, chord)
		else:
			logger.debug("SKIP SUFFIX EXCEPTION: %s", word)

		root_items: List[ChordSeqItem]=[]
		new_chunks: Dict[str, ChordSequence]={}

		known: Optional[ChordSequence]=self.word_root_dict.get(word_root) if word_root else None
		if known is not None:
			logger.debug("SKIP EXACT-ROOT:\t%s (%s)", word_root, known)
			root_items.append(KnownRoot(word_root, known))
		else:
			for chunk in syllable_split(word_root):
				chunk_chords: Optional[ChordSequence]=self.chunk_dict.get(chunk) or new_chunks.get(chunk)
				if chunk_chords is not None:
					logger.debug("SKIP EXACT-CHUNK:\t%s (%s)", chunk, chunk_chords)
				else:
					try:
						chunk_chords=self.gen_chunk_chords(chunk)
					except DecompositionError as e:
						raise DecompositionError(e.chunk, e.remaining, word) from e
					new_chunks[chunk]=chunk_chords
				root_items.extend(chunk_chords.items)

		items: List[ChordSeqItem]=[]
		if prefix is not None:
			items.append(prefix)
		items.extend(root_items)
		if suffix is not None:
			items.append(suffix)

		result=ChordSequence(items)
		assert result.word()==word, (word, str(result))
		return result, list(new_chunks.values())

	def gen_chunk_chords(self, chunk: str)->ChordSequence:
		"""
		Build the chords of one syllable chunk.

		Each stroke takes as many left hand combos as fit, then center combos,
		then right hand combos (longest match first). A combo that presses an
		already pressed key ends its phase.
		The rest of the chunk goes to the next stroke.
		Raise DecompositionError if a stroke would be empty.
		"""
		logger.debug("CHUNK: %s", chunk)

		remaining=chunk
		items: List[ChordSeqItem]=[]
		while remaining:
			consumed=""
			chord=Chord.empty()
			for phase, table in self.phase_tables:
				text, chord=self.absorb(phase, table, remaining[len(consumed):], chord)
				consumed+=text

			if not chord:
				logger.error("INFINITE-LOOP: %s, %s left", chunk, remaining)
				raise DecompositionError(chunk, remaining)

			items.append(RootChord(consumed, chord))
			remaining=remaining[len(consumed):]

		return ChordSequence(items)

	def absorb(self, phase: Phase, table: Mapping[str, Chord], rest: str, chord: Chord)->Tuple[str, Chord]:
		"""
		Merge combos of one phase into chord while they fit.
		Return the consumed text and the new chord.
		"""
		consumed=""
		while True:
			found=find_longest_affix(rest[len(consumed):], table, combo_min_match_len, True)
			if found is None:
				break
			text, part=found
			try:
				merged=chord.merge(part)
			except ConflictError as e:
				logger.debug("CONFLICT %s:\t%s + %s, %s", phase.name.upper(), consumed, text, e)
				break
			logger.debug("REDUCE %s:\t%s (%s)", phase.name.upper(), text, part)
			consumed+=text
			chord=merged
		return consumed, chord
