#!/bin/python3
"""
Generate a Polish steno dictionary from a word list,
then print the chords of the words typed on stdin.
"""
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, TextIO
import argparse
import logging
import sys

from errors import StenoError, InvalidInputError, DecompositionError
from export import flatten_dictionary, word_roots_dictionary, write_json
from generator import Generator, Ledger, conflicts
from lib import corpus_, timing
from rules import RuleTables

logger=logging.getLogger(__name__)

default_input_files=[Path("odm.txt")]

progress_every=1000

def build_parser()->argparse.ArgumentParser:
	parser=argparse.ArgumentParser(
			usage="Generate Plover dictionaries for Polish words.",
			formatter_class=argparse.ArgumentDefaultsHelpFormatter)
	parser.add_argument("-i", "--input", type=Path, action="append",
			help="Word list, one word per line, forms separated by ', '. Can be specified multiple times. "
			f"If not specified, default to {default_input_files}.")
	parser.add_argument("--all-forms", action="store_true",
			help="Use every form on a line instead of only the first one.")
	parser.add_argument("--item-limit", type=int, default=-1,
			help="Only process that many words. Negative means no limit.")
	parser.add_argument("-o", "--output", type=Path, default=Path("syllables.json"),
			help="Path to write the syllable dictionary to.")
	parser.add_argument("--output-word-roots", type=Path, default=Path("word_roots.json"),
			help="Path to write the word root dictionary to.")
	parser.add_argument("--rules", type=Path, default=None,
			help="JSON file overriding some rule tables.")
	parser.add_argument("-v", "--verbose", action="count", default=0,
			help="Log more. Once for INFO, twice for DEBUG.")
	parser.add_argument("--no-query", action="store_true",
			help="Exit after writing the dictionaries instead of reading words from stdin.")
	return parser

def read_words(paths: Iterable[Path], all_forms: bool, item_limit: int)->List[str]:
	words: Set[str]=set()
	for p in paths:
		with timing(f"read {p}"):
			words.update(corpus_(p, all_forms))
	# shorter roots are cached before the longer words built on them
	result=sorted(words, key=lambda x: (len(x), x))
	if item_limit>=0:
		result=result[:item_limit]
	return result

def process_words(generator: Generator, words: Sequence[str])->int:
	"""
	Feed every word to the generator. Return the number of words that failed.
	"""
	failures=0
	for index, word in enumerate(words):
		if index%progress_every==0:
			print(f"{index:7}/{len(words):7} {word}", file=sys.stderr)
		try:
			generator.add_word_root(word)
		except (InvalidInputError, DecompositionError) as e:
			failures+=1
			logger.warning("Skipped: %s", e)
	return failures

def report_conflicts(name: str, ledger: Ledger)->None:
	found=conflicts(ledger)
	for sequence, texts in found:
		logger.debug("%s CONFLICT: %s <- %s", name.upper(), sequence.print_chords(), ", ".join(sorted(texts)))
	print(f"{len(found)}/{len(ledger)} {name} outlines have conflicts")

def query_loop(generator: Generator, lines: Iterable[str], out: TextIO)->None:
	for line in lines:
		if not line.strip():
			continue
		try:
			chords=generator.add_word_root(line)
		except StenoError as e:
			print(f"Error: {e}", file=out)
			continue
		print(f"Chords: {chords.print_chords()}", file=out)
		print(f"Full expansion: {chords}", file=out)
		out.flush()

def main(argv: Optional[Sequence[str]]=None)->int:
	args=build_parser().parse_args(argv)
	args.input=args.input or default_input_files

	logging.basicConfig(
			level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
			format="%(levelname)s %(name)s: %(message)s")

	tables=RuleTables.default() if args.rules is None else RuleTables.from_json(args.rules)
	generator=Generator(tables)

	words=read_words(args.input, args.all_forms, args.item_limit)
	with timing(f"generate {len(words)} words"):
		failures=process_words(generator, words)

	print(f"{len(generator.word_root_dict)} distinct word roots created")
	print(f"{len(generator.chunk_dict)} distinct word chunks created")
	if failures:
		print(f"{failures} words skipped")

	report_conflicts("chunk", generator.chunk_conflict_dict)
	report_conflicts("word root", generator.word_root_conflict_dict)

	write_json(args.output, flatten_dictionary(generator))
	write_json(args.output_word_roots, word_roots_dictionary(generator))
	print(f"Wrote {args.output} and {args.output_word_roots}")

	if not args.no_query:
		query_loop(generator, sys.stdin, sys.stdout)
	return 0

if __name__=="__main__":
	sys.exit(main())
