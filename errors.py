from typing import Optional


class StenoError(Exception):
	pass

class ConflictError(StenoError):
	"""
	Two chords that are merged press a common key.
	"""
	def __init__(self, a, b)->None:
		super().__init__(f"Duplicate keys between {a} and {b}")
		self.a=a
		self.b=b

class InvalidChordError(StenoError):
	def __init__(self, chord, combination)->None:
		super().__init__(f"Invalid chord {chord}: contains invalid combination {combination}")
		self.chord=chord
		self.combination=combination

class UnrecognizedCharacterError(StenoError):
	def __init__(self, character: str, text: str)->None:
		super().__init__(f"Unknown character {character!r} in chord {text!r}")
		self.character=character
		self.text=text

class InvalidInputError(StenoError):
	def __init__(self, word: str)->None:
		super().__init__(f"{word!r} rejected - must be a single word made up exclusively of Polish and latin characters.")
		self.word=word

class DecompositionError(StenoError):
	"""
	No phase of the chunk assembly could consume the next character.
	"""
	def __init__(self, chunk: str, remaining: str, word: Optional[str]=None)->None:
		super().__init__(f"infinite loop on {chunk!r}, {remaining!r} left"+
				("" if word is None else f" (word {word!r})"))
		self.chunk=chunk
		self.remaining=remaining
		self.word=word
