import io
import json

from generator import Generator
from main import main, query_loop, read_words


def write_corpus(tmp_path):
	p=tmp_path/"words.txt"
	p.write_text("kotek, kotka\nkot, kota\nprzebiegłość\ndwa słowa\n", encoding="utf-8")
	return p

def test_main_writes_dictionaries(tmp_path, capsys):
	corpus=write_corpus(tmp_path)
	output=tmp_path/"syllables.json"
	output_word_roots=tmp_path/"word_roots.json"
	assert main([
		"-i", str(corpus),
		"-o", str(output),
		"--output-word-roots", str(output_word_roots),
		"--no-query",
		])==0

	syllables=json.loads(output.read_text(encoding="utf-8"))
	word_roots=json.loads(output_word_roots.read_text(encoding="utf-8"))
	assert syllables["KAUT"]=="{&kot}"
	assert syllables["ZKPLEBG"]=="{^}ek"
	assert word_roots["KAUT"]=="kot"

	out=capsys.readouterr().out
	assert "distinct word roots created" in out
	assert "chunk outlines have conflicts" in out
	assert "word root outlines have conflicts" in out

def test_main_query(tmp_path, capsys, monkeypatch):
	corpus=write_corpus(tmp_path)
	monkeypatch.setattr("sys.stdin", io.StringIO("kotek\n\nabc1\n"))
	assert main([
		"-i", str(corpus),
		"-o", str(tmp_path/"a.json"),
		"--output-word-roots", str(tmp_path/"b.json"),
		"--item-limit", "1",
		])==0
	out=capsys.readouterr().out
	assert "Chords: KAUT + ZKPLEBG" in out
	assert "Error: 'abc1' rejected" in out

def test_query_loop():
	out=io.StringIO()
	query_loop(Generator(), ["kotek\n"], out)
	assert out.getvalue().splitlines()==[
			"Chords: KAUT + ZKPLEBG",
			'Full expansion: RC:"kot":KAUT + S:"-ek":ZKPLEBG',
			]

def test_read_words(tmp_path):
	a=tmp_path/"a.txt"
	b=tmp_path/"b.txt"
	a.write_text("kotek\nkot\n", encoding="utf-8")
	b.write_text("ab\nkot\nzz\n", encoding="utf-8")
	assert read_words([a, b], False, -1)==["ab", "zz", "kot", "kotek"]
	assert read_words([a, b], False, 3)==["ab", "zz", "kot"]
