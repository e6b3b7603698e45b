from .validator import validate_wordlist, pretty_summary, is_abjad_word
from .io import read_lines, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "is_abjad_word", "read_lines", "write_lines"]
