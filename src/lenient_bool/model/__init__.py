from lenient_bool.model.parsed_bool import ParsedBool
from lenient_bool.model.vocabulary import DEFAULT_VOCABULARY, BoolVocabulary, ascii_fold

__all__ = ["ParsedBool", "BoolVocabulary", "DEFAULT_VOCABULARY", "ascii_fold"]
