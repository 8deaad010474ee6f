"""Parser for the words.hk Cantonese dictionary data export."""

__version__ = "0.3.0"

from wordshk_parser.alignment import (
    ALIGNMENT_RULES as ALIGNMENT_RULES,
    AlignAction as AlignAction,
    align_readings as align_readings,
)
from wordshk_parser.config import (
    ParserConfig as ParserConfig,
    load_config as load_config,
)
from wordshk_parser.entry import (
    parse_entry as parse_entry,
    parse_headwords as parse_headwords,
    parse_tags as parse_tags,
    split_tag_line as split_tag_line,
)
from wordshk_parser.exceptions import (
    AlignmentError as AlignmentError,
    ConfigError as ConfigError,
    DataSourceError as DataSourceError,
    ParseError as ParseError,
    WordsHkError as WordsHkError,
)
from wordshk_parser.language_data import parse_language_data as parse_language_data
from wordshk_parser.models import (
    CsvRecord as CsvRecord,
    DictionaryEntry as DictionaryEntry,
    Headword as Headword,
    Language as Language,
    LanguageData as LanguageData,
    Sense as Sense,
    Tag as Tag,
    TextReadingPair as TextReadingPair,
    TokenClass as TokenClass,
)
from wordshk_parser.reader import (
    BatchResult as BatchResult,
    CsvInfo as CsvInfo,
    ParseStats as ParseStats,
    RowFailure as RowFailure,
    get_csv_info as get_csv_info,
    parse_csv_file as parse_csv_file,
    parse_records as parse_records,
    read_csv_records as read_csv_records,
)
from wordshk_parser.senses import (
    parse_sense as parse_sense,
    parse_senses as parse_senses,
)
from wordshk_parser.text import (
    PUNCTUATION as PUNCTUATION,
    classify_char as classify_char,
    classify_token as classify_token,
    is_ideograph as is_ideograph,
    is_punctuation as is_punctuation,
    is_reading as is_reading,
    is_sentence as is_sentence,
)
from wordshk_parser.tokenizer import tokenize as tokenize

__all__ = [
    # Models
    "CsvRecord",
    "DictionaryEntry",
    "Headword",
    "Language",
    "LanguageData",
    "Sense",
    "Tag",
    "TextReadingPair",
    "TokenClass",
    # Exceptions
    "WordsHkError",
    "ParseError",
    "AlignmentError",
    "ConfigError",
    "DataSourceError",
    # Text
    "PUNCTUATION",
    "classify_char",
    "classify_token",
    "is_ideograph",
    "is_punctuation",
    "is_reading",
    "is_sentence",
    "tokenize",
    # Alignment
    "ALIGNMENT_RULES",
    "AlignAction",
    "align_readings",
    # Entry parsing
    "parse_entry",
    "parse_headwords",
    "parse_tags",
    "split_tag_line",
    "parse_language_data",
    "parse_sense",
    "parse_senses",
    # Batch
    "ParserConfig",
    "load_config",
    "BatchResult",
    "CsvInfo",
    "ParseStats",
    "RowFailure",
    "get_csv_info",
    "parse_csv_file",
    "parse_records",
    "read_csv_records",
]
