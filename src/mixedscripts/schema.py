# -*- coding: ascii -*-
"""Constants shared across mixedscripts modules."""

from typing import Final, Tuple, FrozenSet


# Scripts allowed when the caller does not name any
DEFAULT_SCRIPTS: Final[Tuple[str, ...]] = ('Latin', 'Common')

# Keyword that introduces an in-text directive, e.g. "## mixedscripts Latin,Common"
DEFAULT_MARKER: Final[str] = 'mixedscripts'

# "=for <marker> default" restores the file's default script set
RESET_KEYWORD: Final[str] = 'default'

# Placeholder for code points without a Unicode name (controls, unassigned)
NO_NAME: Final[str] = 'NO NAME'

# Diagnostic wording is matched verbatim by golden-output tests
MESSAGE_FORMAT: Final[str] = 'Unexpected {script} character {name} on line {line} character {column} in {path}'

# Config file picked up from the working directory when no path is given
CONFIG_FILENAME: Final[str] = '.mixedscripts.yaml'

# Batch outcome statuses
STATUS_PASS: Final[str] = 'pass'
STATUS_FAIL: Final[str] = 'fail'
STATUS_ERROR: Final[str] = 'error'

# Script property values (PropertyValueAliases.txt, sc), Unicode 15.1
KNOWN_SCRIPTS: Final[Tuple[str, ...]] = (
    'Adlam', 'Ahom', 'Anatolian_Hieroglyphs', 'Arabic', 'Armenian', 'Avestan',
    'Balinese', 'Bamum', 'Bassa_Vah', 'Batak', 'Bengali', 'Bhaiksuki',
    'Bopomofo', 'Brahmi', 'Braille', 'Buginese', 'Buhid',
    'Canadian_Aboriginal', 'Carian', 'Caucasian_Albanian', 'Chakma', 'Cham',
    'Cherokee', 'Chorasmian', 'Common', 'Coptic', 'Cuneiform', 'Cypriot',
    'Cypro_Minoan', 'Cyrillic',
    'Deseret', 'Devanagari', 'Dives_Akuru', 'Dogra', 'Duployan',
    'Egyptian_Hieroglyphs', 'Elbasan', 'Elymaic', 'Ethiopic',
    'Georgian', 'Glagolitic', 'Gothic', 'Grantha', 'Greek', 'Gujarati',
    'Gunjala_Gondi', 'Gurmukhi',
    'Han', 'Hangul', 'Hanifi_Rohingya', 'Hanunoo', 'Hatran', 'Hebrew',
    'Hiragana',
    'Imperial_Aramaic', 'Inherited', 'Inscriptional_Pahlavi',
    'Inscriptional_Parthian',
    'Javanese',
    'Kaithi', 'Kannada', 'Katakana', 'Kawi', 'Kayah_Li', 'Kharoshthi',
    'Khitan_Small_Script', 'Khmer', 'Khojki', 'Khudawadi',
    'Lao', 'Latin', 'Lepcha', 'Limbu', 'Linear_A', 'Linear_B', 'Lisu',
    'Lycian', 'Lydian',
    'Mahajani', 'Makasar', 'Malayalam', 'Mandaic', 'Manichaean', 'Marchen',
    'Masaram_Gondi', 'Medefaidrin', 'Meetei_Mayek', 'Mende_Kikakui',
    'Meroitic_Cursive', 'Meroitic_Hieroglyphs', 'Miao', 'Modi', 'Mongolian',
    'Mro', 'Multani', 'Myanmar',
    'Nabataean', 'Nag_Mundari', 'Nandinagari', 'New_Tai_Lue', 'Newa', 'Nko',
    'Nushu', 'Nyiakeng_Puachue_Hmong',
    'Ogham', 'Ol_Chiki', 'Old_Hungarian', 'Old_Italic', 'Old_North_Arabian',
    'Old_Permic', 'Old_Persian', 'Old_Sogdian', 'Old_South_Arabian',
    'Old_Turkic', 'Old_Uyghur', 'Oriya', 'Osage', 'Osmanya',
    'Pahawh_Hmong', 'Palmyrene', 'Pau_Cin_Hau', 'Phags_Pa', 'Phoenician',
    'Psalter_Pahlavi',
    'Rejang', 'Runic',
    'Samaritan', 'Saurashtra', 'Sharada', 'Shavian', 'Siddham', 'SignWriting',
    'Sinhala', 'Sogdian', 'Sora_Sompeng', 'Soyombo', 'Sundanese',
    'Syloti_Nagri', 'Syriac',
    'Tagalog', 'Tagbanwa', 'Tai_Le', 'Tai_Tham', 'Tai_Viet', 'Takri', 'Tamil',
    'Tangsa', 'Tangut', 'Telugu', 'Thaana', 'Thai', 'Tibetan', 'Tifinagh',
    'Tirhuta', 'Toto',
    'Ugaritic', 'Unknown',
    'Vai', 'Vithkuqi',
    'Wancho', 'Warang_Citi',
    'Yezidi', 'Yi',
    'Zanabazar_Square',
)

# Directories never descended into by the batch scanner
EXCLUDE_DIRS: Final[FrozenSet[str]] = frozenset({
    ".git", ".hg", ".svn", ".venv", "venv", "__pycache__", ".mypy_cache",
    ".pytest_cache", ".ruff_cache", ".idea", ".vscode", "node_modules", ".tox",
    ".nox", "dist", "build", ".eggs", "htmlcov", ".cache", "blib", "_build",
})

# Suffixes treated as text/source by the default file selector
TEXT_SUFFIXES: Final[FrozenSet[str]] = frozenset({
    ".py", ".pyi", ".pyx", ".pxd", ".pl", ".pm", ".t", ".pod", ".psgi",
    ".sh", ".bash", ".zsh", ".rb", ".js", ".mjs", ".ts", ".css", ".scss",
    ".html", ".htm", ".xml", ".json", ".yaml", ".yml", ".toml", ".ini",
    ".cfg", ".conf", ".md", ".rst", ".txt", ".c", ".h", ".cpp", ".hpp",
    ".go", ".rs", ".java", ".sql", ".tt", ".tmpl",
})

# Suffixes that are binary and never scanned
BINARY_SUFFIXES: Final[FrozenSet[str]] = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".pdf", ".bin", ".pkl",
    ".gz", ".bz2", ".xz", ".zip", ".7z", ".tar", ".rar", ".exe", ".dll", ".so",
    ".dylib", ".pyc", ".pyo", ".woff", ".woff2", ".ttf", ".otf", ".eot",
    ".mp3", ".mp4", ".avi", ".mov", ".xlsx", ".xls", ".doc", ".docx", ".ppt",
    ".pptx", ".parquet", ".feather", ".h5", ".hdf5", ".sqlite", ".db",
})
