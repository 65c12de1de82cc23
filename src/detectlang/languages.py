"""Language records and the extension table."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, order=True)
class Language:
    """A language identified from a file extension.

    ``name`` is the display name (``"C++"``) and ``id`` is a lowercase,
    URL-safe slug (``"cpp"``). Records are immutable values and can be
    matched structurally, e.g. ``case Language(_, "rust"):``.
    """

    name: str
    id: str

    def __str__(self) -> str:
        return self.id


def _lang(ext: str, name: str, language_id: str) -> tuple[str, Language]:
    return ext, Language(name, language_id)


# Kept sorted by extension.
_LANGUAGE_ENTRIES: tuple[tuple[str, Language], ...] = (
    _lang("bat", "Batch", "batch"),
    _lang("c", "C", "c"),
    _lang("cc", "C++", "cpp"),
    _lang("cl", "Common Lisp", "common-lisp"),
    _lang("clj", "Clojure", "clojure"),
    _lang("comp", "GLSL", "glsl"),
    _lang("cpp", "C++", "cpp"),
    _lang("cs", "C#", "csharp"),
    _lang("css", "CSS", "css"),
    _lang("cxx", "C++", "cpp"),
    _lang("dart", "Dart", "dart"),
    _lang("frag", "GLSL", "glsl"),
    _lang("geom", "GLSL", "glsl"),
    _lang("glsl", "GLSL", "glsl"),
    _lang("go", "Go", "go"),
    _lang("h", "C", "c"),
    _lang("haml", "Haml", "haml"),
    _lang("handlebars", "Handlebars", "handlebars"),
    _lang("hbs", "Handlebars", "handlebars"),
    _lang("hlsl", "HLSL", "hlsl"),
    _lang("hpp", "C++", "cpp"),
    _lang("html", "HTML", "html"),
    _lang("hxx", "C++", "cpp"),
    _lang("ini", "INI", "ini"),
    _lang("java", "Java", "java"),
    _lang("jinja", "Jinja", "jinja"),
    _lang("jinja2", "Jinja", "jinja"),
    _lang("js", "JavaScript", "javascript"),
    _lang("json", "JSON", "json"),
    _lang("jsonc", "JSON with Comments", "jsonc"),
    _lang("kt", "Kotlin", "kotlin"),
    _lang("less", "Less", "less"),
    _lang("lua", "Lua", "lua"),
    _lang("md", "Markdown", "markdown"),
    _lang("pl", "Perl", "perl"),
    _lang("py", "Python", "python"),
    _lang("pyc", "Python", "python"),
    _lang("pyo", "Python", "python"),
    _lang("rb", "Ruby", "ruby"),
    _lang("rkt", "Racket", "racket"),
    _lang("rs", "Rust", "rust"),
    _lang("sass", "SASS", "sass"),
    _lang("sc", "Scala", "scala"),
    _lang("scala", "Scala", "scala"),
    _lang("scss", "SCSS", "scss"),
    _lang("sh", "Shell", "shell"),
    _lang("sql", "SQL", "sql"),
    _lang("swift", "Swift", "swift"),
    _lang("tesc", "GLSL", "glsl"),
    _lang("tese", "GLSL", "glsl"),
    _lang("tex", "TeX", "tex"),
    _lang("toml", "TOML", "toml"),
    _lang("ts", "TypeScript", "typescript"),
    _lang("vert", "GLSL", "glsl"),
    _lang("xhtml", "XHTML", "xhtml"),
    _lang("xml", "XML", "xml"),
    _lang("yaml", "YAML", "yaml"),
    _lang("yml", "YAML", "yaml"),
)

EXTENSION_MAP: MappingProxyType[str, Language] = MappingProxyType(dict(_LANGUAGE_ENTRIES))

_LANGUAGES_BY_ID: MappingProxyType[str, Language] = MappingProxyType(
    {language.id: language for _, language in _LANGUAGE_ENTRIES}
)


def all_languages() -> tuple[Language, ...]:
    """Return every distinct language in the table, ordered by id."""
    return tuple(_LANGUAGES_BY_ID[language_id] for language_id in sorted(_LANGUAGES_BY_ID))


def is_known_id(language_id: str) -> bool:
    """Check whether a language id exists in the table."""
    return language_id in _LANGUAGES_BY_ID


def extensions_for(language_id: str) -> tuple[str, ...]:
    """Return the sorted extensions that map to a language id.

    Args:
        language_id: Slug such as ``"cpp"``. Matched exactly.

    Returns:
        Extensions without a leading dot, or an empty tuple for unknown ids.
    """
    return tuple(ext for ext, language in _LANGUAGE_ENTRIES if language.id == language_id)
