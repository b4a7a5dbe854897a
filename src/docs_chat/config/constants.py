"""Fixed word lists and labels."""

from __future__ import annotations

# Characters stripped from a question before it is sent to the search index.
QUERY_PUNCTUATION = "?.,!;:"

# Common verbs, pronouns and the product names themselves: they match nearly
# every page of the docs and drown out the technical terms.
QUERY_STOPWORDS = frozenset(
    {
        "how", "do", "does", "did", "i", "can", "could", "would", "should",
        "you", "please", "show", "me", "the", "a", "an", "in", "to", "for",
        "with", "using", "use", "compute", "calculate", "create", "make",
        "get", "find", "my", "vadalog", "prometheux",
    }
)

MIN_KEYWORD_LENGTH = 3

DEFAULT_DOC_TITLE = "Documentation"
EXCERPT_LENGTH = 200

CODE_LANGUAGE = "vadalog"
CODE_DESCRIPTION = "Vadalog code example"

NO_RESPONSE_TEXT = "No response"
