"""
Pygments lexer for literate documents

Highlights the three kinds of lines a literate document contains, so a
document can be displayed with its directives and code blocks set apart
from the prose.

Token types:
- Comment.Preproc: Directive delimiters (<< and >>)
- Name.Label: Directive payload (target name, !-- or #--)
- String: Indented code
- Text: Prose
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Comment, Name, String, Text, Whitespace


class LiterateLexer(RegexLexer):
    """
    Lexer for mdweb literate documents

    Example:
        Some prose.
        \t<<hello.c>>
        \tint main(void) { return 0; }

    Tokens:
        Some prose.     → Text
        <<, >>          → Comment.Preproc
        hello.c         → Name.Label
        int main(...)   → String
    """

    name = 'Literate'
    aliases = ['mdweb', 'literate']
    filenames = ['*.lit.md']

    tokens = {
        'root': [
            # Directive line: indent, <<payload>>, trailing whitespace
            (r'^(\t|    )(<<)(.*)(>>)([ \t\r]*)$',
             bygroups(Whitespace, Comment.Preproc, Name.Label, Comment.Preproc, Whitespace)),

            # Indented code
            (r'^(\t|    )(.*)$', bygroups(Whitespace, String)),

            # Prose
            (r'[^\n]+', Text),
            (r'\n', Whitespace),
        ],
    }


def get_lexer() -> LiterateLexer:
    """
    Get the LiterateLexer instance

    Returns:
        LiterateLexer instance ready for use with Pygments
    """
    return LiterateLexer()
