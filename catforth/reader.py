"""
catforth Reader - Turns source text into VM tokens
"""

from .compiler import lit
from .core import DefinitionError


def parse_number(token):
    """Parse a token as an int or float, raising ValueError otherwise"""
    lowered = token.lower()
    sign = ''
    if lowered[:1] in '+-':
        sign, lowered = lowered[0], lowered[1:]
    if lowered.startswith(('0x', '0b', '0o')):
        return int(sign + lowered, 0)
    try:
        return int(token, 10)
    except ValueError:
        pass
    if any(c.isdigit() for c in lowered) and not lowered.startswith(('inf', 'nan')):
        return float(token)
    raise ValueError(token)


def tokenize(text):
    """Split text into word names and literal tokens.

    "..." is a string literal, ( ... ) and \\ to end of line are comments,
    and ": name" expands to the literal name followed by define.
    """
    tokens = []
    i = 0
    n = len(text)
    expect_name = False

    while i < n:
        if text[i].isspace():
            i += 1
            continue

        if text[i] == '"':
            end = text.find('"', i + 1)
            if end == -1:
                end = n
            tokens.append(lit(text[i + 1:end]))
            if expect_name:
                tokens.append('define')
                expect_name = False
            i = end + 1
            continue

        if text[i] == '(' and (i + 1 >= n or text[i + 1].isspace()):
            i += 1
            depth = 1
            while i < n and depth > 0:
                if text[i] == '(':
                    depth += 1
                elif text[i] == ')':
                    depth -= 1
                i += 1
            continue

        if text[i] == '\\' and (i + 1 >= n or text[i + 1].isspace()):
            while i < n and text[i] != '\n':
                i += 1
            continue

        start = i
        while i < n and not text[i].isspace():
            i += 1
        token = text[start:i]

        if expect_name:
            tokens.append(lit(token))
            tokens.append('define')
            expect_name = False
        elif token == ':':
            expect_name = True
        else:
            try:
                tokens.append(parse_number(token))
            except ValueError:
                tokens.append(token)

    if expect_name:
        raise DefinitionError("':' needs a name")
    return tokens
