import re
from typing import Callable, Iterable, Iterator


WORD_REGEX = re.compile(r'\w+(?:[\'’-]\w+)*')


def words(text: str) -> Iterator[str]:
    return (match.group(0) for match in WORD_REGEX.finditer(text))


def lines(text: str) -> Iterator[str]:
    return (line.strip() for line in text.splitlines() if line.strip())


def chars(text: str) -> Iterator[str]:
    return (c for c in text if not c.isspace())


TOKENIZERS: dict[str, Callable[[str], Iterator[str]]] = {
    'words': words,
    'lines': lines,
    'chars': chars,
}


def tokenize(text: str, mode: str = 'words', ignore_case: bool = False) -> Iterable[str]:
    tokens = TOKENIZERS[mode](text)
    if ignore_case:
        return (token.lower() for token in tokens)
    return tokens
