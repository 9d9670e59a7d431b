import argparse
import logging
import logging.config
import sys
from typing import TextIO, Sequence
from platform import python_implementation
from . import settings
from .counter import Counter
from .tokens import TOKENIZERS, tokenize


logger = logging.getLogger(__name__)

STDIN = '-'


class CountCommand:
    name = 'frequency-counter'
    help = 'Counts the tokens of text files and prints the most common ones'
    interpreter: str = python_implementation()

    def __init__(self, stdout: TextIO | None = None, stdin: TextIO | None = None):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=self.name, description=self.help)
        self.add_arguments(parser)
        return parser

    def add_arguments(self, parser: argparse.ArgumentParser):
        parser.add_argument(
            'files',
            nargs='*',
            metavar='FILE',
            help=f'Files to count, {STDIN} or nothing for standard input',
        )
        parser.add_argument(
            '--mode',
            choices=sorted(TOKENIZERS),
            default='words',
            help='What to count',
        )
        parser.add_argument(
            '--ignore-case',
            action='store_true',
            dest='ignore_case',
            help='Count tokens case-insensitively',
        )
        parser.add_argument(
            '--exclude',
            action='append',
            default=[],
            metavar='FILE',
            help='Subtract the tokens of this file from the counts',
        )
        parser.add_argument(
            '--top',
            type=int,
            default=settings.DEFAULT_TOP,
            help='Print only the N most common tokens, 0 for all',
        )
        parser.add_argument(
            '-v',
            '--verbosity',
            type=int,
            choices=sorted(settings.VERBOSITY_LEVELS),
            default=None,
            help='Logging verbosity',
        )

    def read(self, path: str) -> str:
        if path == STDIN:
            return self.stdin.read()
        with open(path, encoding=settings.ENCODING) as f:
            return f.read()

    def count(self, paths: Sequence[str], mode: str, ignore_case: bool) -> Counter[str]:
        counter = Counter[str]()
        for path in paths:
            logger.debug(f'Counting {mode} of {path}')
            before = counter.total()
            counter.update(tokenize(self.read(path), mode=mode, ignore_case=ignore_case))
            logger.info(f'Counted {counter.total() - before} {mode} in {path}')
        return counter

    def handle(self, files: Sequence[str], mode: str, ignore_case: bool, exclude: Sequence[str], top: int) -> int:
        logger.info(f'Running {self.name} ({settings.VERSION}) using {self.interpreter}...')
        try:
            counter = self.count(files or [STDIN], mode, ignore_case)
            if exclude:
                excluded = self.count(exclude, mode, ignore_case)
                counter = counter - excluded
                logger.info(f'{len(excluded)} distinct {mode} excluded')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f'Error while running {self.name}: {e}')
            return 1
        for token, count in counter.most_common(top if top > 0 else None):
            self.stdout.write(f'{count}\t{token}\n')
        logger.info(f'{self.name} finished successfully: {len(counter)} distinct {mode}, {counter.total()} in total.')
        return 0

    def run_from_argv(self, argv: Sequence[str] | None = None) -> int:
        options = self.create_parser().parse_args(argv)
        if options.verbosity is not None:
            logging.getLogger().setLevel(settings.VERBOSITY_LEVELS[options.verbosity])
        return self.handle(
            files=options.files,
            mode=options.mode,
            ignore_case=options.ignore_case,
            exclude=options.exclude,
            top=options.top,
        )


def main(argv: Sequence[str] | None = None) -> int:
    logging.config.dictConfig(settings.LOGGING)
    return CountCommand().run_from_argv(argv)
