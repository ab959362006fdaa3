from os import path
from sys import exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import traceback
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import InfixError
from .calculator import calculate
from .lexer import Lexer
from .parser import Parser


class InteractiveInput:
    '''
    Lines typed at a prompt_toolkit prompt, until Ctrl-D.

    :param status: Called before each line for the right-hand prompt text,
                   e.g. the previous result.
    '''

    def __init__(self, prompt, history=None, status=None):
        self.prompt = prompt
        self.history = history
        self.status = status

    def _session(self):
        return PromptSession(message=self.prompt,
                             rprompt=self.status,
                             vi_mode=True,
                             enable_suspend=True,
                             history=self.history,
                             # One line per expression; nothing continues.
                             multiline=False,
                             erase_when_done=False)

    def __iter__(self):
        session = self._session()
        while True:
            try:
                yield session.prompt()
            except EOFError:
                return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.infix_history'
    LOG_FORMAT = '%(name)s: %(message)s'

    def dumper(self):
        '''
        Dump every line's tokens, then its parsed tree.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<offset>')
        for line in self._lines():
            for token in lexer.lex(line):
                print(token.kind.name,
                      repr(token.text),
                      token.offset,
                      sep='\t')
            try:
                print(Parser(line, lexer=lexer, strict=self.args.strict)
                      .parse())
            except InfixError as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate each line, printing its result.
        '''
        for line in self._lines():
            result = calculate(line, strict=self.args.strict)
            if result.ok:
                self.last = self._round(result.value)
                print(self.last)
            else:
                self._report(result.error)

    def grammar(self):
        '''
        Print the expression grammar.
        '''
        print(Parser.GRAMMAR)

    def raw_grammar(self):
        '''
        Print current internally defined lexeme regex.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        '''
        Yield non-blank input lines.
        '''
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        for line in self.args.expressions:
            if line.strip():
                yield line

    def _round(self, value):
        '''
        Round result to precision, if asked to.
        '''
        if self.args.precision is None:
            return value
        else:
            return round(value, self.args.precision)

    def _report(self, error):
        self.failures += 1
        # Abort just this line; the next one gets a fresh start anyway.
        print('error:', error.args[0], file=sys.stderr)
        if self.args.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__,
                                      file=sys.stderr)

    def status(self):
        '''
        Right-hand prompt: the last good result, if any yet.
        '''
        if self.last is None:
            return ''
        return '= {}'.format(self.last)

    def _prompting_input(self):
        '''
        Prompt for lines when asked to with -p, or when talking to a
        terminal both ways. Plain stdin otherwise.
        '''
        interactive = sys.stdin.isatty() and sys.stdout.isatty()
        if not (self.args.prompt or interactive):
            return sys.stdin
        return InteractiveInput(
            prompt=self.args.prompt or self.DEFAULT_PROMPT,
            history=FileHistory(path.expanduser(self.HISTORY_FILE)),
            status=self.status)

    def _configure_logging(self):
        level = logging.DEBUG if self.args.verbose else logging.WARNING
        logging.basicConfig(level=level,
                            format=self.LOG_FORMAT,
                            stream=sys.stderr)

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--strict',
                                          action='store_true',
                                          help='reject trailing input')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round results to this many '
                                               'decimal places')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-g', '--grammar', self.grammar),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)
        self.failures = 0
        self.last = None

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status: 1 if any line failed, 0 otherwise.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.failures = 0
        self.last = None
        self._configure_logging()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
        return 1 if self.failures else 0
