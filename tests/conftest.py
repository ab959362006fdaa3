from pytest import Item, fixture

from infix.lexer import Lexer
from infix.evaluator import Evaluator


@fixture
def lexer():
    return Lexer()


@fixture
def evaluator():
    return Evaluator()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, for auditing a run.

    Opt in with pytest -rP -o enable_assertion_pass_hook=true. Left off by
    default, since it prints into the very stdout the CLI tests inspect.
    '''
    where = item.name + ':' + str(lineno)
    print('given', where, orig)
    # Drop pytest's trailing full-diff hints.
    print('actual', where, '\n'.join(str(expl).splitlines()[:-2]))
