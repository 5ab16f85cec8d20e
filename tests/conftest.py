from pytest import Item, fixture

from infixrpn.lexer import Lexer
from infixrpn.machine import Machine


@fixture
def lexer():
    return Lexer()


@fixture
def machine():
    return Machine()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, e.g. to audit which expressions a run checked.

    Excessive in most cases.

    Use with pytest -rP, and enable_assertion_pass_hook = true in the ini.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))
