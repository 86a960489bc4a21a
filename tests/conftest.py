from pytest import Item, fixture

from infixsim.machine import generate


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP, and enable_assertion_pass_hook set.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def table():
    '''
    Steps of a conversion as (current, stack, output, message) rows.
    '''
    def rows(expression, strict=False):
        return [(s.current, s.stack, s.output, s.message)
                for s in generate(expression, strict=strict)]
    return rows
