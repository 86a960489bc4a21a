'''
Command line interface tests
'''

import sys
import io

from pytest import fixture

from infixsim import cli
from infixsim.cli import CLI


class Terminal:
    '''
    Stands in for a stream on a tty.
    '''
    def fileno(self):
        return 0


class Session:
    '''
    Stands in for PromptSession, answering Enter a fixed number of times.
    '''
    prompts = 0
    answers = None

    def __init__(self, *args, **kwargs):
        pass

    def prompt(self, *args, **kwargs):
        if type(self).answers is not None and \
           type(self).prompts >= type(self).answers:
            raise EOFError
        type(self).prompts += 1
        return ''


class CurrentStderr:
    '''
    Forwards to whatever sys.stderr is when written, i.e. the stream
    capsys installs for the test body rather than the setup-phase one.
    '''
    def __getattr__(self, name):
        return getattr(sys.stderr, name)


@fixture(autouse=True)
def console(monkeypatch, capsys):
    # cli binds stderr on import, before capsys replaces it.
    monkeypatch.setattr(cli, 'stderr', CurrentStderr())
    monkeypatch.setattr(cli, 'isatty', lambda fd: False)


@fixture
def terminal(monkeypatch):
    monkeypatch.setattr(cli, 'isatty', lambda fd: True)
    monkeypatch.setattr(cli, 'stdin', Terminal())
    monkeypatch.setattr(cli, 'stdout', Terminal())
    monkeypatch.setattr(Session, 'prompts', 0)
    monkeypatch.setattr(Session, 'answers', None)
    monkeypatch.setattr(cli, 'PromptSession', Session)
    return Session


def run(*args):
    CLI().run(args=list(args))


def test_postfix(capsys):
    run('-e', 'A+B*C', '(A + B) * C')
    out, err = capsys.readouterr()
    assert out.splitlines() == ['ABC*+', 'AB+C*']
    assert err == ''


def test_empty_expression(capsys):
    run('-e', 'A', '   ', 'B')
    out, err = capsys.readouterr()
    # Bad lines are reported, the rest still converted.
    assert out.splitlines() == ['A', 'B']
    assert err.splitlines() == ['Please enter infix expression']


def test_strict(capsys):
    run('-s', '-e', 'A+B)', '(A')
    out, err = capsys.readouterr()
    assert out == ''
    assert err.splitlines() == ["Unmatched ')'", "Unmatched '('"]


def test_permissive(capsys):
    run('-e', 'A+B)', '(A')
    out, err = capsys.readouterr()
    assert out.splitlines() == ['AB+', 'A']
    assert err == ''


def test_dump(capsys):
    run('-D', '-e', 'A')
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        '#\tsymbol\tstack\toutput\texplanation',
        '0\t-\t(empty)\t-\tStarting conversion...',
        '1\tA\t(empty)\tA\tOperand \N{RIGHTWARDS ARROW} added to output',
        'A',
    ]


def test_verbose(capsys):
    run('-v', '-e', 'A+B')
    out, _ = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 1 + 5 + 1
    assert lines[-2] == "4\tEND\t(empty)\tAB+\tPopped '+'"
    assert lines[-1] == 'AB+'


def test_step(capsys):
    run('-S', '-e', 'A')
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        '#\tsymbol\tstack\toutput\texplanation',
        'A',
        '0\t-\t(empty)\t-\tStarting conversion...',
        'A',
        '^',
        '1\tA\t(empty)\tA\tOperand \N{RIGHTWARDS ARROW} added to output',
        'Final postfix: A',
    ]


def test_step_points_at_symbol(capsys):
    run('-S', '-e', 'A * B')
    out, _ = capsys.readouterr()
    lines = out.splitlines()
    # Pointer under the 'B'.
    assert lines[lines.index('3\tB\t*\tAB\tOperand \N{RIGHTWARDS ARROW} '
                             'added to output') - 1] == '  ^'
    assert '\t*\t*\tA\tOperator pushed' in out
    assert lines[-1] == 'Final postfix: AB*'


def test_raw_grammar(capsys):
    run('-G', '-e')
    out, _ = capsys.readouterr()
    assert '(?<operand>' in out
    assert '(?<other>.)' in out


def test_step_waits_on_terminal(capsys, terminal):
    run('-S', '-e', 'A+B')
    out, _ = capsys.readouterr()
    # One pause between each of the 5 steps.
    assert terminal.prompts == 4
    assert out.splitlines()[-1] == 'Final postfix: AB+'


def test_step_stops_on_eof(capsys, terminal):
    terminal.answers = 1
    run('-S', '-e', 'A+B')
    out, _ = capsys.readouterr()
    assert terminal.prompts == 1
    assert '1\tA\t(empty)\tA\tOperand \N{RIGHTWARDS ARROW} added to output' \
        in out
    assert '\t+\t+\tA\tOperator pushed' not in out
    assert out.splitlines()[-1] == 'Final postfix: AB+'


def test_dump_never_waits(capsys, terminal):
    run('-D', '-e', 'A+B')
    assert terminal.prompts == 0


def test_piped_blank_lines(capsys, monkeypatch):
    monkeypatch.setattr(cli, 'stdin', io.StringIO('A+B\n\n   \nC\n\n'))
    run()
    out, err = capsys.readouterr()
    assert out.splitlines() == ['AB+', 'C']
    assert err == ''
