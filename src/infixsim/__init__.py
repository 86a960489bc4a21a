'''
Infix to postfix converter, step by step.

Converts single character infix expressions (A+B*C, (1+2)^3, ...) to postfix
with the usual operator precedence stack, recording every intermediate state
along the way so it can be played back one step at a time.

Why record every step?

- Shunting the stack is easy to get wrong on paper; watching it is easier.
- The final postfix alone doesn't explain itself.
- Playback is somebody else's problem; a trace is just data.

Not a parser. Anything beyond single character operands and + - * / ^ with
parentheses is either skipped or taken at face value, unless strict.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, generate, convert
from .trace import Step, Trace, Cursor
from .util import InfixError, EmptyInputError, MalformedExpressionError


__all__ = 'Machine', 'Lexer', 'CLI', 'Step', 'Trace', 'Cursor', \
          'generate', 'convert', \
          'InfixError', 'EmptyInputError', 'MalformedExpressionError'
