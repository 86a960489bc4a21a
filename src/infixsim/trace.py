'''
Recorded conversion steps, and a cursor to play them back with.
'''

from collections import namedtuple

from .util import InfixError, wrap_user_errors


# Shown instead of a stack with nothing on it.
EMPTY = '(empty)'
# Current symbol before anything is read, and while draining.
START = '-'
END = 'END'


class Step(namedtuple('Step', ['current', 'stack', 'output', 'message',
                               'kind', 'position'])):
    '''
    One state of the conversion, after the mutation it describes.

    :param current: Symbol being processed, START or END.
    :param stack: Operator stack, top first, or EMPTY.
    :param output: Postfix output so far.
    :param message: Why this step happened.
    :param kind: What happened; one of KINDS.
    :param position: Index of current in the normalized expression, None
                     for START and END.
    '''
    __slots__ = ()

    KINDS = ('start', 'operand', 'open', 'pop', 'close', 'push', 'drain')

    @property
    def symbols(self):
        '''
        Stack contents as a tuple, top first.
        '''
        if self.stack == EMPTY:
            return ()
        return tuple(self.stack)

    @property
    def top(self):
        '''
        Symbol on top of the stack, None if there's nothing.
        '''
        return self.symbols[0] if self.symbols else None


class Trace:
    '''
    Every step of one conversion, in the order they happened.

    Built once, never changed. Indexable and iterable like a tuple.
    '''
    __slots__ = ('_steps', '_postfix', '_expression')

    def __init__(self, steps, postfix, expression=''):
        '''
        :param steps: Steps, initial step first.
        :param postfix: Final output.
        :param expression: Normalized infix expression that was converted.
        '''
        self._steps = tuple(steps)
        # There is always an initial step to play back.
        if not self._steps:
            raise InfixError('Trace needs at least one step')
        self._postfix = postfix
        self._expression = expression

    @property
    def expression(self):
        return self._expression

    def stepcount(self):
        return len(self._steps)

    @wrap_user_errors('No step {1} in trace')
    def stepat(self, i):
        '''
        Return step i. Negative indices are not steps.
        '''
        if i < 0:
            raise IndexError(i)
        return self._steps[i]

    def finalpostfix(self):
        return self._postfix

    def __len__(self):
        return len(self._steps)

    def __getitem__(self, i):
        return self._steps[i]

    def __iter__(self):
        return iter(self._steps)

    def __repr__(self):
        return '{}({!r} -> {!r}, {} steps)'.format(type(self).__name__,
                                                   self._expression,
                                                   self._postfix,
                                                   len(self._steps))


class Cursor:
    '''
    Forward only position within a trace.
    '''

    def __init__(self, trace):
        self.reset(trace)

    def reset(self, trace):
        '''
        Play back trace from its first step.
        '''
        self.trace = trace
        self.index = 0

    def current(self):
        return self.trace[self.index]

    def advance(self):
        '''
        Move to the next step, unless already on the last.

        Return True if now on the last step.
        '''
        if self.index < len(self.trace) - 1:
            self.index += 1
        return self.atend()

    def atend(self):
        return self.index == len(self.trace) - 1
