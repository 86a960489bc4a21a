from functools import reduce
import operator

import regex

from .classifier import OPERAND, OPERATORS, OPEN, CLOSE


class Lexer:
    '''
    Lexer for the single character infix grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    SPACE = r'\s+'

    # Every symbol is exactly one character, anything unknown included. The
    # machine decides what to do with those.
    LEXEME = r'(?<operand>' + OPERAND + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<open>' + regex.escape(OPEN) + r')|' \
             r'(?<close>' + regex.escape(CLOSE) + r')|' \
             r'(?<other>.)'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def normalize(self, line):
        '''
        Strip all whitespace, wherever it is.
        '''
        return regex.sub(type(self).SPACE, '', line)

    def lex(self, line):
        '''
        Take a line and yield a match for every symbol, whitespace removed.
        '''
        line = self.normalize(line)
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            yield match
            line = line[len(match.group(0)):]

    def matchedgroups(self, match):
        '''
        Return the groups a lexeme matched, by name.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
