'''
Symbol classification for the single character infix grammar.
'''

import regex


# Any Unicode letter or number, one character only.
OPERAND = r'[\p{L}\p{N}]'

# Binding strength of each operator. Higher binds tighter.
OPERATORS = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
}

OPEN = '('
CLOSE = ')'


def isoperand(c):
    '''
    Return True if c is a single letter or digit.
    '''
    return regex.fullmatch(OPERAND, c) is not None


def isoperator(c):
    '''
    Return True if c is one of the binary operators.
    '''
    return c in OPERATORS


def precedence(c):
    '''
    Return precedence of operator c, 0 for anything else.

    The 0 is a comparison baseline only; it is what keeps '(' on the stack.
    '''
    return OPERATORS.get(c, 0)
