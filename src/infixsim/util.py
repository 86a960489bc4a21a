from functools import wraps


class InfixError(Exception):
    pass


class EmptyInputError(InfixError):
    '''
    Nothing left to convert once whitespace is stripped.
    '''
    def __init__(self, message='Please enter infix expression'):
        super().__init__(message)


class MalformedExpressionError(InfixError):
    '''
    Only raised when converting strictly.
    '''
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions into InfixErrors.

    Passes through InfixErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except InfixError:
                raise
            except Exception as e:
                raise InfixError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
