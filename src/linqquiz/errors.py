# single error family so callers can catch QuizError or the matching builtin


class QuizError(Exception):
    pass


class OutOfRangeError(QuizError, ValueError):
    # input bound below the minimum an operation accepts
    pass


class NullArgumentError(QuizError, TypeError):
    # a required collection was None
    pass


class QuizOverflowError(QuizError, OverflowError):
    # result would not fit the target integer type
    pass
