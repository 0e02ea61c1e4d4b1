class BadArgumentError(ValueError):
    def __init__(self, position: int, operator: str, expected: str):
        self.position = position
        self.operator = operator
        self.expected = expected
        super().__init__(
            "bad argument #{} to '{}' (expected {})".format(position, operator, expected)
        )


__all__ = (
    'BadArgumentError',
)
