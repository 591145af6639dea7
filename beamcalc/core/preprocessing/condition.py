from enum import Enum


class Condition(str, Enum):
    """Support conditions a beam can be analysed for.

    The values equal the identifiers used by callers to select a condition,
    so :python:`Condition('two-span-unequal')` resolves the member from user
    input.
    """

    SIMPLY_SUPPORTED = 'simply-supported'
    TWO_SPAN_UNEQUAL = 'two-span-unequal'

    def __str__(self):
        return self.value
