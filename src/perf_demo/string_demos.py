"""
String building demos: repeated concatenation vs an append buffer.

Both functions perform the same number of updates and produce the same
text. Only the way memory is used differs.
"""

import io

from .config import DEFAULT_ITERATIONS


def bad_string_manipulation(iterations: int = DEFAULT_ITERATIONS) -> int:
    """Build a string by rebinding it with ``+`` on every iteration.

    Each step copies the whole current value into a new ``str``, so total
    work grows quadratically and every intermediate string is a fresh
    allocation. CPython can sometimes resize a uniquely referenced string in
    place, but that is an interpreter detail, not something to rely on.

    Returns:
        Length of the final string
    """
    print("Starting Bad String Manipulation")
    my_message = ""
    for i in range(iterations):
        my_message = my_message + str(i)

    print(f"Completed {iterations:,} string updates")
    return len(my_message)


def good_string_manipulation(iterations: int = DEFAULT_ITERATIONS) -> int:
    """Build the same string by appending into a single ``io.StringIO``.

    Returns:
        Length of the final string
    """
    print("Starting Good String Manipulation")
    my_message = io.StringIO()
    for i in range(iterations):
        my_message.write(str(i))

    print(f"Completed {iterations:,} string updates")
    return len(my_message.getvalue())
