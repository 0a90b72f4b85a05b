import string
import random


def generate_random_string(length=8, rng=None):
    """Generate a random lowercase alphanumeric string

    Pass a seeded ``random.Random`` as ``rng`` for reproducible output.
    """
    rng = rng or random
    chars = string.ascii_lowercase + string.digits
    return "".join(rng.choice(chars) for _ in range(length))
