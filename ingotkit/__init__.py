"""Small building blocks: delayed and dynamic values, id recycling, late init, primes, reactivity and AVL trees."""

__version__ = "0.1.0"