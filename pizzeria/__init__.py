# -----------------------------------------------------------------------------
# PIZZERIA
# -----------------------------------------------------------------------------
# Order pizzas by type without knowing which concrete pizza gets made.
# Every pizza goes through the same four stages; every region keeps to its
# own family of recipes.
# -----------------------------------------------------------------------------

__version__ = "1.0.0"
