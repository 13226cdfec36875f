"""Ancestry and lineage analysis constants."""

# Generations walked above each parent (5 = great-great-great-grandparents).
# Bounds a walk at 2^5 lookups per side on a complete pedigree.
DEFAULT_ANCESTOR_DEPTH = 5

# A lineage is specialized when the top discipline holds strictly more than
# this share of all ancestral results...
SPECIALIZATION_THRESHOLD = 0.6

# ...and at least this many distinct ancestors have results, so one prolific
# ancestor cannot make a whole lineage look specialized.
MIN_CONTRIBUTING_ANCESTORS = 3
