"""ParaBank user journeys, numbered in the order they build on each other."""
