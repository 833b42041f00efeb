from election.world.areas import compute_areas
from election.world.world import Distribution, Removal, World

__all__ = ["compute_areas", "Distribution", "Removal", "World"]
