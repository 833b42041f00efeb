from election.backward.sampler import grow_one, grow_to

__all__ = ["grow_one", "grow_to"]
