"""
Breeders backend package.

Pet construction (factories and builder) layered over a breed lookup that is
served either from a local SQL store or from a remote breed service behind an
adapter. The FastAPI app in ``breeders.app`` is a thin surface over it.
"""
