from .errors import DrawIntegrityError, build_forensic_artifact, persist_forensic_artifact, quota_exhausted_artifact
from .randomness import PythonRandomSource, draw_random, seeded_random

__all__ = [
    "DrawIntegrityError",
    "PythonRandomSource",
    "build_forensic_artifact",
    "draw_random",
    "persist_forensic_artifact",
    "quota_exhausted_artifact",
    "seeded_random",
]
